import logging
from typing import Optional

from src.api.schemas import (
    ConstantsResponse,
    EdgeResponse,
    LayoutRequest,
    LayoutResponse,
    NodeResponse,
    PointResponse,
)
from src.graph.edges import LANE_COLORS
from src.graph.layout import (
    LANE_WIDTH,
    RENDER_BATCH,
    ROW_HEIGHT,
    calculate_graph_layout,
    graph_height,
    graph_width,
)
from src.graph.models import CommitRef, GraphEdge, GraphLayout, GraphNode

logger = logging.getLogger(__name__)

class LayoutTooLargeError(ValueError):
    """Raised when a request carries more commits than the service accepts."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"{count} commits requested, at most {limit} allowed")
        self.count = count
        self.limit = limit

class LayoutService:
    def __init__(self, max_commits: int = 10000):
        self.max_commits = max_commits

    def get_layout(self, req: LayoutRequest, limit: Optional[int] = None) -> LayoutResponse:
        """Lays out the request's commits, or only the first `limit` of them."""
        commits = req.commits if limit is None else req.commits[:limit]
        if len(commits) > self.max_commits:
            raise LayoutTooLargeError(len(commits), self.max_commits)

        layout = calculate_graph_layout(
            [CommitRef(id=c.id, parent_ids=c.parent_ids) for c in commits]
        )
        logger.info(
            "Layout for %d commits: %d edges, max lane %d",
            len(layout.nodes), len(layout.edges), layout.max_lane,
        )
        return self._to_response(layout)

    def get_constants(self) -> ConstantsResponse:
        return ConstantsResponse(
            lane_width=LANE_WIDTH,
            row_height=ROW_HEIGHT,
            colors=list(LANE_COLORS),
            render_batch=RENDER_BATCH,
        )

    def _to_response(self, layout: GraphLayout) -> LayoutResponse:
        return LayoutResponse(
            nodes=[self._node_response(n) for n in layout.nodes],
            edges=[self._edge_response(e) for e in layout.edges],
            max_lane=layout.max_lane,
            width=graph_width(layout),
            height=graph_height(layout),
        )

    def _node_response(self, node: GraphNode) -> NodeResponse:
        return NodeResponse(
            commit_id=node.commit_id,
            lane=node.lane,
            parent_ids=list(node.parent_ids),
            x=node.x,
            y=node.y,
        )

    def _edge_response(self, edge: GraphEdge) -> EdgeResponse:
        return EdgeResponse(
            start=PointResponse(x=edge.start.x, y=edge.start.y),
            end=PointResponse(x=edge.end.x, y=edge.end.y),
            color=edge.color,
        )
