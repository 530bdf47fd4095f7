import logging
from typing import Dict, List, Sequence, Union

from src.graph.edges import synthesize_edges
from src.graph.lanes import LaneAllocator
from src.graph.models import CommitRef, GraphLayout, GraphNode

logger = logging.getLogger(__name__)

# Horizontal spacing between swim lanes (px)
LANE_WIDTH = 20
# Vertical spacing between commit rows (px)
ROW_HEIGHT = 32

# Canvas padding used when sizing the drawing surface (px)
GRAPH_PAD_LEFT = 15
TEXT_PAD_LEFT = 8
MIN_GRAPH_WIDTH = 48

# Number of rows a client lays out before asking for more
RENDER_BATCH = 300

class LayoutBuilder:
    """Assigns lanes to a newest-first commit list in a single forward pass.

    A builder holds the reservation map and active lanes for one walk only;
    use a new instance (or ``calculate_graph_layout``) per commit list.
    """

    def __init__(self):
        self.lanes = LaneAllocator()
        # commit id -> lane it will occupy once its row is reached
        self.reservations: Dict[str, int] = {}
        self.nodes: List[GraphNode] = []
        self.max_lane = 0

    def build(self, commits: Sequence[CommitRef]) -> GraphLayout:
        for row, commit in enumerate(commits):
            self._place(row, commit)

        if self.reservations:
            logger.debug(
                "%d reservation(s) left for parents outside the commit list",
                len(self.reservations),
            )
        logger.debug("Laid out %d commits across %d lane(s)", len(self.nodes), self.max_lane + 1)

        return GraphLayout(
            nodes=tuple(self.nodes),
            edges=synthesize_edges(self.nodes),
            max_lane=self.max_lane,
        )

    def _place(self, row: int, commit: CommitRef):
        if commit.id in self.reservations:
            lane = self.reservations.pop(commit.id)
        else:
            # Nothing above named this commit: it starts a new branch line.
            lane = self._allocate()
        self.lanes.mark(lane)

        parent_ids = tuple(commit.parent_ids)
        self.nodes.append(GraphNode(
            commit_id=commit.id,
            lane=lane,
            parent_ids=parent_ids,
            x=lane * LANE_WIDTH,
            y=row * ROW_HEIGHT,
        ))

        if not parent_ids:
            self.lanes.free(lane)

        for pi, parent_id in enumerate(parent_ids):
            if pi == 0:
                if parent_id not in self.reservations:
                    self.reservations[parent_id] = lane
                else:
                    # An earlier child already continues this parent's lane.
                    self.lanes.free(lane)
            elif parent_id not in self.reservations:
                self.reservations[parent_id] = self._allocate()

        self._reclaim()

    def _allocate(self) -> int:
        lane = self.lanes.allocate()
        if lane > self.max_lane:
            self.max_lane = lane
        return lane

    def _reclaim(self):
        """Frees active lanes that no pending reservation points at."""
        reserved = set(self.reservations.values())
        for lane in self.lanes.active:
            if lane not in reserved:
                self.lanes.free(lane)

def calculate_graph_layout(commits: Sequence[CommitRef]) -> GraphLayout:
    """Lays out commits given newest first, as `git log` prints them.

    Each commit gets a lane: the one a child reserved for it, or the lowest
    free lane if it is a branch head. A first parent continues in the child's
    lane, further merge parents open new lanes, and lanes are released once
    no upcoming row is expected in them.
    """
    if not commits:
        return GraphLayout()
    return LayoutBuilder().build(commits)

def graph_width(layout: Union[GraphLayout, int]) -> int:
    """Pixel width needed to draw every lane plus the label gutter."""
    max_lane = layout.max_lane if isinstance(layout, GraphLayout) else layout
    calculated = GRAPH_PAD_LEFT + (max_lane + 1) * LANE_WIDTH + TEXT_PAD_LEFT
    return max(MIN_GRAPH_WIDTH, calculated)

def graph_height(layout: GraphLayout) -> int:
    return len(layout.nodes) * ROW_HEIGHT
