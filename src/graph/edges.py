from typing import Dict, Iterable, List, Tuple

from src.graph.models import GraphEdge, GraphNode, Point

# Swim lane palette, indexed cyclically by lane.
LANE_COLORS: Tuple[str, ...] = (
    "#4078c0",
    "#6cc644",
    "#bd2c00",
    "#c9510c",
    "#6e5494",
    "#0086b3",
    "#795548",
    "#e91e63",
)

def lane_color(lane: int) -> str:
    """Returns the palette color for a lane, wrapping past the palette size."""
    return LANE_COLORS[lane % len(LANE_COLORS)]

def synthesize_edges(nodes: Iterable[GraphNode]) -> Tuple[GraphEdge, ...]:
    """Connects every node to each of its parents that has a node of its own.

    First-parent edges take the child's lane color so a lineage keeps one
    color top to bottom. Merge edges take the parent's lane color, so the
    line coming in from a side branch is drawn in that branch's color.
    Parents missing from ``nodes`` (truncated history) get no edge.
    """
    nodes = list(nodes)
    by_id: Dict[str, GraphNode] = {node.commit_id: node for node in nodes}

    edges: List[GraphEdge] = []
    for node in nodes:
        for pi, parent_id in enumerate(node.parent_ids):
            parent = by_id.get(parent_id)
            if parent is None:
                continue

            edge_lane = node.lane if pi == 0 else parent.lane
            edges.append(GraphEdge(
                start=Point(node.x, node.y),
                end=Point(parent.x, parent.y),
                color=lane_color(edge_lane),
            ))

    return tuple(edges)
