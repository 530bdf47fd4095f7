from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass
class CommitRef:
    """A commit as handed to the layout engine: an id and its ordered parents."""
    id: str
    parent_ids: List[str] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return not self.parent_ids

    @property
    def is_merge(self) -> bool:
        return len(self.parent_ids) > 1

@dataclass(frozen=True)
class Point:
    x: int
    y: int

@dataclass(frozen=True)
class GraphNode:
    commit_id: str
    lane: int
    parent_ids: Tuple[str, ...]
    x: int
    y: int

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

@dataclass(frozen=True)
class GraphEdge:
    start: Point
    end: Point
    color: str

@dataclass(frozen=True)
class GraphLayout:
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()
    max_lane: int = 0
