from typing import List
from pydantic import BaseModel, Field

class CommitRequest(BaseModel):
    id: str
    parent_ids: List[str] = Field(default_factory=list)

class LayoutRequest(BaseModel):
    # Newest first, as `git log` lists them
    commits: List[CommitRequest]

class PointResponse(BaseModel):
    x: int
    y: int

class NodeResponse(BaseModel):
    commit_id: str
    lane: int
    parent_ids: List[str]
    x: int
    y: int

class EdgeResponse(BaseModel):
    start: PointResponse  # child
    end: PointResponse    # parent
    color: str

class LayoutResponse(BaseModel):
    nodes: List[NodeResponse]
    edges: List[EdgeResponse]
    max_lane: int
    # Canvas size for the whole layout, in px
    width: int
    height: int

class ConstantsResponse(BaseModel):
    lane_width: int
    row_height: int
    colors: List[str]
    render_batch: int
