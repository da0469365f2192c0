from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..domain.graph import Edge, ImageData, Node, NodeType, Position

if TYPE_CHECKING:
    from ..application.session import FlowSession


class PositionModel(BaseModel):
    """Canvas coordinates; carried through but never validated."""

    x: float = 0.0
    y: float = 0.0


class NodeDataModel(BaseModel):
    """Payload of a node: ``label`` for text nodes, ``imageUrl`` for images."""

    model_config = ConfigDict(populate_by_name=True)

    label: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")


class NodeModel(BaseModel):
    id: str
    type: NodeType
    data: NodeDataModel
    position: PositionModel

    @classmethod
    def from_domain(cls, node: Node) -> "NodeModel":
        if isinstance(node.data, ImageData):
            data = NodeDataModel(image_url=node.data.image_url)
        else:
            data = NodeDataModel(label=node.data.label)
        return cls(
            id=node.id,
            type=node.type,
            data=data,
            position=PositionModel(x=node.position.x, y=node.position.y),
        )


class EdgeModel(BaseModel):
    id: str
    source: str
    target: str

    @classmethod
    def from_domain(cls, edge: Edge) -> "EdgeModel":
        return cls(id=edge.id, source=edge.source, target=edge.target)


class FlowState(BaseModel):
    """Current nodes and edges of a flow plus undo/redo availability."""

    flow_id: str
    nodes: List[NodeModel]
    edges: List[EdgeModel]
    can_undo: bool = Field(..., description="True when there is a step to undo.")
    can_redo: bool = Field(..., description="True when there is a step to redo.")

    @classmethod
    def from_session(cls, session: "FlowSession", **extra: Any) -> "FlowState":
        return cls(
            flow_id=session.flow_id,
            nodes=[NodeModel.from_domain(node) for node in session.nodes],
            edges=[EdgeModel.from_domain(edge) for edge in session.edges],
            can_undo=session.can_undo,
            can_redo=session.can_redo,
            **extra,
        )


class HistoryStep(FlowState):
    """Flow state after an undo or redo request."""

    applied: bool = Field(
        ..., description="False when there was nothing to undo or redo."
    )


class NodeCreate(BaseModel):
    """Node dropped onto the canvas."""

    type: NodeType
    position: PositionModel = Field(default_factory=PositionModel)

    def to_position(self) -> Position:
        return Position(x=self.position.x, y=self.position.y)


class NodeDataUpdate(BaseModel):
    """One field edit on a node; exactly one of the fields must be set."""

    model_config = ConfigDict(populate_by_name=True)

    label: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")

    @model_validator(mode="after")
    def _exactly_one_field(self) -> "NodeDataUpdate":
        if (self.label is None) == (self.image_url is None):
            raise ValueError("Provide exactly one of 'label' or 'imageUrl'")
        return self


class ConnectionRequest(BaseModel):
    source: str
    target: str


class ConnectionCheck(BaseModel):
    source: str
    target: str
    allowed: bool


class ConnectionResult(BaseModel):
    """Outcome of committing a connection; refused links are not errors."""

    status: Literal["created", "rejected"]
    edge: Optional[EdgeModel] = None
    reason: Optional[str] = None
