from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from ..application.ports import FlowNotFoundError, FlowSessionStore
from ..application.session import (
    EdgeNotFoundError,
    FlowSession,
    NodeNotFoundError,
    NodeTypeMismatchError,
)
from ..models.flow import (
    ConnectionCheck,
    ConnectionRequest,
    ConnectionResult,
    EdgeModel,
    FlowState,
    NodeCreate,
    NodeDataUpdate,
    NodeModel,
)
from ..models.responses import OperationStatus
from ..platform.wiring import provide_session_store
from .utils import get_flow_session

router: APIRouter = APIRouter()


@router.post("/flows", response_model=FlowState, status_code=201)
async def create_flow(
    store: FlowSessionStore = Depends(provide_session_store),
) -> FlowState:
    return FlowState.from_session(store.create())


@router.get("/flows/{flow_id}", response_model=FlowState)
async def get_flow(session: FlowSession = Depends(get_flow_session)) -> FlowState:
    return FlowState.from_session(session)


@router.delete("/flows/{flow_id}", response_model=OperationStatus)
async def delete_flow(
    flow_id: str,
    store: FlowSessionStore = Depends(provide_session_store),
) -> OperationStatus:
    try:
        store.delete(flow_id)
    except FlowNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Flow not found"}) from exc
    return OperationStatus(status="deleted", id=flow_id)


@router.post("/flows/{flow_id}/nodes", response_model=NodeModel, status_code=201)
async def add_node(
    payload: NodeCreate,
    session: FlowSession = Depends(get_flow_session),
) -> NodeModel:
    node = session.add_node(payload.type, payload.to_position())
    return NodeModel.from_domain(node)


@router.patch("/flows/{flow_id}/nodes/{node_id}", response_model=NodeModel)
async def update_node_data(
    node_id: str,
    payload: NodeDataUpdate,
    session: FlowSession = Depends(get_flow_session),
) -> NodeModel:
    try:
        if payload.label is not None:
            node = session.update_text(node_id, payload.label)
        else:
            node = session.update_image_url(node_id, payload.image_url or "")
    except NodeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Node not found"}) from exc
    except NodeTypeMismatchError as exc:
        raise HTTPException(status_code=409, detail={"error": str(exc)}) from exc
    return NodeModel.from_domain(node)


@router.delete("/flows/{flow_id}/nodes/{node_id}", response_model=OperationStatus)
async def delete_node(
    node_id: str,
    session: FlowSession = Depends(get_flow_session),
) -> OperationStatus:
    try:
        session.delete_node(node_id)
    except NodeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Node not found"}) from exc
    return OperationStatus(status="deleted", id=node_id)


@router.get("/flows/{flow_id}/connections/check", response_model=ConnectionCheck)
async def check_connection(
    source: str = Query(..., description="Node the prospective edge starts at."),
    target: str = Query(..., description="Node the prospective edge ends at."),
    session: FlowSession = Depends(get_flow_session),
) -> ConnectionCheck:
    return ConnectionCheck(
        source=source, target=target, allowed=session.can_connect(source, target)
    )


@router.post("/flows/{flow_id}/edges", response_model=ConnectionResult)
async def connect_nodes(
    payload: ConnectionRequest,
    response: Response,
    session: FlowSession = Depends(get_flow_session),
) -> ConnectionResult:
    try:
        edge = session.connect(payload.source, payload.target)
    except NodeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Node not found"}) from exc

    if edge is None:
        return ConnectionResult(
            status="rejected", reason="Source node already has an outgoing edge"
        )
    response.status_code = 201
    return ConnectionResult(status="created", edge=EdgeModel.from_domain(edge))


@router.delete("/flows/{flow_id}/edges/{edge_id}", response_model=OperationStatus)
async def delete_edge(
    edge_id: str,
    session: FlowSession = Depends(get_flow_session),
) -> OperationStatus:
    try:
        session.delete_edge(edge_id)
    except EdgeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Edge not found"}) from exc
    return OperationStatus(status="deleted", id=edge_id)
