from __future__ import annotations

from fastapi import Depends, HTTPException, Path

from ..application.ports import FlowNotFoundError, FlowSessionStore
from ..application.session import FlowSession
from ..platform.wiring import provide_session_store


def get_flow_session(
    flow_id: str = Path(..., description="Identifier returned when the flow was created."),
    store: FlowSessionStore = Depends(provide_session_store),
) -> FlowSession:
    try:
        return store.get(flow_id)
    except FlowNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Flow not found"}) from exc
