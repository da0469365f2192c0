from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..application.ports import FlowNotFoundError
from ..application.session import NodeNotFoundError, NodeTypeMismatchError
from ..application.suggestions import SuggestReplyUseCase
from ..models.flow import NodeModel
from ..platform.wiring import get_suggest_reply_use_case

router: APIRouter = APIRouter()


@router.post("/flows/{flow_id}/nodes/{node_id}/suggestion", response_model=NodeModel)
async def suggest_reply(
    flow_id: str,
    node_id: str,
    use_case: SuggestReplyUseCase = Depends(get_suggest_reply_use_case),
) -> NodeModel:
    """Fill a text node with a suggested reply to the message leading into it."""

    try:
        node = await use_case(flow_id, node_id)
    except FlowNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Flow not found"}) from exc
    except NodeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Node not found"}) from exc
    except NodeTypeMismatchError as exc:
        raise HTTPException(status_code=409, detail={"error": str(exc)}) from exc
    return NodeModel.from_domain(node)
