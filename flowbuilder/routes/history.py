from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.saving import SaveFlowUseCase
from ..application.session import FlowSession
from ..models.flow import HistoryStep
from ..models.validation import SaveRejection, SaveResult
from ..platform.wiring import get_save_flow_use_case
from .utils import get_flow_session

router: APIRouter = APIRouter()


@router.post("/flows/{flow_id}/undo", response_model=HistoryStep)
async def undo(session: FlowSession = Depends(get_flow_session)) -> HistoryStep:
    applied = session.undo()
    return HistoryStep.from_session(session, applied=applied)


@router.post("/flows/{flow_id}/redo", response_model=HistoryStep)
async def redo(session: FlowSession = Depends(get_flow_session)) -> HistoryStep:
    applied = session.redo()
    return HistoryStep.from_session(session, applied=applied)


@router.post(
    "/flows/{flow_id}/save",
    response_model=SaveResult,
    responses={422: {"model": SaveRejection}},
)
async def save_flow(
    session: FlowSession = Depends(get_flow_session),
    use_case: SaveFlowUseCase = Depends(get_save_flow_use_case),
) -> SaveResult:
    saved = use_case(session.flow_id)
    return SaveResult(
        flow_id=saved.flow_id,
        message=saved.message,
        message_order=saved.message_order,
    )
