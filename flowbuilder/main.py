from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .application.saving import FlowValidationError
from .models.validation import SaveRejection
from .platform.security import verify_api_key
from .routes.flows import router as flows_router
from .routes.history import router as history_router
from .routes.suggestions import router as suggestions_router

app: FastAPI = FastAPI(
    title="FlowBuilder",
    version="1.0.0",
    description="Edits chatbot message flows with undo/redo and validates them on save",
)


@app.exception_handler(FlowValidationError)
async def flow_validation_error_handler(
    request: Request, exc: FlowValidationError
) -> JSONResponse:
    """Render a rejected save as a named, non-fatal 422 payload."""
    rejection = SaveRejection(
        error=exc.verdict.value,
        message=exc.message,
        cycle=exc.cycle,
        dangling=exc.dangling,
    )
    return JSONResponse(status_code=422, content=rejection.model_dump())


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v1/api-schema")
async def get_api_schema(request: Request, _: Any = Depends(verify_api_key)) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    return JSONResponse(openapi_schema)


for router in (
    flows_router,
    history_router,
    suggestions_router,
):
    app.include_router(router, prefix="/v1", dependencies=[Depends(verify_api_key)])
