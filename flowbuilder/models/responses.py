from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class OperationStatus(BaseModel):
    """Status payload returned when a flow, node or edge is removed."""

    status: Literal["deleted"] = Field(
        "deleted", description="Short status indicator for the operation outcome."
    )
    id: str = Field(..., description="Identifier of the removed resource.")
