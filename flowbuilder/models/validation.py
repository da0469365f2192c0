from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class SaveResult(BaseModel):
    """Accepted save with the order messages will be sent in."""

    flow_id: str
    status: Literal["saved"] = "saved"
    message: str
    message_order: List[str] = Field(
        default_factory=list, description="Node ids in topological order."
    )


class SaveRejection(BaseModel):
    """Named reason a save was refused. The flow itself is left untouched."""

    error: Literal["CYCLE_DETECTED", "MULTIPLE_DANGLING_STARTS"]
    message: str
    cycle: List[str] = Field(default_factory=list, description="Node ids forming the loop.")
    dangling: List[str] = Field(
        default_factory=list, description="Node ids without incoming edges."
    )
