"""
CLI event models — events are server-produced and never mutated client side.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CliEvent(BaseModel):
    typename: Optional[str] = Field(default=None, alias="__typename")
    id: Optional[str] = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    payload: Optional[Any] = None

    model_config = {"populate_by_name": True, "extra": "allow", "frozen": True}


class EventBatch(BaseModel):
    """Result of one fetch. Check ``errors`` before trusting ``events``."""
    events: list[CliEvent] = Field(default_factory=list)
    errors: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def event_ids(self) -> list[str]:
        return [e.id for e in self.events if e.id]


class ProcessedBatch(BaseModel):
    events: list[CliEvent] = Field(default_factory=list)
    acknowledged: list[str] = Field(default_factory=list)
    failed: list[str] = Field(default_factory=list)
    errors: list[dict[str, Any]] = Field(default_factory=list)
