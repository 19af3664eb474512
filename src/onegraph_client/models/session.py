"""
CLI session models.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from onegraph_client.models.event import CliEvent


class SessionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class Session(BaseModel):
    """Minimal session view returned by heartbeat / deactivate mutations."""
    id: str
    status: SessionStatus
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class CliSession(BaseModel):
    id: str
    name: Optional[str] = None
    app_id: Optional[str] = Field(default=None, alias="appId")
    netlify_user_id: Optional[str] = Field(default=None, alias="netlifyUserId")
    metadata: Optional[dict[str, Any]] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    last_event_at: Optional[str] = Field(default=None, alias="lastEventAt")
    events: list[CliEvent] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
