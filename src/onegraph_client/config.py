"""
Client configuration.

The OneDash app id routes calls that are not scoped to a user's site
(persisted query lookup, app upserts). It is passed in here rather than
read from a module constant so tests and staging hosts can override it.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://serve.onegraph.com"
DEFAULT_ONEDASH_APP_ID = "0b066ba6-ed39-4db8-a497-ba0be34d5b2a"


class OneGraphConfig(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    onedash_app_id: str = DEFAULT_ONEDASH_APP_ID
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = "onegraph-client/0.1.0"

    @property
    def graphql_path(self) -> str:
        return "/graphql"

    @property
    def schema_path(self) -> str:
        return "/schema"

    @classmethod
    def from_env(cls, base_url: Optional[str] = None) -> "OneGraphConfig":
        """Build a config from ONEGRAPH_* environment variables, falling back to defaults."""
        values: dict[str, object] = {}
        url = base_url or os.environ.get("ONEGRAPH_BASE_URL")
        if url:
            values["base_url"] = url
        app_id = os.environ.get("ONEGRAPH_ONEDASH_APP_ID")
        if app_id:
            values["onedash_app_id"] = app_id
        timeout = os.environ.get("ONEGRAPH_TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        return cls.model_validate(values)
