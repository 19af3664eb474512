"""
CLI session bookkeeping — create, inspect and update sessions.

Liveness (heartbeat / deactivate) lives on ``SessionEventChannel``.
"""

from __future__ import annotations

from typing import Any, Optional

from onegraph_client.channel import DEFAULT_BATCH_SIZE, validate_batch_size
from onegraph_client.models.session import CliSession
from onegraph_client.results import Result, from_response
from onegraph_client.transport.graphql import GraphQLExecutor


class CliSessionsAPI:
    def __init__(self, executor: GraphQLExecutor):
        self._executor = executor

    async def fetch(
        self,
        app_id: str,
        auth_token: str,
        session_id: str,
        desired_event_count: int = DEFAULT_BATCH_SIZE,
    ) -> Result[CliSession]:
        """Fetch a session together with up to ``desired_event_count`` pending events."""
        response = await self._executor.execute(
            "FetchCLISessionQuery",
            {"nfToken": auth_token, "sessionId": session_id, "first": validate_batch_size(desired_event_count)},
            site_id=app_id,
        )
        return from_response(response, ("oneGraph", "netlifyCliSession"), CliSession.model_validate)

    async def create(
        self,
        auth_token: str,
        app_id: str,
        name: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Result[CliSession]:
        """Register a new CLI session; ``name`` shows up in the UI and CLI output."""
        response = await self._executor.execute(
            "CreateCLISessionMutation",
            {"nfToken": auth_token, "appId": app_id, "name": name, "metadata": metadata or {}},
            site_id=app_id,
        )
        return from_response(
            response, ("oneGraph", "createNetlifyCliSession", "session"), CliSession.model_validate,
        )

    async def update_metadata(
        self,
        auth_token: str,
        app_id: str,
        session_id: str,
        metadata: dict[str, Any],
    ) -> Result[CliSession]:
        """Replace the session metadata (e.g. the latest synced docId)."""
        response = await self._executor.execute(
            "UpdateCLISessionMetadataMutation",
            {"nfToken": auth_token, "sessionId": session_id, "metadata": metadata},
            site_id=app_id,
        )
        return from_response(
            response, ("oneGraph", "updateNetlifyCliSession", "session"), CliSession.model_validate,
        )
