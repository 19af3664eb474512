"""
Session event channel — poll, process and acknowledge CLI events.

The server holds a per-session queue. ``fetch_batch`` is read-only;
``acknowledge`` is the only way to remove events. Delivery is at-least-once:
a failed or cancelled acknowledge leaves the affected events in an unknown
state, so handlers must tolerate seeing an event again.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Union

from pydantic import ValidationError

from onegraph_client.errors import InvalidArgumentError
from onegraph_client.models.event import CliEvent, EventBatch, ProcessedBatch
from onegraph_client.models.session import Session
from onegraph_client.results import Result, from_response
from onegraph_client.transport.graphql import GraphQLExecutor

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 1000

EventHandler = Callable[[CliEvent], Union[Awaitable[Any], Any]]

SESSION_EVENTS_PATH = ("oneGraph", "netlifyCliSession", "events")
ACK_PATH = ("oneGraph", "ackNetlifyCliEvents")
SESSION_UPDATE_PATH = ("oneGraph", "updateNetlifyCliSession", "session")


def validate_batch_size(desired_count: Any) -> int:
    """Non-positive or non-integer counts are rejected rather than normalized."""
    if isinstance(desired_count, bool) or not isinstance(desired_count, int):
        raise InvalidArgumentError(f"desired_count must be an int, got {desired_count!r}")
    if desired_count < 1:
        raise InvalidArgumentError(f"desired_count must be positive, got {desired_count}")
    return desired_count


def _acked_ids(value: Any) -> list[str]:
    return [str(item["id"]) for item in value if isinstance(item, dict) and item.get("id") is not None]


def _salvage_event(raw: Any) -> CliEvent:
    """Keep the id and kind of an event that failed validation so it can still be acked."""
    if not isinstance(raw, dict):
        return CliEvent.model_construct(payload=raw)
    raw_id = raw.get("id")
    return CliEvent.model_construct(
        typename=raw.get("__typename"),
        id=str(raw_id) if raw_id is not None else None,
        session_id=raw.get("sessionId"),
        created_at=raw.get("createdAt"),
        payload=raw.get("payload"),
    )


class SessionEventChannel:
    def __init__(self, executor: GraphQLExecutor):
        self._executor = executor

    async def fetch_batch(
        self,
        app_id: str,
        auth_token: str,
        session_id: str,
        desired_count: int = DEFAULT_BATCH_SIZE,
    ) -> EventBatch:
        """Fetch up to ``desired_count`` unacknowledged events. Check ``errors`` first."""
        first = validate_batch_size(desired_count)
        response = await self._executor.execute(
            "FetchCLISessionQuery",
            {"nfToken": auth_token, "sessionId": session_id, "first": first},
            site_id=app_id,
        )
        if response.has_errors:
            return EventBatch(errors=response.errors or [])

        raw_events = response.dig(*SESSION_EVENTS_PATH) or []
        events: list[CliEvent] = []
        for raw in raw_events:
            try:
                events.append(CliEvent.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Malformed CLI event in session {session_id}: {e}")
                events.append(_salvage_event(raw))
        return EventBatch(events=events)

    async def acknowledge(
        self,
        app_id: str,
        auth_token: str,
        session_id: str,
        event_ids: list[str],
    ) -> Result[list[str]]:
        """Delete processed events from the session queue; returns the acked ids."""
        response = await self._executor.execute(
            "AckCLISessionEventMutation",
            {"nfToken": auth_token, "sessionId": session_id, "eventIds": list(event_ids)},
            site_id=app_id,
        )
        return from_response(response, ACK_PATH, _acked_ids)

    async def heartbeat(self, auth_token: str, app_id: str, session_id: str) -> Result[Session]:
        """Mark the session ACTIVE and refresh its ``updatedAt``."""
        response = await self._executor.execute(
            "MarkCLISessionActiveHeartbeat",
            {"nfToken": auth_token, "id": session_id},
            site_id=app_id,
        )
        return from_response(response, SESSION_UPDATE_PATH, Session.model_validate)

    async def deactivate(self, auth_token: str, app_id: str, session_id: str) -> Result[Session]:
        """Mark the session INACTIVE. A new session is needed to resume work."""
        response = await self._executor.execute(
            "MarkCLISessionInactive",
            {"nfToken": auth_token, "id": session_id},
            site_id=app_id,
        )
        return from_response(response, SESSION_UPDATE_PATH, Session.model_validate)

    async def process_batch(
        self,
        app_id: str,
        auth_token: str,
        session_id: str,
        handler: EventHandler,
        desired_count: int = DEFAULT_BATCH_SIZE,
    ) -> ProcessedBatch:
        """Fetch one batch, run ``handler`` on each event in order, ack the ones that succeeded.

        Events whose handler raised stay queued and will be redelivered.
        """
        batch = await self.fetch_batch(app_id, auth_token, session_id, desired_count)
        if batch.errors:
            return ProcessedBatch(errors=batch.errors)

        done: list[str] = []
        failed: list[str] = []
        for event in batch.events:
            try:
                outcome = handler(event)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.exception(f"Handler failed for event {event.id} ({event.typename})")
                if event.id:
                    failed.append(event.id)
                continue
            if event.id:
                done.append(event.id)

        if not done:
            return ProcessedBatch(events=batch.events, failed=failed)

        ack = await self.acknowledge(app_id, auth_token, session_id, done)
        if ack.errors:
            logger.warning(f"Acknowledge failed for {len(done)} event(s) in session {session_id}")
        return ProcessedBatch(
            events=batch.events,
            acknowledged=ack.unwrap_or([]),
            failed=failed,
            errors=ack.errors,
        )
