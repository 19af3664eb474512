"""
CLI event kinds and human-friendly descriptions.
"""

from collections.abc import Mapping
from typing import Any, Optional

from onegraph_client.models.event import CliEvent

MAX_EVENT_DEPTH = 8


class CliEventKind:
    TEST = "OneGraphNetlifyCliSessionTestEvent"
    GENERATE_HANDLER = "OneGraphNetlifyCliSessionGenerateHandlerEvent"
    PERSISTED_LIBRARY_UPDATED = "OneGraphNetlifyCliSessionPersistedLibraryUpdatedEvent"


EVENT_LABELS: dict[str, str] = {
    CliEventKind.GENERATE_HANDLER: "Generate handler as Netlify function",
    CliEventKind.PERSISTED_LIBRARY_UPDATED: "Sync Netlify Graph operations library",
}


def _typename(event: Any) -> Optional[str]:
    if isinstance(event, CliEvent):
        return event.typename
    if isinstance(event, Mapping):
        return event.get("__typename") or event.get("typename")
    return None


def _payload(event: Any) -> Any:
    if isinstance(event, CliEvent):
        return event.payload
    if isinstance(event, Mapping):
        return event.get("payload")
    return None


def unwrap_event(event: Any, max_depth: int = MAX_EVENT_DEPTH) -> tuple[Any, int]:
    """Strip test-event wrappers, returning the inner event and how many were removed.

    Stops after ``max_depth`` unwraps so a self-referencing payload cannot loop.
    """
    depth = 0
    while _typename(event) == CliEventKind.TEST and depth < max_depth:
        event = _payload(event)
        depth += 1
    return event, depth


def describe_event(event: Any, max_depth: int = MAX_EVENT_DEPTH) -> str:
    """Human-friendly label for a CLI event (``CliEvent`` or raw mapping)."""
    inner, _ = unwrap_event(event, max_depth)
    kind = _typename(inner)
    if kind == CliEventKind.TEST:
        return f"Unrecognized event ({kind} nested deeper than {max_depth})"
    label = EVENT_LABELS.get(kind) if kind else None
    if label is None:
        return f"Unrecognized event ({kind})"
    return label
