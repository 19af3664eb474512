from onegraph_client.models.app import App, AppSchema, CreateSchemaInput, ServiceInfo
from onegraph_client.models.event import CliEvent, EventBatch, ProcessedBatch
from onegraph_client.models.persisted import PersistedQuery
from onegraph_client.models.session import CliSession, Session, SessionStatus

__all__ = [
    "App",
    "AppSchema",
    "CreateSchemaInput",
    "ServiceInfo",
    "CliEvent",
    "EventBatch",
    "ProcessedBatch",
    "PersistedQuery",
    "CliSession",
    "Session",
    "SessionStatus",
]
