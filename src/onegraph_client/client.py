"""
AsyncOneGraph — main SDK client.
"""

from typing import Any, Optional

import httpx

from onegraph_client.apps import AppsAPI
from onegraph_client.channel import SessionEventChannel
from onegraph_client.cli_sessions import CliSessionsAPI
from onegraph_client.config import OneGraphConfig
from onegraph_client.persisted import PersistedQueriesAPI
from onegraph_client.schema import SchemaAPI
from onegraph_client.transport.graphql import GraphQLExecutor
from onegraph_client.transport.http import HttpClient


class AsyncOneGraph:
    """Async OneGraph client. Use as an async context manager or call ``close()``."""

    def __init__(
        self,
        config: Optional[OneGraphConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or OneGraphConfig()

        self.http = HttpClient(self.config, transport=transport)
        self.executor = GraphQLExecutor(self.http)
        self.schema = SchemaAPI(self.http)
        self.apps = AppsAPI(self.executor, self.config.onedash_app_id)
        self.docs = PersistedQueriesAPI(self.executor, self.config.onedash_app_id)
        self.sessions = CliSessionsAPI(self.executor)
        self.events = SessionEventChannel(self.executor)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncOneGraph":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
