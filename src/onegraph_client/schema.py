"""
Raw schema retrieval.

Unlike the GraphQL operations, failures here degrade to ``None``
("schema unavailable"): they are logged once and never raised.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx
from graphql import GraphQLError, GraphQLSchema, build_client_schema

from onegraph_client.errors import OneGraphError
from onegraph_client.transport.http import HttpClient

logger = logging.getLogger(__name__)


class SchemaAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def fetch_schema_json(self, app_id: str, enabled_services: Sequence[str]) -> Optional[dict[str, Any]]:
        """Introspection JSON for an app restricted to ``enabled_services``."""
        params = {"app_id": app_id, "services": ",".join(enabled_services)}
        try:
            result = await self._http.get(self._http.config.schema_path, params=params)
        except (httpx.HTTPError, OneGraphError, ValueError) as e:
            logger.error(f"Error fetching schema for app {app_id}: {e!r}")
            return None
        if not isinstance(result, dict):
            logger.error(f"Error fetching schema for app {app_id}: expected a JSON object")
            return None
        return result

    async def fetch_schema(self, app_id: str, enabled_services: Sequence[str]) -> Optional[GraphQLSchema]:
        """Fetch and build a client ``GraphQLSchema``; None when unavailable."""
        result = await self.fetch_schema_json(app_id, enabled_services)
        if result is None:
            return None
        data = result.get("data")
        if not isinstance(data, dict):
            logger.error(f"Schema response for app {app_id} has no introspection data")
            return None
        try:
            return build_client_schema(data)
        except (GraphQLError, TypeError) as e:
            logger.error(f"Could not build schema for app {app_id}: {e}")
            return None
