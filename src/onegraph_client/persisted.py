"""
Persisted operations documents — stored GraphQL documents retrievable by id.
"""

from __future__ import annotations

from typing import Optional

from onegraph_client.models.persisted import PersistedQuery
from onegraph_client.results import Result, from_response
from onegraph_client.transport.graphql import GraphQLExecutor


class PersistedQueriesAPI:
    def __init__(self, executor: GraphQLExecutor, onedash_app_id: str):
        self._executor = executor
        self._onedash_app_id = onedash_app_id

    async def fetch(self, auth_token: str, app_id: str, doc_id: str) -> Result[PersistedQuery]:
        response = await self._executor.execute(
            "FetchPersistedQueryQuery",
            {"nfToken": auth_token, "appId": app_id, "id": doc_id},
            site_id=self._onedash_app_id,
        )
        return from_response(response, ("oneGraph", "persistedQuery"), PersistedQuery.model_validate)

    async def create(
        self,
        auth_token: str,
        app_id: str,
        document: str,
        description: str = "",
        tags: Optional[list[str]] = None,
    ) -> Result[PersistedQuery]:
        """Persist an operations document so a GUI can retrieve it later."""
        response = await self._executor.execute(
            "CreatePersistedQueryMutation",
            {
                "nfToken": auth_token,
                "appId": app_id,
                "query": document,
                "tags": list(tags or []),
                "description": description,
            },
            site_id=app_id,
        )
        return from_response(
            response,
            ("oneGraph", "createPersistedQuery", "persistedQuery"),
            PersistedQuery.model_validate,
        )
