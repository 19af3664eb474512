"""
App and schema metadata for a site.
"""

from __future__ import annotations

import logging

from onegraph_client.models.app import App, AppSchema, CreateSchemaInput, ServiceInfo
from onegraph_client.results import Empty, Failure, Result, Success, from_response
from onegraph_client.transport.graphql import GraphQLExecutor

logger = logging.getLogger(__name__)

APP_SCHEMA_PATH = ("oneGraph", "app", "graphQLSchema")
DEFAULT_SERVICES = ["ONEGRAPH"]


def _services(value: list) -> list[ServiceInfo]:
    return [ServiceInfo.model_validate(s) for s in value]


class AppsAPI:
    def __init__(self, executor: GraphQLExecutor, onedash_app_id: str):
        self._executor = executor
        self._onedash_app_id = onedash_app_id

    async def fetch_app_schema(self, auth_token: str, site_id: str) -> Result[AppSchema]:
        """Schema metadata (id, enabled services) for a site's app."""
        response = await self._executor.execute(
            "FetchAppSchemaQuery",
            {"nfToken": auth_token, "appId": site_id},
            site_id=site_id,
        )
        return from_response(response, APP_SCHEMA_PATH, AppSchema.model_validate)

    async def upsert_app_for_site(self, auth_token: str, site_id: str) -> Result[App]:
        response = await self._executor.execute(
            "UpsertAppForSiteMutation",
            {"nfToken": auth_token, "siteId": site_id},
            site_id=self._onedash_app_id,
        )
        return from_response(response, ("oneGraph", "upsertAppForNetlifySite", "app"), App.model_validate)

    async def create_new_app_schema(self, auth_token: str, schema_input: CreateSchemaInput) -> Result[AppSchema]:
        response = await self._executor.execute(
            "CreateNewSchemaMutation",
            {"nfToken": auth_token, "input": schema_input.to_variables()},
            site_id=schema_input.app_id,
        )
        return from_response(
            response, ("oneGraph", "createGraphQLSchema", "graphqlSchema"), AppSchema.model_validate,
        )

    async def ensure_app_for_site(self, auth_token: str, site_id: str) -> Result[AppSchema]:
        """Make sure the site has an upstream app with a default schema, creating either as needed."""
        upserted = await self.upsert_app_for_site(auth_token, site_id)
        if isinstance(upserted, Failure):
            return upserted
        app_id = upserted.payload.id if isinstance(upserted, Success) else site_id

        existing = await self.fetch_app_schema(auth_token, app_id)
        if not isinstance(existing, Empty):
            return existing

        logger.info("Creating new empty default GraphQL schema for site....")
        return await self.create_new_app_schema(
            auth_token,
            CreateSchemaInput(app_id=site_id, enabled_services=DEFAULT_SERVICES, set_as_default_for_app=True),
        )

    async def fetch_enabled_services(self, auth_token: str, app_id: str) -> Result[list[ServiceInfo]]:
        response = await self._executor.execute(
            "FetchAppSchemaQuery",
            {"nfToken": auth_token, "appId": app_id},
            site_id=app_id,
        )
        return from_response(response, APP_SCHEMA_PATH + ("services",), _services)
