"""
GraphQL executor — the single execution contract every query and mutation
goes through.

Failures never raise out of ``execute``: HTTP status errors, timeouts and
connection errors are folded into the response's ``errors`` list so callers
handle them the same way as GraphQL-level errors.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from onegraph_client.errors import HttpStatusError, UnknownOperationError
from onegraph_client.operations import OPERATIONS
from onegraph_client.transport.http import HttpClient

logger = logging.getLogger(__name__)

TRANSPORT_ERROR = "TRANSPORT_ERROR"


class GraphQLResponse(BaseModel):
    data: Optional[dict[str, Any]] = None
    errors: Optional[list[dict[str, Any]]] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def dig(self, *path: str) -> Any:
        """Walk nested ``data`` fields, returning None at the first missing step."""
        node: Any = self.data
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        return node


def transport_error(message: str, **extensions: Any) -> dict[str, Any]:
    return {"message": message, "extensions": {"code": TRANSPORT_ERROR, **extensions}}


class GraphQLExecutor:
    def __init__(self, http: HttpClient, operations: Optional[dict[str, str]] = None):
        self._http = http
        self._operations = operations if operations is not None else OPERATIONS

    async def execute(
        self,
        operation_name: str,
        variables: dict[str, Any],
        site_id: Optional[str] = None,
    ) -> GraphQLResponse:
        """Run a registered operation, routed to ``site_id`` (default: the OneDash app)."""
        try:
            document = self._operations[operation_name]
        except KeyError:
            raise UnknownOperationError(operation_name) from None

        config = self._http.config
        app_id = site_id if site_id is not None else config.onedash_app_id
        body = {"query": document, "variables": variables, "operationName": operation_name}

        try:
            raw = await self._http.post(config.graphql_path, body, params={"app_id": app_id})
        except HttpStatusError as e:
            logger.warning(f"{operation_name} failed with HTTP {e.status_code}")
            payload = (e.details or {}).get("body")
            if isinstance(payload, dict) and payload.get("errors"):
                return GraphQLResponse(data=payload.get("data"), errors=payload["errors"])
            return GraphQLResponse(errors=[transport_error(str(e), status=e.status_code)])
        except httpx.TimeoutException as e:
            logger.warning(f"{operation_name} timed out: {e!r}")
            return GraphQLResponse(errors=[transport_error(f"Request timed out: {e}")])
        except httpx.HTTPError as e:
            logger.warning(f"{operation_name} transport error: {e!r}")
            return GraphQLResponse(errors=[transport_error(f"Transport error: {e}")])
        except ValueError as e:
            logger.warning(f"{operation_name} returned a non-JSON body: {e}")
            return GraphQLResponse(errors=[transport_error(f"Invalid JSON response: {e}")])

        if not isinstance(raw, dict):
            return GraphQLResponse(errors=[transport_error("Response body is not a JSON object")])
        data = raw.get("data")
        return GraphQLResponse(
            data=data if isinstance(data, dict) else None,
            errors=raw.get("errors") or None,
        )
