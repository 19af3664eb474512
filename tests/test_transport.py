"""GraphQL executor and HTTP transport."""

import httpx
import pytest

from onegraph_client.errors import UnknownOperationError
from onegraph_client.transport.graphql import TRANSPORT_ERROR

from tests.conftest import ONEDASH_APP_ID, SITE_ID, TOKEN


@pytest.mark.asyncio
async def test_routes_to_site_id(client, server):
    server.add_session("s1")
    response = await client.executor.execute(
        "FetchCLISessionQuery", {"nfToken": TOKEN, "sessionId": "s1", "first": 1}, site_id=SITE_ID,
    )
    assert not response.has_errors
    sent = server.operations("FetchCLISessionQuery")[0]
    assert sent["app_id"] == SITE_ID
    assert sent["variables"] == {"nfToken": TOKEN, "sessionId": "s1", "first": 1}
    assert "query FetchCLISessionQuery" in sent["query"]


@pytest.mark.asyncio
async def test_defaults_routing_to_onedash_app(client, server):
    await client.executor.execute("FetchPersistedQueryQuery", {"nfToken": TOKEN, "appId": SITE_ID, "id": "x"})
    assert server.operations("FetchPersistedQueryQuery")[0]["app_id"] == ONEDASH_APP_ID


@pytest.mark.asyncio
async def test_empty_site_id_is_not_rerouted(client, server):
    await client.executor.execute("MarkCLISessionInactive", {"nfToken": TOKEN, "id": "s1"}, site_id="")
    assert server.operations("MarkCLISessionInactive")[0]["app_id"] == ""


@pytest.mark.asyncio
async def test_unknown_operation_raises(client, server):
    with pytest.raises(UnknownOperationError):
        await client.executor.execute("DropAllTables", {})
    assert server.requests == []


@pytest.mark.asyncio
async def test_graphql_errors_returned_inline(client, server):
    errors = [{"message": "Invalid token", "extensions": {"code": "UNAUTHENTICATED"}}]
    server.graphql_errors["FetchCLISessionQuery"] = errors
    response = await client.executor.execute(
        "FetchCLISessionQuery", {"nfToken": "bad", "sessionId": "s1", "first": 1}, site_id=SITE_ID,
    )
    assert response.errors == errors
    assert response.data is None


@pytest.mark.asyncio
async def test_http_status_becomes_transport_error(client, server):
    server.http_status["MarkCLISessionInactive"] = 502
    response = await client.executor.execute("MarkCLISessionInactive", {"nfToken": TOKEN, "id": "s1"})
    assert response.has_errors
    assert response.errors[0]["extensions"]["code"] == TRANSPORT_ERROR
    assert response.errors[0]["extensions"]["status"] == 502


@pytest.mark.asyncio
async def test_http_error_body_with_graphql_errors_is_kept():
    errors = [{"message": "Variable $first of type Int! was not provided"}]

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"data": None, "errors": errors})

    from onegraph_client import AsyncOneGraph, OneGraphConfig

    async with AsyncOneGraph(OneGraphConfig(base_url="https://x.test"), transport=httpx.MockTransport(handler)) as c:
        response = await c.executor.execute("FetchCLISessionQuery", {"nfToken": TOKEN, "sessionId": "s1"})
    assert response.errors == errors


@pytest.mark.asyncio
async def test_connection_error_becomes_transport_error(client, server):
    server.raise_for["AckCLISessionEventMutation"] = httpx.ConnectError("connection refused")
    response = await client.executor.execute(
        "AckCLISessionEventMutation", {"nfToken": TOKEN, "sessionId": "s1", "eventIds": ["e1"]},
    )
    assert response.data is None
    assert response.errors[0]["extensions"]["code"] == TRANSPORT_ERROR
    assert "connection refused" in response.errors[0]["message"]


@pytest.mark.asyncio
async def test_timeout_becomes_transport_error(client, server):
    server.raise_for["MarkCLISessionActiveHeartbeat"] = httpx.ReadTimeout("too slow")
    response = await client.executor.execute("MarkCLISessionActiveHeartbeat", {"nfToken": TOKEN, "id": "s1"})
    assert response.errors[0]["message"].startswith("Request timed out")


@pytest.mark.asyncio
async def test_non_json_body_becomes_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    from onegraph_client import AsyncOneGraph, OneGraphConfig

    async with AsyncOneGraph(OneGraphConfig(base_url="https://x.test"), transport=httpx.MockTransport(handler)) as c:
        response = await c.executor.execute("MarkCLISessionInactive", {"nfToken": TOKEN, "id": "s1"})
    assert response.errors[0]["extensions"]["code"] == TRANSPORT_ERROR
