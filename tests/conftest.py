"""Shared fixtures: an in-memory OneGraph server behind httpx.MockTransport."""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import httpx
import pytest
import pytest_asyncio
from graphql import build_schema, introspection_from_schema

from onegraph_client import AsyncOneGraph, OneGraphConfig

BASE_URL = "https://onegraph.test"
ONEDASH_APP_ID = "onedash-test-app"
SITE_ID = "site-123"
TOKEN = "nf-token"

SDL = """
type Query {
  hello: String
  viewer: User
}

type User {
  login: String!
}
"""


class FakeOneGraph:
    """Just enough of OneGraph to exercise every operation the client sends."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []
        self.sessions: dict[str, dict[str, Any]] = {}
        self.queues: dict[str, list[dict[str, Any]]] = {}
        self.docs: dict[str, dict[str, Any]] = {}
        self.apps: dict[str, dict[str, Any]] = {}
        self.schemas: dict[str, dict[str, Any]] = {}
        self.graphql_errors: dict[str, list[dict[str, Any]]] = {}
        self.http_status: dict[str, int] = {}
        self.raise_for: dict[str, Exception] = {}
        self.schema_sdl = SDL
        self._ids = 0
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    # -- helpers used by tests -------------------------------------------

    def _next_id(self, prefix: str) -> str:
        self._ids += 1
        return f"{prefix}{self._ids}"

    def _tick(self) -> str:
        self._clock += timedelta(seconds=1)
        return self._clock.isoformat().replace("+00:00", "Z")

    def add_session(self, session_id: str, name: str = "test", status: str = "ACTIVE") -> dict[str, Any]:
        now = self._tick()
        session = {
            "id": session_id,
            "name": name,
            "appId": SITE_ID,
            "netlifyUserId": "user-1",
            "metadata": {},
            "status": status,
            "createdAt": now,
            "updatedAt": now,
            "lastEventAt": None,
        }
        self.sessions[session_id] = session
        self.queues[session_id] = []
        return session

    def push_event(self, session_id: str, typename: str, payload: Any = None) -> str:
        event = {
            "__typename": typename,
            "id": self._next_id("e"),
            "sessionId": session_id,
            "createdAt": self._tick(),
            "payload": payload,
        }
        self.queues[session_id].append(event)
        self.sessions[session_id]["lastEventAt"] = event["createdAt"]
        return event["id"]

    def add_app(self, site_id: str, services: Optional[list[str]] = None) -> None:
        self.apps[site_id] = {"id": site_id, "name": f"app for {site_id}"}
        if services is not None:
            self.schemas[site_id] = self._schema_record(site_id, services)

    def operations(self, name: str) -> list[dict[str, Any]]:
        return [r for r in self.requests if r.get("operationName") == name]

    def _schema_record(self, app_id: str, services: list[str]) -> dict[str, Any]:
        now = self._tick()
        return {
            "id": self._next_id("schema-"),
            "appId": app_id,
            "createdAt": now,
            "updatedAt": now,
            "services": [
                {"friendlyServiceName": s.title(), "service": s, "slug": s.lower()} for s in services
            ],
        }

    # -- transport -------------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/schema":
            return self._handle_schema(request)

        body = json.loads(request.content)
        op = body["operationName"]
        self.requests.append({**body, "app_id": request.url.params.get("app_id")})

        if op in self.raise_for:
            raise self.raise_for[op]
        if op in self.http_status:
            return httpx.Response(self.http_status[op], text="upstream exploded")
        if op in self.graphql_errors:
            return httpx.Response(200, json={"data": None, "errors": self.graphql_errors[op]})

        handler = getattr(self, f"_op_{op}")
        return httpx.Response(200, json={"data": {"oneGraph": handler(body["variables"])}})

    def _handle_schema(self, request: httpx.Request) -> httpx.Response:
        self.requests.append({"path": "/schema", "params": dict(request.url.params)})
        if "/schema" in self.raise_for:
            raise self.raise_for["/schema"]
        if "/schema" in self.http_status:
            return httpx.Response(self.http_status["/schema"], text="nope")
        introspection = introspection_from_schema(build_schema(self.schema_sdl))
        return httpx.Response(200, json={"data": introspection})

    # -- operations ------------------------------------------------------

    def _op_FetchCLISessionQuery(self, v: dict[str, Any]) -> dict[str, Any]:
        session = self.sessions.get(v["sessionId"])
        if session is None:
            return {"netlifyCliSession": None}
        events = self.queues[v["sessionId"]][: v["first"]]
        return {"netlifyCliSession": {**session, "events": events}}

    def _op_AckCLISessionEventMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        queue = self.queues.get(v["sessionId"], [])
        wanted = set(v["eventIds"])
        acked = [e for e in queue if str(e["id"]) in wanted]
        self.queues[v["sessionId"]] = [e for e in queue if str(e["id"]) not in wanted]
        return {"ackNetlifyCliEvents": [{"id": e["id"]} for e in acked]}

    def _op_CreateCLISessionMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        session = self.add_session(self._next_id("s"), name=v["name"])
        session["appId"] = v["appId"]
        session["metadata"] = v["metadata"]
        return {"createNetlifyCliSession": {"session": session}}

    def _op_UpdateCLISessionMetadataMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        session = self.sessions.get(v["sessionId"])
        if session is None:
            return {"updateNetlifyCliSession": None}
        session["metadata"] = v["metadata"]
        session["updatedAt"] = self._tick()
        return {"updateNetlifyCliSession": {"session": session}}

    def _set_status(self, session_id: str, status: str) -> dict[str, Any]:
        session = self.sessions.get(session_id)
        if session is None:
            return {"updateNetlifyCliSession": None}
        session["status"] = status
        session["updatedAt"] = self._tick()
        mini = {k: session[k] for k in ("id", "status", "createdAt", "updatedAt")}
        return {"updateNetlifyCliSession": {"session": mini}}

    def _op_MarkCLISessionActiveHeartbeat(self, v: dict[str, Any]) -> dict[str, Any]:
        return self._set_status(v["id"], "ACTIVE")

    def _op_MarkCLISessionInactive(self, v: dict[str, Any]) -> dict[str, Any]:
        return self._set_status(v["id"], "INACTIVE")

    def _op_FetchPersistedQueryQuery(self, v: dict[str, Any]) -> dict[str, Any]:
        return {"persistedQuery": self.docs.get(v["id"])}

    def _op_CreatePersistedQueryMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        doc = {
            "id": self._next_id("doc-"),
            "query": v["query"],
            "description": v["description"] or None,
            "allowedOperationNames": [],
            "tags": v["tags"],
        }
        self.docs[doc["id"]] = doc
        return {"createPersistedQuery": {"persistedQuery": doc}}

    def _op_FetchAppSchemaQuery(self, v: dict[str, Any]) -> dict[str, Any]:
        if v["appId"] not in self.apps:
            return {"app": None}
        return {"app": {"graphQLSchema": self.schemas.get(v["appId"])}}

    def _op_UpsertAppForSiteMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        if v["siteId"] not in self.apps:
            self.add_app(v["siteId"])
        org = {"id": "org-1", "name": "Test org"}
        return {"upsertAppForNetlifySite": {"org": org, "app": self.apps[v["siteId"]]}}

    def _op_CreateNewSchemaMutation(self, v: dict[str, Any]) -> dict[str, Any]:
        schema_input = v["input"]
        record = self._schema_record(schema_input["appId"], schema_input["enabledServices"])
        if schema_input.get("setAsDefaultForApp"):
            self.schemas[schema_input["appId"]] = record
        return {
            "createGraphQLSchema": {
                "app": {"graphQLSchema": {"id": record["id"]}},
                "graphqlSchema": record,
            }
        }


def make_client(server: FakeOneGraph) -> AsyncOneGraph:
    config = OneGraphConfig(base_url=BASE_URL, onedash_app_id=ONEDASH_APP_ID, timeout=5.0)
    return AsyncOneGraph(config, transport=httpx.MockTransport(server.handle))


@pytest.fixture
def server() -> FakeOneGraph:
    return FakeOneGraph()


@pytest_asyncio.fixture
async def client(server):
    c = make_client(server)
    yield c
    await c.close()
