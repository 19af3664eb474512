"""
Integration tests against the real OneGraph service.

Requires environment variables:
  ONEGRAPH_AUTH_TOKEN  — valid Netlify access token
  ONEGRAPH_SITE_ID     — Netlify site id with a OneGraph app
  ONEGRAPH_BASE_URL    — (optional) defaults to https://serve.onegraph.com

Run: ONEGRAPH_INTEGRATION=1 pytest tests/integration/ -v
"""

import os

import pytest
import pytest_asyncio

from onegraph_client import AsyncOneGraph, OneGraphConfig
from onegraph_client.models.session import SessionStatus

SKIP = not os.environ.get("ONEGRAPH_INTEGRATION")
AUTH_TOKEN = os.environ.get("ONEGRAPH_AUTH_TOKEN", "")
SITE_ID = os.environ.get("ONEGRAPH_SITE_ID", "")

pytestmark = pytest.mark.skipif(SKIP, reason="ONEGRAPH_INTEGRATION not set")


@pytest_asyncio.fixture
async def live():
    client = AsyncOneGraph(OneGraphConfig.from_env())
    yield client
    await client.close()


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_create_heartbeat_poll_deactivate(self, live):
        session = (await live.sessions.create(AUTH_TOKEN, SITE_ID, "onegraph-client integration")).unwrap()

        beat = await live.events.heartbeat(AUTH_TOKEN, SITE_ID, session.id)
        assert beat.unwrap().status is SessionStatus.ACTIVE

        batch = await live.events.fetch_batch(SITE_ID, AUTH_TOKEN, session.id, desired_count=10)
        assert batch.errors == []

        ack = await live.events.acknowledge(SITE_ID, AUTH_TOKEN, session.id, [])
        assert ack.errors == []

        gone = await live.events.deactivate(AUTH_TOKEN, SITE_ID, session.id)
        assert gone.unwrap().status is SessionStatus.INACTIVE


class TestSchema:
    @pytest.mark.asyncio
    async def test_enabled_services_and_schema(self, live):
        services = (await live.apps.fetch_enabled_services(AUTH_TOKEN, SITE_ID)).unwrap_or([])
        schema = await live.schema.fetch_schema(SITE_ID, [s.service for s in services] or ["ONEGRAPH"])
        assert schema is not None
