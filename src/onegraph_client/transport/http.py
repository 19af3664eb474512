"""
HTTP client for the OneGraph serve host — used by the GraphQL executor
and the raw schema fetch.
"""

from typing import Any, Optional

import httpx

from onegraph_client.config import OneGraphConfig
from onegraph_client.errors import HttpStatusError


class HttpClient:
    def __init__(
        self,
        config: Optional[OneGraphConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config or OneGraphConfig()
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url.rstrip("/"),
            headers={"User-Agent": self._config.user_agent, "Accept": "application/json"},
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> OneGraphConfig:
        return self._config

    @staticmethod
    def _check(resp: httpx.Response) -> httpx.Response:
        if resp.status_code >= 400:
            try:
                body: Any = resp.json()
            except ValueError:
                body = resp.text[:200]
            raise HttpStatusError(resp.status_code, f"HTTP {resp.status_code}: {resp.text[:200]}", body)
        return resp

    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        resp = await self._client.get(path, params=params)
        return self._check(resp).json()

    async def post(
        self, path: str, body: Optional[dict[str, Any]] = None, params: Optional[dict[str, str]] = None,
    ) -> Any:
        resp = await self._client.post(
            path, json=body, params=params, headers={"Content-Type": "application/json"},
        )
        return self._check(resp).json()

    async def close(self) -> None:
        await self._client.aclose()
