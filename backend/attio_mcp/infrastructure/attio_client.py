"""Attio Client: thin async HTTP client bound to one base URL and one bearer key.

Invariants:
    - get/post return parsed JSON on 2xx
    - Any non-2xx or transport-level failure raises RemoteServiceError(status, headers, data)
    - Base URL and credential fixed at construction, no per-call override
    - No retries, no timeout override: httpx defaults apply

Design Decisions:
    - AttioClientConfig is a frozen value passed in explicitly, never read from
      globals, so handlers depend only on what they are given (ADR: no ambient state)
    - Optional httpx transport parameter: tests inject httpx.MockTransport
      instead of patching the network layer
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from attio_mcp.core.errors import RemoteServiceError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttioClientConfig:
    base_url: str
    api_key: str = field(repr=False)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }


class AttioClient:
    """GET/POST primitives over httpx.AsyncClient."""

    def __init__(
        self,
        config: AttioClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers,
            transport=transport,
        )

    async def __aenter__(self) -> "AttioClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        return await self._request("POST", path, body)

    async def _request(self, method: str, path: str, body: Any = None) -> Any:
        try:
            response = await self._http.request(method, path, json=body)
        except httpx.HTTPError as e:
            logger.warning(
                f"Attio {method} {path} failed before a response: {e!r}",
                extra={"method": method, "url": path},
            )
            raise RemoteServiceError(str(e) or type(e).__name__) from e

        data = _parse_body(response)
        if not response.is_success:
            logger.warning(
                f"Attio {method} {path} returned {response.status_code}",
                extra={"method": method, "url": path, "status": response.status_code},
            )
            raise RemoteServiceError(
                f"Request failed with status code {response.status_code}",
                status=response.status_code,
                headers=dict(response.headers),
                data=data,
            )
        return data


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
