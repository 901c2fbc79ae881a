# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed client implementations."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import ClientError, TransportError
from .client import BlockingClient, Client
from .models import Request, Response


def _target_url(request: Request) -> httpx.URL | str:
    """
    Append the rendered query pairs to the request URL.

    httpx ``params`` groups repeated keys, so the query string is encoded here to keep the
    caller's order. Pairs go after any query string already present on the URL.
    """
    pairs = request.query_params()
    if not pairs:
        return request.url
    url = httpx.URL(request.url)
    encoded = urlencode(pairs)
    query = f"{url.query.decode('ascii')}&{encoded}" if url.query else encoded
    return url.copy_with(query=query.encode("ascii"))


def _request_kwargs(request: Request, user_agent: str) -> dict[str, Any]:
    headers = list(request.headers)
    if not any(name.lower() == "user-agent" for name, _ in headers):
        headers.append(("User-Agent", user_agent))
    return {
        "method": request.method.value,
        "url": _target_url(request),
        "headers": headers,
        "content": request.body or None,
    }


def _to_response(resp: httpx.Response) -> Response:
    return Response(url=str(resp.url), code=resp.status_code, body=resp.content)


class HttpxBlockingClient(BlockingClient):
    """Synchronous httpx client wrapper."""

    def __init__(
        self,
        base_url: str | None = None,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._base_url = base_url if base_url is not None else self.settings.base_url
        self._owns_client = client is None
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def base(self) -> str:
        return self._base_url

    def send(self, request: Request) -> Response:
        try:
            resp = self._client.request(**_request_kwargs(request, self.settings.user_agent))
        except ClientError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise TransportError.from_exception(exc, url=request.url) from exc
        return _to_response(resp)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxBlockingClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()


class HttpxClient(Client):
    """Asynchronous httpx client wrapper; one instance can serve many concurrent tasks."""

    def __init__(
        self,
        base_url: str | None = None,
        settings: HttpSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._base_url = base_url if base_url is not None else self.settings.base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def base(self) -> str:
        return self._base_url

    async def send(self, request: Request) -> Response:
        try:
            resp = await self._client.request(**_request_kwargs(request, self.settings.user_agent))
        except ClientError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise TransportError.from_exception(exc, url=request.url) from exc
        return _to_response(resp)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()


__all__ = ["HttpxBlockingClient", "HttpxClient"]
