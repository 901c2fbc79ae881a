# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory client implementations for tests and offline callers."""

from __future__ import annotations

from ..errors import ClientError, ErrorCategory, TransportError
from .client import BlockingClient, Client
from .models import Request, Response


class _StubRegistry:
    def __init__(self, base_url: str = "", responses: dict[str, Response] | None = None):
        self._base_url = base_url
        self._outcomes: dict[str, Response | ClientError] = dict(responses or {})
        self.requests: list[Request] = []

    def base(self) -> str:
        return self._base_url

    def add(self, url: str, response: Response) -> None:
        self._outcomes[url] = response

    def fail(self, url: str, error: ClientError) -> None:
        self._outcomes[url] = error

    def _resolve(self, request: Request) -> Response:
        self.requests.append(request)
        outcome = self._outcomes.get(request.url)
        if outcome is None:
            raise TransportError(
                "No stubbed response configured",
                url=request.url,
                category=ErrorCategory.CONNECTION_ERROR,
            )
        if isinstance(outcome, ClientError):
            raise outcome
        return outcome


class StubBlockingClient(_StubRegistry, BlockingClient):
    """Deterministic, programmable BlockingClient for tests."""

    def send(self, request: Request) -> Response:
        return self._resolve(request)


class StubClient(_StubRegistry, Client):
    """Deterministic, programmable async Client for tests."""

    async def send(self, request: Request) -> Response:
        return self._resolve(request)


__all__ = ["StubBlockingClient", "StubClient"]
