# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by every client implementation."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

QueryPairs = tuple[tuple[str, Any], ...]
HeaderPairs = tuple[tuple[str, str], ...]


class RequestMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    LIST = "LIST"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


def _coerce_body(body: Any) -> bytes:
    if body is None:
        return b""
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    raise TypeError(f"Request body must be bytes, got {type(body).__name__}")


def _coerce_headers(headers: Iterable[tuple[str, str]] | None) -> HeaderPairs:
    if not headers:
        return ()
    if isinstance(headers, dict):
        headers = headers.items()
    pairs = tuple((name, value) for name, value in headers)
    for name, value in pairs:
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(f"Header names and values must be str, got {type(name).__name__}: {type(value).__name__}")
    return pairs


def _render_query_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class Request:
    """Immutable request handed to a client's ``execute``.

    ``query`` and ``headers`` are ordered pairs; lists and other iterables are frozen into
    tuples on construction so the request cannot change while it moves through a client.
    """

    url: str
    method: RequestMethod = RequestMethod.GET
    query: QueryPairs = ()
    headers: HeaderPairs = ()
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", str(self.url))
        object.__setattr__(self, "method", RequestMethod(str(getattr(self.method, "value", self.method)).upper()))
        object.__setattr__(self, "query", _freeze_pairs(self.query))
        object.__setattr__(self, "headers", _coerce_headers(self.headers))
        object.__setattr__(self, "body", _coerce_body(self.body))

    def query_params(self) -> list[tuple[str, str]]:
        """Render structured query values as wire strings, preserving order and dropping None."""
        return [(key, _render_query_value(value)) for key, value in self.query if value is not None]


@dataclass(frozen=True)
class Response:
    """Raw response returned by a transport's ``send``."""

    url: str
    code: int
    body: bytes = field(default=b"", repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", str(self.url))
        object.__setattr__(self, "code", int(self.code))
        object.__setattr__(self, "body", _coerce_body(self.body))

    def text(self) -> str | None:
        """Return the body decoded as UTF-8, or None when it is not valid UTF-8."""
        try:
            return self.body.decode("utf-8")
        except UnicodeDecodeError:
            return None


def _freeze_pairs(pairs: Iterable[tuple[str, Any]] | None) -> tuple[tuple[str, Any], ...]:
    if not pairs:
        return ()
    if isinstance(pairs, dict):
        pairs = pairs.items()
    return tuple((str(key), value) for key, value in pairs)


__all__ = ["HeaderPairs", "QueryPairs", "Request", "RequestMethod", "Response"]
