# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    INVALID_URL = "INVALID_URL"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ClientError(Exception):
    """Base class for every error surfaced by a client."""


class TransportError(ClientError):
    """A failure inside a transport's ``send`` before any response was received."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.url = url
        self.category = category

    @classmethod
    def from_exception(cls, exc: BaseException, *, url: str | None = None) -> TransportError:
        """Wrap an implementation-specific exception, keeping it as ``__cause__``."""
        error = cls(str(exc) or type(exc).__name__, url=url, category=categorize_exception(exc))
        error.__cause__ = exc
        return error


class ServerResponseError(ClientError):
    """The server answered with a status code outside the success range."""

    def __init__(self, url: str, code: int, content: str | None = None):
        super().__init__(url, code, content)
        self.url = url
        self.code = code
        self.content = content

    def __str__(self) -> str:
        return f"Server returned {self.code} from {self.url}"

    def __repr__(self) -> str:
        return f"ServerResponseError(url={self.url!r}, code={self.code!r}, content={self.content!r})"


def _exception_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps low-level socket and TLS failures in ConnectError, so the cause chain is
    inspected for those first.
    """
    chain = _exception_chain(exc)

    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR

    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return ErrorCategory.INVALID_URL

    if isinstance(exc, (httpx.ConnectError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.ProtocolError, httpx.DecodingError, httpx.TooManyRedirects)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ClientError",
    "ErrorCategory",
    "ServerResponseError",
    "TransportError",
    "categorize_exception",
]
