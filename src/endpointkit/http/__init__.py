# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubBlockingClient, StubClient
from .client import HTTP_SUCCESS_CODES, BlockingClient, Client, validate_response
from .httpx_client import HttpxBlockingClient, HttpxClient
from .models import Request, RequestMethod, Response
from .url import build_url

__all__ = [
    "HTTP_SUCCESS_CODES",
    "BlockingClient",
    "Client",
    "HttpxBlockingClient",
    "HttpxClient",
    "Request",
    "RequestMethod",
    "Response",
    "StubBlockingClient",
    "StubClient",
    "build_url",
    "validate_response",
]
