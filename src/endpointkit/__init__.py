# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
endpointkit package entrypoint.

Endpoint definitions build a Request and hand it to a client's ``execute``. Clients come in
a blocking and an asynchronous flavour that share one validation pipeline; concrete
networking backends only implement ``send`` and ``base``.
"""

from .config import HttpSettings, load_http_settings
from .errors import ClientError, ErrorCategory, ServerResponseError, TransportError
from .http import (
    HTTP_SUCCESS_CODES,
    BlockingClient,
    Client,
    HttpxBlockingClient,
    HttpxClient,
    Request,
    RequestMethod,
    Response,
    StubBlockingClient,
    StubClient,
    build_url,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "HTTP_SUCCESS_CODES",
    "BlockingClient",
    "Client",
    "ClientError",
    "ErrorCategory",
    "HttpSettings",
    "HttpxBlockingClient",
    "HttpxClient",
    "Request",
    "RequestMethod",
    "Response",
    "ServerResponseError",
    "StubBlockingClient",
    "StubClient",
    "TransportError",
    "__version__",
    "build_url",
    "load_http_settings",
    "setup_logging",
]
