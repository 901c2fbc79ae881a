# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blocking and asynchronous client contracts sharing one execution pipeline."""

from __future__ import annotations

import abc
import logging
from typing import final

from ..errors import ServerResponseError
from .models import Request, Response

logger = logging.getLogger(__name__)

# Inclusive 200..208; 226 and every 3xx are treated as failures.
HTTP_SUCCESS_CODES = range(200, 209)


def log_request(request: Request) -> None:
    logger.info(
        "Client sending %s request to %s with %d bytes of data",
        request.method.value,
        request.url,
        len(request.body),
    )


def log_response(response: Response) -> None:
    logger.info(
        "Client received %d response from %s with %d bytes of body data",
        response.code,
        response.url,
        len(response.body),
    )


def validate_response(response: Response) -> Response:
    """Return the response unchanged when its code is a success, otherwise raise ServerResponseError."""
    if response.code not in HTTP_SUCCESS_CODES:
        raise ServerResponseError(url=str(response.url), code=response.code, content=response.text())
    return response


class BlockingClient(abc.ABC):
    """
    Client which executes requests on the calling thread.

    Implementations provide ``send`` and ``base``; ``execute`` is the shared pipeline and
    must not be overridden.
    """

    @abc.abstractmethod
    def send(self, request: Request) -> Response:
        """Send the request and return the raw response.

        Implementations must raise ClientError (usually TransportError) for every
        transport failure.
        """

    @abc.abstractmethod
    def base(self) -> str:
        """Return the configured base URL used to build fully qualified request URLs."""

    @final
    def execute(self, request: Request) -> Response:
        log_request(request)
        response = self.send(request)
        log_response(response)
        return validate_response(response)


class Client(abc.ABC):
    """
    Client which executes requests as coroutines.

    Instances may be shared between concurrently running tasks, so ``send`` must not keep
    per-call state on the instance.
    """

    @abc.abstractmethod
    async def send(self, request: Request) -> Response:
        """Send the request and return the raw response.

        Implementations must raise ClientError (usually TransportError) for every
        transport failure.
        """

    @abc.abstractmethod
    def base(self) -> str:
        """Return the configured base URL used to build fully qualified request URLs."""

    @final
    async def execute(self, request: Request) -> Response:
        log_request(request)
        response = await self.send(request)
        log_response(response)
        return validate_response(response)


__all__ = [
    "HTTP_SUCCESS_CODES",
    "BlockingClient",
    "Client",
    "log_request",
    "log_response",
    "validate_response",
]
