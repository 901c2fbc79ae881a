# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio
import logging

import pytest

from endpointkit.errors import ErrorCategory, ServerResponseError, TransportError
from endpointkit.http.adapters import StubClient
from endpointkit.http.client import Client
from endpointkit.http.models import Request, Response

BASE = "http://api.test"
URL = "http://api.test/sys/health"


@pytest.mark.asyncio
async def test_async_success_returns_response():
    stub = StubClient(BASE)
    response = Response(url=URL, code=200, body=b'{"ok":true}')
    stub.add(URL, response)
    assert await stub.execute(Request(url=URL)) is response


@pytest.mark.asyncio
async def test_async_upper_boundary_is_success():
    stub = StubClient(BASE, {URL: Response(url=URL, code=208)})
    result = await stub.execute(Request(url=URL))
    assert result.code == 208


@pytest.mark.asyncio
async def test_async_just_outside_boundary_fails():
    stub = StubClient(BASE, {URL: Response(url=URL, code=209, body=b"odd")})
    with pytest.raises(ServerResponseError) as info:
        await stub.execute(Request(url=URL))
    assert info.value.code == 209
    assert info.value.content == "odd"


@pytest.mark.asyncio
async def test_async_invalid_utf8_error_body():
    stub = StubClient(BASE, {URL: Response(url=URL, code=500, body=bytes([0xFF, 0xFE]))})
    with pytest.raises(ServerResponseError) as info:
        await stub.execute(Request(url=URL))
    assert info.value.content is None


@pytest.mark.asyncio
async def test_async_send_failure_propagates_verbatim():
    error = TransportError("timed out", url=URL, category=ErrorCategory.TIMEOUT)
    stub = StubClient(BASE)
    stub.fail(URL, error)
    with pytest.raises(TransportError) as info:
        await stub.execute(Request(url=URL))
    assert info.value is error


@pytest.mark.asyncio
async def test_async_pipeline_logs(caplog):
    caplog.set_level(logging.INFO, logger="endpointkit.http.client")
    stub = StubClient(BASE, {URL: Response(url=URL, code=204)})
    await stub.execute(Request(url=URL, method="DELETE"))
    assert [r.getMessage() for r in caplog.records] == [
        f"Client sending DELETE request to {URL} with 0 bytes of data",
        f"Client received 204 response from {URL} with 0 bytes of body data",
    ]


@pytest.mark.asyncio
async def test_async_client_shared_between_tasks():
    class SlowClient(Client):
        def base(self) -> str:
            return BASE

        async def send(self, request: Request) -> Response:
            await asyncio.sleep(0)
            code = 200 if request.url.endswith("/ok") else 404
            return Response(url=request.url, code=code, body=request.url.encode())

    client = SlowClient()
    urls = [f"{BASE}/{i}/ok" if i % 2 == 0 else f"{BASE}/{i}/missing" for i in range(10)]
    results = await asyncio.gather(*(client.execute(Request(url=url)) for url in urls), return_exceptions=True)

    for url, result in zip(urls, results):
        if url.endswith("/ok"):
            assert isinstance(result, Response)
            assert result.body == url.encode()
        else:
            assert isinstance(result, ServerResponseError)
            assert result.url == url


@pytest.mark.asyncio
async def test_async_cancellation_is_not_converted():
    class HangingClient(Client):
        def base(self) -> str:
            return BASE

        async def send(self, request: Request) -> Response:
            await asyncio.sleep(3600)
            raise AssertionError("unreachable")

    task = asyncio.ensure_future(HangingClient().execute(Request(url=URL)))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
