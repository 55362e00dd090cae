import logging

import aiohttp
import pytest
from aiohttp import test_utils

from tankfield.server import UPGRADE_ERROR, GameServer


def test_address_joins_host_and_port():
    server = GameServer("Game Server", "localhost", 40000)
    assert server.address == "localhost:40000"


@pytest.mark.asyncio
async def test_plain_request_is_rejected():
    server = GameServer("Game Server", "127.0.0.1", 0)
    async with test_utils.TestClient(test_utils.TestServer(server.make_app())) as client:
        response = await client.get("/ws")
        assert response.status == 400
        assert (await response.text()).strip() == UPGRADE_ERROR


@pytest.mark.asyncio
async def test_websocket_connects_and_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="tankfield.server")
    server = GameServer("Game Server", "127.0.0.1", 0)
    async with test_utils.TestClient(test_utils.TestServer(server.make_app())) as client:
        ws = await client.ws_connect("/ws")
        message = await ws.receive()
        assert message.type in (aiohttp.WSMsgType.CLOSE, aiohttp.WSMsgType.CLOSED)
        await ws.close()
    assert "Client connected" in caplog.messages


@pytest.mark.asyncio
async def test_start_http_serves_ws_route():
    server = GameServer("Game Server", "127.0.0.1", 0)
    runner = await server.start_http()
    try:
        host, port = runner.addresses[0][:2]
        async with aiohttp.ClientSession() as session:
            async with session.get(f"http://{host}:{port}/ws") as response:
                assert response.status == 400
    finally:
        await runner.cleanup()