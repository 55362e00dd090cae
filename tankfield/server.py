"""A small HTTP server that accepts game websocket connections."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from aiohttp import web

WS_SERVER_ENDPOINT = "ws://localhost:40000"
UPGRADE_ERROR = "Could not open websocket connection"

logger = logging.getLogger(__name__)


@dataclass
class GameServer:
    """A named game server listening on a host and port."""

    name: str
    host: str
    port: int

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/ws", self.handle_ws)
        return app

    async def handle_ws(self, request: web.Request) -> web.StreamResponse:
        """Upgrade the request to a websocket, or answer 400 if it cannot be."""
        ws = web.WebSocketResponse()
        if not ws.can_prepare(request).ok:
            return web.Response(status=400, text=UPGRADE_ERROR + "\n")
        await ws.prepare(request)
        logger.info("Client connected")
        await ws.close()
        return ws

    async def start_http(self) -> web.AppRunner:
        """Start serving in the background; clean up the returned runner to stop."""
        logger.info("Starting HTTP server on port %d", self.port)
        runner = web.AppRunner(self.make_app())
        await runner.setup()
        await web.TCPSite(runner, self.host, self.port).start()
        return runner


def main(argv: list[str] | None = None) -> int:
    """Run the game server until interrupted."""
    parser = argparse.ArgumentParser(prog="tankfield-server")
    parser.add_argument("--name", default="Game Server")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=40000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    server = GameServer(args.name, args.host, args.port)
    web.run_app(server.make_app(), host=server.host, port=server.port, print=None)
    return 0