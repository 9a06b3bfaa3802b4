"""A minimal HTTP and websocket server feeding a single browser board viewer."""

from __future__ import annotations

import asyncio
import json
import logging
import queue
import socket
import threading

from aiohttp import WSCloseCode, web

from .api import Game, GameEvent

logger = logging.getLogger(__name__)

_EVENT_BUFFER_SIZE = 1000
_POLL_INTERVAL = 0.05
_ALLOWED_METHODS = frozenset({"GET", "POST", "OPTIONS"})


def _is_preflight(request: web.BaseRequest) -> bool:
    return request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers


@web.middleware
async def _cors_preflight(request: web.Request, handler):
    if _is_preflight(request):
        return web.Response(status=204)
    return await handler(request)


async def _add_cors_headers(request: web.BaseRequest, response: web.StreamResponse) -> None:
    response.headers.add("Vary", "Origin")
    if not request.headers.get("Origin"):
        return
    if _is_preflight(request):
        method = request.headers["Access-Control-Request-Method"].upper()
        if method not in _ALLOWED_METHODS:
            return
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = method
        requested_headers = request.headers.get("Access-Control-Request-Headers")
        if requested_headers:
            response.headers["Access-Control-Allow-Headers"] = requested_headers
    else:
        if request.method not in _ALLOWED_METHODS:
            return
        response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Credentials"] = "true"


class BoardServer:
    """Serves one game's metadata and streams its events to a board viewer.

    Events sent before a viewer connects are buffered. ``shutdown`` ends the
    event stream and waits until a viewer has received every event (or until
    ``shutdown_timeout`` seconds pass, when one is given).
    """

    def __init__(self, game: Game, *, shutdown_timeout: float | None = None) -> None:
        self.game = game
        self._shutdown_timeout = shutdown_timeout
        self._events: queue.Queue[GameEvent] = queue.Queue(maxsize=_EVENT_BUFFER_SIZE)
        self._closed = threading.Event()
        self._done = threading.Event()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._runner: web.AppRunner | None = None
        self._app = self._build_app()

    def _build_app(self) -> web.Application:
        app = web.Application(middlewares=[_cors_preflight])
        app.on_response_prepare.append(_add_cors_headers)
        app.router.add_route("*", f"/games/{self.game.id}", self._handle_game)
        app.router.add_route("*", f"/games/{self.game.id}/events", self._handle_websocket)
        return app

    async def _handle_game(self, request: web.Request) -> web.Response:
        body = json.dumps({"Game": self.game.to_dict()}, separators=(",", ":"), ensure_ascii=False)
        return web.Response(text=body + "\n", content_type="application/json")

    def _next_event(self) -> GameEvent | None:
        """Block until an event is available, or return None once the stream is drained."""
        while True:
            try:
                return self._events.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                if self._closed.is_set() and self._events.empty():
                    return None

    async def _handle_websocket(self, request: web.Request) -> web.StreamResponse:
        ws = web.WebSocketResponse()
        if not ws.can_prepare(request).ok:
            logger.error("Unable to upgrade connection: not a websocket request")
            raise web.HTTPBadRequest(text="Bad Request")
        await ws.prepare(request)

        loop = asyncio.get_running_loop()
        try:
            while True:
                event = await loop.run_in_executor(None, self._next_event)
                if event is None:
                    break
                if ws.closed:
                    logger.error("Unable to write to websocket: connection closed")
                    break
                try:
                    await ws.send_str(event.to_json())
                except (ConnectionError, RuntimeError) as exc:
                    logger.error("Unable to write to websocket: %s", exc)
                    break
            logger.debug("Finished writing all game events, sending websocket close message")
            try:
                await ws.close(code=WSCloseCode.OK)
            except (ConnectionError, RuntimeError) as exc:
                logger.error("Problem closing websocket: %s", exc)
        finally:
            logger.debug("Signalling game server to stop")
            self._done.set()
        return ws

    async def _start(self, sock: socket.socket) -> None:
        runner = web.AppRunner(self._app, access_log=None)
        await runner.setup()
        site = web.SockSite(runner, sock)
        await site.start()
        self._runner = runner

    @staticmethod
    def _run_loop(loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        try:
            loop.run_forever()
        finally:
            loop.run_until_complete(loop.shutdown_default_executor())
            loop.close()

    def listen(self) -> str:
        """Start serving on a free local port and return the server's base URL."""
        if self._loop is not None:
            raise RuntimeError("board server is already listening")

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.bind(("127.0.0.1", 0))
        except OSError:
            sock.close()
            raise

        loop = asyncio.new_event_loop()
        thread = threading.Thread(target=self._run_loop, args=(loop,), name="board-server", daemon=True)
        thread.start()
        try:
            asyncio.run_coroutine_threadsafe(self._start(sock), loop).result()
        except BaseException:
            loop.call_soon_threadsafe(loop.stop)
            thread.join()
            sock.close()
            raise

        self._loop, self._thread = loop, thread
        host, port = sock.getsockname()[:2]
        return f"http://{host}:{port}"

    def shutdown(self) -> None:
        """End the event stream, wait for the viewer to finish, then stop serving."""
        self._closed.set()

        logger.debug("Waiting for websocket clients to finish")
        if not self._done.wait(self._shutdown_timeout):
            logger.warning("Timed out waiting for websocket clients to finish")
        logger.debug("Server is done, exiting")

        loop, thread, runner = self._loop, self._thread, self._runner
        if loop is None or thread is None:
            return
        self._loop = self._thread = self._runner = None
        try:
            if runner is not None:
                asyncio.run_coroutine_threadsafe(runner.cleanup(), loop).result()
        except Exception as exc:
            logger.error("Error shutting down HTTP server: %s", exc)
        finally:
            loop.call_soon_threadsafe(loop.stop)
            thread.join()

    def send_event(self, event: GameEvent) -> None:
        """Queue an event for the viewer, blocking while the buffer is full."""
        if self._closed.is_set():
            raise RuntimeError("event stream is closed")
        self._events.put(event)