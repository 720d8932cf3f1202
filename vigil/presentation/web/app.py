"""
Vigil HTTP Transport

Architectural Intent:
- Thin transport built entirely on Python stdlib (http.server + asyncio)
- Decodes JSON bodies and hands them to the ingress gate or the notifier
  fan-out; no domain logic of its own

API Surface:
    GET        /v1/health          -> {"status": "ok", "watching": bool}
    POST|PUT   /v1/process/events  -> JSON array of cluster events
    POST       /v1/process/alerts  -> JSON array of alert records

Threading Model:
    ThreadingHTTPServer runs in a daemon thread. Handlers schedule the
    async use cases on the event loop captured at start() and block their
    own thread on the result, so a full event queue applies backpressure to
    the request rather than to the loop.
"""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional

from vigil.application.use_cases.ingress_gate import IngressGate
from vigil.application.use_cases.notify_alerts import NotifyAlerts
from vigil.domain.errors import EncodingError
from vigil.domain.events.event import decode_events
from vigil.domain.value_objects.message import Message

logger = logging.getLogger(__name__)


def decode_messages(raw: bytes) -> list[Message]:
    """Decode a JSON array of alert records."""
    try:
        data = json.loads(raw) if raw else []
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EncodingError(f"Invalid alert batch: {e}") from e
    if not isinstance(data, list):
        raise EncodingError("Alert batch must be a JSON array")
    return [Message.from_dict(item) for item in data]


class VigilRequestHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the Vigil transport.

    Attributes on the *server* instance (set by VigilWebApp):
        gate:          IngressGate   -- event ingestion
        notify_alerts: NotifyAlerts  -- alert fan-out
        loop:          asyncio event loop running the dispatcher
    """

    # Silence per-request log lines from BaseHTTPRequestHandler
    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug("web: %s", format % args)

    # ---- routing -----------------------------------------------------------

    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/v1/health":
            gate: IngressGate = self.server.gate  # type: ignore[attr-defined]
            self._send_json({"status": "ok", "watching": gate.armed})
        else:
            self._send_json({"error": "not found"}, HTTPStatus.NOT_FOUND)

    def do_POST(self) -> None:  # noqa: N802
        if self.path == "/v1/process/events":
            self._handle_events()
        elif self.path == "/v1/process/alerts":
            self._handle_alerts()
        else:
            self._send_json({"error": "not found"}, HTTPStatus.NOT_FOUND)

    def do_PUT(self) -> None:  # noqa: N802
        if self.path == "/v1/process/events":
            self._handle_events()
        else:
            self._send_json({"error": "not found"}, HTTPStatus.NOT_FOUND)

    # ---- endpoint implementations ------------------------------------------

    def _handle_events(self) -> None:
        try:
            events = decode_events(self._read_body())
        except EncodingError as e:
            self._send_json({"error": str(e)}, HTTPStatus.BAD_REQUEST)
            return

        gate: IngressGate = self.server.gate  # type: ignore[attr-defined]
        accepted = self._run(gate.admit(events))
        status = HTTPStatus.OK if accepted else HTTPStatus.SERVICE_UNAVAILABLE
        self._send_json({"accepted": accepted}, status)

    def _handle_alerts(self) -> None:
        try:
            messages = decode_messages(self._read_body())
        except EncodingError as e:
            self._send_json({"error": str(e)}, HTTPStatus.BAD_REQUEST)
            return

        notify_alerts: NotifyAlerts = self.server.notify_alerts  # type: ignore[attr-defined]
        results = self._run(notify_alerts.execute(messages))
        if results and not any(results.values()):
            self._send_json(
                {"status": "error", "results": results}, HTTPStatus.BAD_GATEWAY
            )
            return
        self._send_json({"status": "ok", "results": results})

    # ---- helpers -----------------------------------------------------------

    def _run(self, coro) -> Any:
        """Run *coro* on the application loop and wait for its result."""
        loop: asyncio.AbstractEventLoop = self.server.loop  # type: ignore[attr-defined]
        return asyncio.run_coroutine_threadsafe(coro, loop).result()

    def _read_body(self) -> bytes:
        try:
            content_length = int(self.headers.get("Content-Length", 0) or 0)
        except ValueError as e:
            raise EncodingError(f"Invalid Content-Length: {e}") from e
        if content_length < 0:
            raise EncodingError("Invalid Content-Length: negative")
        return self.rfile.read(content_length) if content_length else b""

    def _send_json(self, data: Any, status: HTTPStatus = HTTPStatus.OK) -> None:
        """Serialize *data* as JSON and send it as the HTTP response."""
        body = json.dumps(data, default=str).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


class VigilWebApp:
    """Async-friendly HTTP transport for the Vigil daemon.

    Usage::

        app = VigilWebApp(gate=container.gate, notify_alerts=container.notify_alerts)
        await app.start("0.0.0.0", 9000)
        # ... later ...
        app.stop()
    """

    def __init__(self, gate: IngressGate, notify_alerts: NotifyAlerts) -> None:
        self.gate = gate
        self.notify_alerts = notify_alerts
        self._server: Optional[ThreadingHTTPServer] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def port(self) -> int:
        return self._server.server_address[1] if self._server else 0

    async def start(self, host: str = "127.0.0.1", port: int = 9000) -> None:
        """Start the server in a background thread bound to the running loop."""
        self._server = ThreadingHTTPServer((host, port), VigilRequestHandler)
        self._server.daemon_threads = True
        # Attach application state to the server so handlers can access it.
        self._server.gate = self.gate  # type: ignore[attr-defined]
        self._server.notify_alerts = self.notify_alerts  # type: ignore[attr-defined]
        self._server.loop = asyncio.get_running_loop()  # type: ignore[attr-defined]

        self._thread = threading.Thread(
            target=self._server.serve_forever,
            daemon=True,
            name="vigil-web",
        )
        self._thread.start()
        logger.info("Vigil listening on http://%s:%d", host, self.port)

    def stop(self) -> None:
        """Shut down the server gracefully."""
        if self._server is not None:
            self._server.shutdown()
            self._server.server_close()
            logger.info("Vigil HTTP transport stopped")
        if self._thread is not None:
            self._thread.join(timeout=5)
