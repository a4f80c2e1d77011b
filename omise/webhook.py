"""WSGI application that receives webhook events."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any

StartResponse = Callable[..., Any]
EventHandler = Callable[[dict, StartResponse, dict], Iterable[bytes]]


def _read_event(environ: dict) -> dict:
    stream = environ["wsgi.input"]
    try:
        length = int(environ.get("CONTENT_LENGTH") or -1)
    except ValueError:
        length = -1
    body = stream.read(length) if length >= 0 else stream.read()
    text = body.decode("utf-8").lstrip()
    if not text:
        raise ValueError("EOF")
    event, _ = json.JSONDecoder().raw_decode(text)
    if not isinstance(event, dict):
        raise ValueError(f"event must be a JSON object, got {type(event).__name__}")
    return event


def _bad_request(start_response: StartResponse, message: str) -> list[bytes]:
    body = (message + "\n").encode("utf-8")
    start_response(
        "400 Bad Request",
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("X-Content-Type-Options", "nosniff"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


class WebhookApp:
    """Decode the request body as an event and pass it to a handler.

    The handler is called as ``handler(environ, start_response, event)``, or its
    ``handle_event`` method is, if it has one. A body that is not a JSON object
    is answered with 400 Bad Request.
    """

    def __init__(self, handler: Any) -> None:
        handle = getattr(handler, "handle_event", handler)
        if not callable(handle):
            raise TypeError("handler must be callable or have a handle_event method")
        self._handle: EventHandler = handle

    def __call__(self, environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        try:
            event = _read_event(environ)
        except ValueError as exc:
            return _bad_request(start_response, str(exc))
        return self._handle(environ, start_response, event)


def webhook_app(handler: Any) -> WebhookApp:
    """Create a WSGI application that delivers decoded events to ``handler``."""
    return WebhookApp(handler)