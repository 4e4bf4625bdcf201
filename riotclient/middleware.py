"""Request middleware: wrappers around the function that sends a request."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import httpx

Handler = Callable[[httpx.Request], httpx.Response]
Middleware = Callable[[Handler], Handler]


def apply_middleware(handler: Handler, middlewares: Iterable[Middleware]) -> Handler:
    """Wrap ``handler`` so that the first middleware runs first."""
    for middleware in reversed(list(middlewares)):
        handler = middleware(handler)
    return handler


def logging_middleware(logger: logging.Logger | None = None) -> Middleware:
    """Return a middleware that logs each request and its response status."""
    log = logger or logging.getLogger("riotclient")

    def middleware(next_handler: Handler) -> Handler:
        def handle(request: httpx.Request) -> httpx.Response:
            log.info("--> %s %s", request.method, request.url)
            response = next_handler(request)
            log.info("<-- %s %s", response.status_code, response.reason_phrase)
            return response

        return handle

    return middleware