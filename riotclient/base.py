"""HTTP client with default headers, default query parameters and middleware."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import urlencode

import httpx

from .middleware import Middleware, apply_middleware

DEFAULT_TIMEOUT = 10.0

QueryValues = Mapping[str, "str | Iterable[str]"]


def _encode_query(defaults: Mapping[str, str], queries: QueryValues | None) -> str:
    """Merge default and per-call parameters and encode them sorted by key."""
    values: dict[str, list[str]] = {key: [value] for key, value in defaults.items()}
    for key, value in (queries or {}).items():
        items = [value] if isinstance(value, str) else list(value)
        values.setdefault(key, []).extend(items)
    return urlencode([(key, item) for key in sorted(values) for item in values[key]])


class BaseClient:
    """Sends requests relative to a base URL through a chain of middleware."""

    def __init__(
        self,
        base_url: str,
        *,
        http_client: httpx.Client | None = None,
        default_headers: Mapping[str, str] | None = None,
        default_queries: Mapping[str, str] | None = None,
        middleware: Iterable[Middleware] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.http_client = (
            http_client if http_client is not None else httpx.Client(timeout=DEFAULT_TIMEOUT)
        )
        self.default_headers: dict[str, str] = dict(default_headers or {})
        self.default_queries: dict[str, str] = dict(default_queries or {})
        self.middleware: list[Middleware] = list(middleware or [])

    def add_middleware(self, middleware: Middleware) -> None:
        """Append a middleware; earlier ones wrap later ones."""
        self.middleware.append(middleware)

    def invoke(
        self,
        method: str,
        path: str,
        body: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
        queries: QueryValues | None = None,
    ) -> httpx.Response:
        """Send a request to ``path``, which may also be an absolute URL."""
        return self._send(method, path, body, headers, queries)

    def _send(
        self,
        method: str,
        path: str,
        body: bytes | str | None,
        headers: Mapping[str, str] | None,
        queries: QueryValues | None,
        timeout: float | None = None,
    ) -> httpx.Response:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = self.base_url + path

        encoded = _encode_query(self.default_queries, queries)
        if encoded:
            url += "?" + encoded

        merged = httpx.Headers()
        for source in (self.default_headers, headers or {}):
            for key, value in source.items():
                merged[key] = value

        options = {} if timeout is None else {"timeout": timeout}
        request = self.http_client.build_request(
            method, url, content=body, headers=merged, **options
        )
        send = apply_middleware(self.http_client.send, self.middleware)
        return send(request)