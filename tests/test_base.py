import httpx

from riotclient.base import BaseClient


def _recording_client(status=200):
    """Client whose transport records each request and echoes it back as JSON."""
    captured = []

    def handler(request):
        captured.append(request)
        return httpx.Response(
            status,
            json={
                "url": str(request.url),
                "path": request.url.raw_path.decode("ascii"),
                "method": request.method,
                "headers": [[key, value] for key, value in request.headers.multi_items()],
            },
        )

    return httpx.Client(transport=httpx.MockTransport(handler)), captured


def _echoed_header(response, name):
    return [value for key, value in response.json()["headers"] if key.lower() == name.lower()]


def test_new_base_client_options():
    custom_http = httpx.Client(timeout=42.0)
    client = BaseClient(
        "http://example.com",
        http_client=custom_http,
        default_headers={"X-Foo": "Bar"},
        default_queries={"a": "b"},
    )
    assert client.http_client is custom_http
    assert client.default_headers["X-Foo"] == "Bar"
    assert client.default_queries["a"] == "b"


def test_base_url_trailing_slashes_are_removed():
    client = BaseClient("http://example.com//", http_client=httpx.Client())
    assert client.base_url == "http://example.com"


def test_default_http_client_has_ten_second_timeout():
    client = BaseClient("http://example.com")
    assert client.http_client.timeout.read == 10.0


def test_invoke_url_building():
    http_client, captured = _recording_client()
    client = BaseClient(
        "http://testserver",
        http_client=http_client,
        default_headers={"X-Default": "D"},
        default_queries={"def": "1"},
    )

    response = client.invoke("GET", "/foo", None, {"X-Custom": "C"}, {"extra": ["2"]})

    assert response.status_code == 200
    assert response.json()["path"] == "/foo?def=1&extra=2"
    assert len(captured) == 1
    request = captured[0]
    assert request.url.raw_path == b"/foo?def=1&extra=2"
    assert request.headers["X-Default"] == "D"
    assert request.headers["X-Custom"] == "C"


def test_invoke_without_queries_has_no_question_mark():
    http_client, captured = _recording_client()
    client = BaseClient("http://testserver", http_client=http_client)
    response = client.invoke("GET", "/plain")
    assert response.json()["path"] == "/plain"
    assert captured[0].url.raw_path == b"/plain"


def test_invoke_keeps_default_and_extra_values_for_same_key():
    http_client, captured = _recording_client()
    client = BaseClient("http://testserver", http_client=http_client, default_queries={"a": "1"})
    response = client.invoke("GET", "/q", queries={"a": "2", "b": ["x", "y"]})
    assert response.json()["path"] == "/q?a=1&a=2&b=x&b=y"
    assert captured[0].url.raw_path == b"/q?a=1&a=2&b=x&b=y"


def test_invoke_escapes_query_values():
    http_client, captured = _recording_client()
    client = BaseClient("http://testserver", http_client=http_client)
    response = client.invoke("GET", "/q", queries={"q": "a b"})
    assert response.json()["path"] == "/q?q=a+b"
    assert captured[0].url.raw_path == b"/q?q=a+b"


def test_invoke_absolute_url_bypasses_base():
    http_client, captured = _recording_client()
    client = BaseClient("http://testserver", http_client=http_client)
    response = client.invoke("GET", "https://other.example.com/abs")
    assert response.json()["url"] == "https://other.example.com/abs"
    assert str(captured[0].url) == "https://other.example.com/abs"


def test_invoke_call_headers_override_defaults():
    http_client, captured = _recording_client()
    client = BaseClient(
        "http://testserver", http_client=http_client, default_headers={"X-Mode": "default"}
    )
    response = client.invoke("GET", "/h", headers={"x-mode": "call"})
    assert _echoed_header(response, "X-Mode") == ["call"]
    assert captured[0].headers.get_list("X-Mode") == ["call"]


def test_invoke_sends_body_and_method():
    http_client, captured = _recording_client(201)
    client = BaseClient("http://testserver", http_client=http_client)
    response = client.invoke("POST", "/items", b"payload")
    assert response.status_code == 201
    assert response.json()["method"] == "POST"
    assert captured[0].method == "POST"
    assert captured[0].content == b"payload"


def test_middleware_passed_to_constructor_is_used():
    http_client, captured = _recording_client()

    def tagging(next_handler):
        def handle(request):
            request.headers["X-Tag"] = "yes"
            return next_handler(request)

        return handle

    client = BaseClient("http://testserver", http_client=http_client, middleware=[tagging])
    response = client.invoke("GET", "/")
    assert _echoed_header(response, "X-Tag") == ["yes"]
    assert captured[0].headers["X-Tag"] == "yes"