import socket
import threading
import time

import pytest
import requests

from complycube.models.envelope import ClientConfig
from complycube.utils.api_client import ApiClient, StatusErrorTable


@pytest.fixture
def table():
    return StatusErrorTable.with_not_found("THING_NOT_FOUND", "Thing not found")


def make_client(session, table, **config):
    config.setdefault("api_key", "test-key")
    return ApiClient(ClientConfig(**config), table, session=session)


def test_request_sends_raw_api_key_and_fixed_headers(mock_session, make_response, table):
    mock_session.request.return_value = make_response(200, {"ok": True})
    client = make_client(mock_session, table, user_agent="Design-Studio/1.0", timeout_ms=2500)

    result = client.request("GET", "/things/1")

    assert result.status == 200
    assert result.data == {"ok": True}
    args, kwargs = mock_session.request.call_args
    assert args == ("GET", "https://api.complycube.com/v1/things/1")
    assert kwargs["headers"] == {
        "Authorization": "test-key",
        "Content-Type": "application/json",
        "User-Agent": "Design-Studio/1.0",
    }
    assert kwargs["timeout"] == 2.5
    assert kwargs["json"] is None


def test_post_sends_json_body(mock_session, make_response, table):
    mock_session.request.return_value = make_response(201, {"id": "x"})
    client = make_client(mock_session, table)

    client.request("POST", "/things", body={"name": "x"})

    assert mock_session.request.call_args.kwargs["json"] == {"name": "x"}


def test_structured_api_error_passes_through(mock_session, make_response, table):
    mock_session.request.return_value = make_response(
        422,
        {"error": {"code": "VALIDATION_FAILED", "message": "clientId unknown", "details": {"field": "clientId"}}},
    )

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 422
    assert result.data is None
    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.message == "clientId unknown"
    assert result.error.details == {"field": "clientId"}


def test_error_object_without_code_defaults_to_api_error(mock_session, make_response, table):
    mock_session.request.return_value = make_response(400, {"error": {}})

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.error.code == "API_ERROR"
    assert result.error.message == "An API error occurred"


def test_unstructured_error_uses_body_message(mock_session, make_response, table):
    mock_session.request.return_value = make_response(404, {"message": "No such thing"})

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.error.code == "THING_NOT_FOUND"
    assert result.error.message == "No such thing"
    assert result.error.details == {"message": "No such thing"}


def test_non_json_error_body_falls_back_to_status_table(mock_session, make_response, table):
    mock_session.request.return_value = make_response(502, raw=b"<html>Bad Gateway</html>")

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 502
    assert result.error.code == "BAD_GATEWAY"
    assert result.error.message == "Bad gateway"


def test_invalid_json_on_success_is_unknown_error(mock_session, make_response, table):
    mock_session.request.return_value = make_response(200, raw=b"not json")

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 500
    assert result.error.code == "UNKNOWN_ERROR"
    assert "original_error" in result.error.details


def test_timeout_maps_to_408(mock_session, table):
    mock_session.request.side_effect = requests.exceptions.ReadTimeout("read timed out")

    result = make_client(mock_session, table, timeout_ms=50).request("GET", "/things/1")

    assert result.status == 408
    assert result.error.code == "REQUEST_TIMEOUT"
    assert result.error.message == "Request timed out after 50ms"


def test_connect_timeout_is_a_timeout_not_a_network_error(mock_session, table):
    mock_session.request.side_effect = requests.exceptions.ConnectTimeout("connect timed out")

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 408
    assert result.error.code == "REQUEST_TIMEOUT"


def test_connection_error_maps_to_status_zero(mock_session, table):
    mock_session.request.side_effect = requests.exceptions.ConnectionError("connection refused")

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 0
    assert result.error.code == "NETWORK_ERROR"


def test_other_exceptions_are_captured(mock_session, table):
    mock_session.request.side_effect = RuntimeError("boom")

    result = make_client(mock_session, table).request("GET", "/things/1")

    assert result.status == 500
    assert result.error.code == "UNKNOWN_ERROR"
    assert result.error.message == "boom"
    assert "boom" in result.error.details["original_error"]


def test_server_that_never_responds_times_out(table):
    """A real socket that accepts but never answers trips the configured timeout."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    host, port = server.getsockname()
    session = requests.Session()
    session.trust_env = False  # ignore proxy settings from the environment
    try:
        client = ApiClient(
            ClientConfig(api_key="test-key", base_url=f"http://{host}:{port}", timeout_ms=50),
            table,
            session=session,
        )
        result = client.request("GET", "/things/1")
    finally:
        session.close()
        server.close()

    assert result.status == 408
    assert result.error.code == "REQUEST_TIMEOUT"


def test_server_that_trickles_its_body_times_out(table):
    """Headers arrive at once, then one body byte every 30ms: no single read
    times out, but the whole response misses the window."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    host, port = server.getsockname()
    stop = threading.Event()

    def trickle():
        conn, _ = server.accept()
        try:
            conn.recv(4096)
            conn.sendall(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: application/json\r\n"
                b"Content-Length: 100\r\n\r\n"
            )
            for _ in range(100):
                if stop.is_set():
                    break
                conn.sendall(b" ")
                time.sleep(0.03)
        except OSError:
            pass
        finally:
            conn.close()

    worker = threading.Thread(target=trickle, daemon=True)
    worker.start()
    session = requests.Session()
    session.trust_env = False
    try:
        client = ApiClient(
            ClientConfig(api_key="test-key", base_url=f"http://{host}:{port}", timeout_ms=100),
            table,
            session=session,
        )
        started = time.monotonic()
        result = client.request("GET", "/things/1")
        elapsed = time.monotonic() - started
    finally:
        stop.set()
        worker.join(timeout=5)
        session.close()
        server.close()

    assert result.status == 408
    assert result.error.code == "REQUEST_TIMEOUT"
    assert result.error.message == "Request timed out after 100ms"
    assert elapsed < 1.0


def test_fast_response_within_deadline(mock_session, make_response, table):
    mock_session.request.return_value = make_response(200, {"id": "1"})

    result = make_client(mock_session, table, timeout_ms=50).request("GET", "/things/1")

    assert result.status == 200
    assert result.data == {"id": "1"}
    assert mock_session.request.call_args.kwargs["stream"] is True


def test_status_table_defaults():
    default = StatusErrorTable()

    assert default.code_for(404) == "HTTP_ERROR"
    assert default.code_for(418) == "HTTP_ERROR"
    assert default.message_for(418) == "HTTP error 418"
    assert default.code_for(429) == "RATE_LIMITED"
