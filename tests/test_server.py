import http.client
import json
import threading
import urllib.error
import urllib.request

import pytest

from sprig.server import SprigServer, SubmitCodeResponse, run_code


def test_run_code_success():
    assert run_code("(+ 1 2)") == SubmitCodeResponse(output="3", success=True)
    assert run_code("(do (def x (list 1)) (push 2 x))") == SubmitCodeResponse("(1 2)", True)


def test_run_code_failure_is_a_value():
    response = run_code("(car 1)")
    assert response.success is False
    assert response.output.startswith("SprigNotAList")


def test_run_code_reports_parse_errors():
    response = run_code("(+ 1 2")
    assert response.success is False
    assert "SprigUnmatchedParen" in response.output


def test_run_code_reports_stack_exhaustion():
    response = run_code("(do (defn f (n) (f n)) (f 1))")
    assert response.success is False
    assert response.output.startswith("RecursionError")


def test_each_request_gets_a_fresh_environment():
    assert run_code("(def x 1)").success
    assert run_code("x").success is False


@pytest.fixture
def server():
    srv = SprigServer("127.0.0.1", 0)
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    yield srv
    srv.shutdown()
    srv.server_close()
    thread.join(timeout=5)


def _post(server, body: bytes, path: str = "/submit-code"):
    host, port = server.server_address[:2]
    req = urllib.request.Request(
        f"http://{host}:{port}{path}",
        data=body,
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    with urllib.request.urlopen(req, timeout=5) as resp:
        return json.loads(resp.read().decode("utf-8"))


def test_http_submit_code(server):
    assert _post(server, json.dumps({"code": "(* 6 7)"}).encode()) == {"output": "42", "success": True}
    assert _post(server, json.dumps({"code": "nope"}).encode())["success"] is False


def test_http_rejects_malformed_requests(server):
    with pytest.raises(urllib.error.HTTPError) as exc:
        _post(server, b"not json")
    assert exc.value.code == 400
    with pytest.raises(urllib.error.HTTPError) as exc:
        _post(server, json.dumps({"code": "1"}).encode(), path="/elsewhere")
    assert exc.value.code == 404


def _raw_post(server, headers: dict, body: bytes):
    host, port = server.server_address[:2]
    conn = http.client.HTTPConnection(host, port, timeout=5)
    try:
        conn.putrequest("POST", "/submit-code")
        for name, value in headers.items():
            conn.putheader(name, value)
        conn.endheaders()
        conn.send(body)
        resp = conn.getresponse()
        return resp.status, resp.read()
    finally:
        conn.close()


def test_http_bad_content_length_is_a_400(server):
    status, body = _raw_post(server, {"Content-Length": "abc"}, b"")
    assert status == 400
    assert json.loads(body)["error"].startswith("Invalid request")


def test_http_responses_allow_cross_origin_callers(server):
    host, port = server.server_address[:2]
    req = urllib.request.Request(
        f"http://{host}:{port}/submit-code",
        data=json.dumps({"code": "1"}).encode(),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    with urllib.request.urlopen(req, timeout=5) as resp:
        assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_http_cors_preflight(server):
    host, port = server.server_address[:2]
    req = urllib.request.Request(f"http://{host}:{port}/submit-code", method="OPTIONS")
    with urllib.request.urlopen(req, timeout=5) as resp:
        assert resp.status == 204
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert "POST" in resp.headers["Access-Control-Allow-Methods"]
