import json

import httpx
import pytest

from celestial.config import Settings
from celestial.errors import OracleError
from celestial.oracle import ask_oracle


def test_returns_result(settings, oracle_client):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"result": "## Soul Signature\nBright."})

    with oracle_client(handler) as client:
        reading = ask_oracle("hello stars", settings=settings, client=client)

    assert reading == "## Soul Signature\nBright."
    assert seen == {
        "url": "https://oracle.test/api/ai",
        "content_type": "application/json",
        "body": {"prompt": "hello stars"},
    }


@pytest.mark.parametrize("response", [
    httpx.Response(500, json={"error": "boom"}),
    httpx.Response(200, text="<html>not json</html>"),
    httpx.Response(200, json={"result": ""}),
    httpx.Response(200, json={"other": "x"}),
    httpx.Response(200, json=["result"]),
])
def test_bad_responses_raise(settings, response, oracle_client):
    with oracle_client(lambda request: response) as client:
        with pytest.raises(OracleError):
            ask_oracle("prompt", settings=settings, client=client)


def test_transport_error_raises(settings, oracle_client):
    def handler(request):
        raise httpx.ConnectError("no route", request=request)

    with oracle_client(handler) as client:
        with pytest.raises(OracleError, match="unreachable"):
            ask_oracle("prompt", settings=settings, client=client)


def test_malformed_url_raises(oracle_client):
    bad = Settings(oracle_url="http://exa mple.com/\x00", oracle_timeout=1.0)

    def handler(request):
        raise AssertionError("request should not be sent")

    with oracle_client(handler) as client:
        with pytest.raises(OracleError, match="unreachable"):
            ask_oracle("prompt", settings=bad, client=client)
