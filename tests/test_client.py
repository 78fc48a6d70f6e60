import pytest
import requests

from crypto_data.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ApiClient
from crypto_data.crypto import CryptoBuilder, CryptoFunction
from crypto_data.custom import CustomBuilder
from crypto_data.errors import JsonDecodeError, RequestFailedError

from conftest import FakeResponse, FakeSession


def test_requires_api_key():
  with pytest.raises(ValueError, match="API key"):
    ApiClient(api_key="")


def test_base_url_gets_trailing_slash():
  client = ApiClient(api_key="k", base_url="http://localhost:8080", session=FakeSession())
  assert client.base_url == "http://localhost:8080/"


def test_get_json_sends_key_and_timeout(make_client):
  client, session = make_client({"ok": True})

  assert client.get_json("query?function=X") == {"ok": True}

  call = session.calls[0]
  assert call["url"] == f"{DEFAULT_BASE_URL}query?function=X"
  assert call["params"] == {"apikey": "test-key"}
  assert call["timeout"] == DEFAULT_TIMEOUT_SECONDS


def test_get_json_http_error(make_client):
  client, _ = make_client({"detail": "oops"}, status_code=503)

  with pytest.raises(RequestFailedError):
    client.get_json("query?function=X")


def test_get_json_connection_error():
  session = FakeSession(error=requests.exceptions.ConnectionError("refused"))
  client = ApiClient(api_key="k", session=session)

  with pytest.raises(RequestFailedError, match="refused"):
    client.get_json("query?function=X")


def test_get_json_invalid_body():
  session = FakeSession(FakeResponse(text="<html>nope</html>"))
  client = ApiClient(api_key="k", session=session)

  with pytest.raises(JsonDecodeError):
    client.get_json("query?function=X")


def test_builders(make_client):
  client, _ = make_client()

  assert isinstance(client.crypto(CryptoFunction.DAILY, "BTC", "USD"), CryptoBuilder)
  assert isinstance(client.custom("OVERVIEW"), CustomBuilder)
