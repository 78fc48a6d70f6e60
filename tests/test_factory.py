import pytest

from crypto_data.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from crypto_data.factory import ClientFactory, ClientSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
  for var in ("ALPHA_VANTAGE_API_KEY", "ALPHA_VANTAGE_BASE_URL", "ALPHA_VANTAGE_TIMEOUT"):
    monkeypatch.delenv(var, raising=False)


def test_missing_api_key():
  with pytest.raises(ValueError, match="ALPHA_VANTAGE_API_KEY"):
    ClientFactory().create()


def test_defaults(monkeypatch):
  monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")

  client = ClientFactory().create()

  assert client.base_url == DEFAULT_BASE_URL
  assert client._timeout == DEFAULT_TIMEOUT_SECONDS


def test_overrides(monkeypatch):
  monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")
  monkeypatch.setenv("ALPHA_VANTAGE_BASE_URL", "http://localhost:9000")
  monkeypatch.setenv("ALPHA_VANTAGE_TIMEOUT", "5")

  client = ClientFactory().create()

  assert client.base_url == "http://localhost:9000/"
  assert client._timeout == 5.0


@pytest.mark.parametrize("value", ["soon", "0", "-3"])
def test_invalid_timeout(monkeypatch, value):
  monkeypatch.setenv("ALPHA_VANTAGE_API_KEY", "abc")
  monkeypatch.setenv("ALPHA_VANTAGE_TIMEOUT", value)

  with pytest.raises(ValueError, match="ALPHA_VANTAGE_TIMEOUT"):
    ClientFactory().create()


def test_custom_env_var_names(monkeypatch):
  monkeypatch.setenv("MY_KEY", "abc")

  client = ClientFactory(ClientSettings(api_key_env_var="MY_KEY")).create()

  assert client.base_url == DEFAULT_BASE_URL
