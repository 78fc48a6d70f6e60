from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from crypto_data.client import ApiClient
from crypto_data.models import Record

SERIES_KEY = "Time Series (Digital Currency Daily)"


def _sample(open_: str, high: str, low: str, close: str, volume: str) -> dict[str, str]:
  return {
    "1. open": open_,
    "2. high": high,
    "3. low": low,
    "4. close": close,
    "5. volume": volume,
  }


@pytest.fixture
def meta_data_raw() -> dict[str, str]:
  return {
    "1. Information": "Daily Prices and Volumes for Digital Currency",
    "2. Digital Currency Code": "BTC",
    "3. Digital Currency Name": "Bitcoin",
    "4. Market Code": "EUR",
    "5. Market Name": "Euro",
    "6. Last Refreshed": "2023-01-03 00:00:00",
    "7. Time Zone": "UTC",
  }


@pytest.fixture
def crypto_response(meta_data_raw) -> dict[str, Any]:
  return {
    "Meta Data": meta_data_raw,
    SERIES_KEY: {
      "2023-01-01": _sample("1.0", "2.0", "0.5", "1.5", "100"),
      "2023-01-03": _sample("1.6", "2.4", "1.2", "2.2", "300.25"),
      "2023-01-02": _sample("1.5", "1.9", "1.1", "1.6", "200"),
    },
  }


@pytest.fixture
def records() -> list[Record]:
  return [
    Record(time="2023-01-01", open=1.0, high=2.0, low=0.5, close=1.5, volume=100.0),
    Record(time="2023-01-03", open=1.6, high=2.4, low=1.2, close=2.2, volume=300.25),
    Record(time="2023-01-02", open=1.5, high=1.9, low=1.1, close=1.6, volume=200.0),
  ]


class FakeResponse:
  def __init__(self, payload: Any = None, status_code: int = 200, text: str | None = None):
    self.status_code = status_code
    self._payload = payload
    self.text = text if text is not None else json.dumps(payload)

  def raise_for_status(self) -> None:
    if self.status_code >= 400:
      raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

  def json(self) -> Any:
    try:
      return json.loads(self.text)
    except json.JSONDecodeError as e:
      raise requests.exceptions.JSONDecodeError(e.msg, e.doc, e.pos) from e


class FakeSession:
  """Records GET calls and replays a canned response or exception."""

  def __init__(self, response: FakeResponse | None = None, error: Exception | None = None):
    self.response = response
    self.error = error
    self.calls: list[dict[str, Any]] = []

  def get(self, url: str, **kwargs: Any) -> FakeResponse:
    self.calls.append({"url": url, **kwargs})
    if self.error is not None:
      raise self.error
    return self.response


@pytest.fixture
def make_client():
  def _make(payload: Any = None, **kwargs: Any) -> tuple[ApiClient, FakeSession]:
    session = FakeSession(FakeResponse(payload, **kwargs))
    return ApiClient(api_key="test-key", session=session), session

  return _make
