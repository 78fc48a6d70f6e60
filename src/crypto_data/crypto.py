"""Digital currency time series.

Covers the ``DIGITAL_CURRENCY_DAILY``, ``DIGITAL_CURRENCY_WEEKLY`` and
``DIGITAL_CURRENCY_MONTHLY`` functions, which return daily, weekly or monthly
prices and volumes for a digital currency (e.g. BTC) traded on a specific
market (e.g. EUR), refreshed daily at midnight UTC.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from crypto_data.client import ApiClient
from crypto_data.envelope import triage_raw
from crypto_data.models import MetaData
from crypto_data.series import RecordCollection, convert_series


class CryptoFunction(Enum):
  DAILY = "DIGITAL_CURRENCY_DAILY"
  WEEKLY = "DIGITAL_CURRENCY_WEEKLY"
  MONTHLY = "DIGITAL_CURRENCY_MONTHLY"

  @classmethod
  def from_name(cls, name: str) -> CryptoFunction:
    """Looks up a function by its short name (``daily``, ``weekly``, ``monthly``)."""
    try:
      return cls[name.upper()]
    except KeyError:
      valid = ", ".join(member.name.lower() for member in cls)
      raise ValueError(f"Unknown crypto function '{name}'. Valid: {valid}") from None


class Crypto:
  """Metadata and records of one digital currency series."""

  def __init__(self, meta_data: MetaData, data: RecordCollection):
    self._meta_data = meta_data
    self._data = data

  @classmethod
  def from_json(cls, raw: Any) -> Crypto:
    """Builds a Crypto from a decoded response, raising on any soft error."""
    meta_data, series = triage_raw(raw)
    return cls(meta_data, convert_series(series))

  @property
  def information(self) -> str:
    return self._meta_data.information

  @property
  def digital_code(self) -> str:
    return self._meta_data.digital_code

  @property
  def digital_name(self) -> str:
    return self._meta_data.digital_name

  @property
  def market_code(self) -> str:
    return self._meta_data.market_code

  @property
  def market_name(self) -> str:
    return self._meta_data.market_name

  @property
  def last_refreshed(self) -> str:
    return self._meta_data.last_refreshed

  @property
  def time_zone(self) -> str:
    """Time zone of every record time."""
    return self._meta_data.time_zone

  @property
  def meta_data(self) -> MetaData:
    return self._meta_data

  @property
  def data(self) -> RecordCollection:
    return self._data


class CryptoBuilder:
  def __init__(
    self, api_client: ApiClient, function: CryptoFunction, symbol: str, market: str
  ):
    self._api_client = api_client
    self._function = function
    self._symbol = symbol
    self._market = market

  def create_url(self) -> str:
    query = urlencode(
      {"function": self._function.value, "symbol": self._symbol, "market": self._market}
    )
    return f"query?{query}"

  def json(self) -> Crypto:
    """Fetches the series and converts it into a Crypto.

    Raises:
      AlphaVantageError: For transport failures, upstream soft errors,
        malformed responses and undecodable fields.
    """
    raw = self._api_client.get_json(self.create_url())
    crypto = Crypto.from_json(raw)
    logging.info(
      f"Fetched {len(crypto.data)} {self._function.name.lower()} records "
      f"for {self._symbol}/{self._market}."
    )
    return crypto
