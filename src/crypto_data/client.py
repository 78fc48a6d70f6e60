from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from crypto_data.errors import JsonDecodeError, RequestFailedError

if TYPE_CHECKING:
  from crypto_data.crypto import CryptoBuilder, CryptoFunction
  from crypto_data.custom import CustomBuilder

# --- Module Constants ---
DEFAULT_BASE_URL = "https://www.alphavantage.co/"
DEFAULT_TIMEOUT_SECONDS = 30.0


class ApiClient:
  """Thin HTTP client for the Alpha Vantage query endpoint.

  Builders produce a relative path such as ``query?function=...``; the client
  joins it onto the base URL, adds the API key and decodes the JSON body.
  """

  def __init__(
    self,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    session: requests.Session | None = None,
  ):
    if not api_key:
      raise ValueError("Alpha Vantage client requires an API key.")

    self._api_key = api_key
    self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
    self._timeout = timeout
    self._session = session or requests.Session()

  @property
  def base_url(self) -> str:
    return self._base_url

  def get_json(self, path: str) -> Any:
    """Performs a GET request for ``path`` and returns the decoded JSON body.

    Raises:
      RequestFailedError: On connection problems, timeouts or HTTP error status.
      JsonDecodeError: If the body is not valid JSON.
    """
    url = f"{self._base_url}{path}"
    logging.info(f"Requesting Alpha Vantage: {url}")

    try:
      response = self._session.get(
        url, params={"apikey": self._api_key}, timeout=self._timeout
      )
      response.raise_for_status()
    except requests.exceptions.RequestException as e:
      logging.error(f"HTTP error requesting {url}: {e}")
      raise RequestFailedError(f"failed to get output from server: {e}") from e

    try:
      return response.json()
    except requests.exceptions.JSONDecodeError as e:
      raise JsonDecodeError(f"failed to decode response from {url}: {e}") from e

  def crypto(
    self, function: CryptoFunction, symbol: str, market: str
  ) -> CryptoBuilder:
    from crypto_data.crypto import CryptoBuilder

    return CryptoBuilder(self, function, symbol, market)

  def custom(self, function: str) -> CustomBuilder:
    from crypto_data.custom import CustomBuilder

    return CustomBuilder(self, function)
