from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from crypto_data.client import ApiClient
from crypto_data.envelope import check_sentinels


class CustomBuilder:
  """Builder for any query function this package has no typed model for.

  The response is returned as a plain dict after the usual sentinel checks.
  """

  def __init__(self, api_client: ApiClient, function: str):
    self._api_client = api_client
    self._function = function
    self._extras: list[tuple[str, str]] = []

  def extra_params(self, key: str, value: str) -> CustomBuilder:
    """Adds an extra query parameter; returns the builder for chaining."""
    self._extras.append((key, value))
    return self

  def create_url(self) -> str:
    return f"query?{urlencode([('function', self._function), *self._extras])}"

  def json(self) -> dict[str, Any]:
    return check_sentinels(self._api_client.get_json(self.create_url()))
