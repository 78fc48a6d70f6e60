from __future__ import annotations

import os
from dataclasses import dataclass

from crypto_data.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ApiClient


@dataclass
class ClientSettings:
  api_key_env_var: str = "ALPHA_VANTAGE_API_KEY"
  base_url_env_var: str = "ALPHA_VANTAGE_BASE_URL"
  timeout_env_var: str = "ALPHA_VANTAGE_TIMEOUT"


class ClientFactory:
  def __init__(self, settings: ClientSettings | None = None):
    self._settings = settings or ClientSettings()

  def _timeout(self) -> float:
    raw = os.getenv(self._settings.timeout_env_var)
    if not raw:
      return DEFAULT_TIMEOUT_SECONDS
    try:
      timeout = float(raw)
    except ValueError:
      raise ValueError(
        f"Env var '{self._settings.timeout_env_var}' must be a number, got '{raw}'"
      ) from None
    if timeout <= 0:
      raise ValueError(f"Env var '{self._settings.timeout_env_var}' must be positive")
    return timeout

  def create(self) -> ApiClient:
    """Creates an ApiClient configured from environment variables."""
    api_key = os.getenv(self._settings.api_key_env_var)
    if not api_key:
      raise ValueError(f"Missing required env var '{self._settings.api_key_env_var}'")

    base_url = os.getenv(self._settings.base_url_env_var) or DEFAULT_BASE_URL
    return ApiClient(api_key=api_key, base_url=base_url, timeout=self._timeout())
