"""Error hierarchy for the Alpha Vantage crypto client.

Every failure surfaced to callers derives from ``AlphaVantageError`` so a single
``except`` clause covers the whole taxonomy.
"""

from __future__ import annotations


class AlphaVantageError(RuntimeError):
  """Base class for all client errors."""


class UpstreamInformationError(AlphaVantageError):
  """Raised when the service answers with an "Information" message instead of data."""

  def __init__(self, message: str):
    super().__init__(f"information: {message}")
    self.message = message


class UpstreamErrorMessageError(AlphaVantageError):
  """Raised when the service answers with an "Error Message" instead of data."""

  def __init__(self, message: str):
    super().__init__(f"error_message: {message}")
    self.message = message


class UpstreamNoteError(AlphaVantageError):
  """Raised when the service answers with a "Note", usually a rate-limit warning."""

  def __init__(self, message: str):
    super().__init__(f"note: {message}")
    self.message = message


class InvalidResponseShapeError(AlphaVantageError):
  """Raised when a sentinel-free response lacks the fields needed to build data."""

  def __init__(self, reason: str = "server returned empty or invalid response"):
    super().__init__(reason)
    self.reason = reason


class FieldDecodeError(AlphaVantageError):
  """Raised when a numeric field of a sample cannot be parsed."""

  def __init__(self, time: str, field: str, value: object = None):
    super().__init__(f"failed to decode field '{field}' of sample '{time}': {value!r}")
    self.time = time
    self.field = field
    self.value = value


class InsufficientDataError(AlphaVantageError):
  """Raised when more latest records are requested than the collection holds."""

  def __init__(self, available: int):
    super().__init__(
      f"desired number of latest data not found, try using at most {available} as n"
    )
    self.available = available


class RequestFailedError(AlphaVantageError):
  """Raised when the HTTP request fails or returns an error status."""


class JsonDecodeError(AlphaVantageError):
  """Raised when the response body is not valid JSON."""
