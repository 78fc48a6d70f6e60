"""Response triage for Alpha Vantage JSON envelopes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from crypto_data.errors import (
  InvalidResponseShapeError,
  UpstreamErrorMessageError,
  UpstreamInformationError,
  UpstreamNoteError,
)
from crypto_data.models import MetaData

# outer grouping key -> timestamp -> raw field group
RawSeriesMap = dict[str, dict[str, dict[str, Any]]]

META_DATA_KEY = "Meta Data"


@dataclass(frozen=True)
class Information:
  message: str


@dataclass(frozen=True)
class ErrorMessage:
  message: str


@dataclass(frozen=True)
class Note:
  message: str


@dataclass(frozen=True)
class Payload:
  meta_data: MetaData
  series: RawSeriesMap


Envelope = Information | ErrorMessage | Note | Payload

# Checked in this order; the first non-empty value wins.
_SENTINEL_KEYS: tuple[tuple[str, type], ...] = (
  ("Information", Information),
  ("Error Message", ErrorMessage),
  ("Note", Note),
)

_SENTINEL_NAMES = frozenset(key for key, _ in _SENTINEL_KEYS)
_RESERVED_KEYS = _SENTINEL_NAMES | {META_DATA_KEY}


def _find_sentinel(raw: Mapping[str, Any]) -> Information | ErrorMessage | Note | None:
  for key, variant in _SENTINEL_KEYS:
    message = raw.get(key)
    if message:
      return variant(str(message))
  return None


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
  if not isinstance(value, Mapping):
    raise InvalidResponseShapeError(f"{what} is not a JSON object")
  return value


def _decode_series(raw: Mapping[str, Any]) -> RawSeriesMap:
  series: RawSeriesMap = {}
  for group, entries in raw.items():
    if group in _RESERVED_KEYS:
      continue
    entries = _require_mapping(entries, f"series group '{group}'")
    for time, fields in entries.items():
      _require_mapping(fields, f"sample '{time}' of series group '{group}'")
    series[group] = dict(entries)
  return series


def decode_envelope(raw: Any) -> Envelope:
  """Decodes a JSON response object into exactly one envelope variant.

  Raises:
    InvalidResponseShapeError: If no sentinel is set and the payload is
      missing its metadata or series, or either is malformed.
  """
  raw = _require_mapping(raw, "response")

  sentinel = _find_sentinel(raw)
  if sentinel is not None:
    return sentinel

  meta_raw = raw.get(META_DATA_KEY)
  if not meta_raw:
    raise InvalidResponseShapeError(f"response has no '{META_DATA_KEY}'")
  try:
    meta_data = MetaData.model_validate(_require_mapping(meta_raw, META_DATA_KEY))
  except ValidationError as e:
    raise InvalidResponseShapeError(f"invalid '{META_DATA_KEY}': {e}") from e

  series = _decode_series(raw)
  if not series:
    raise InvalidResponseShapeError("response has no time series")

  return Payload(meta_data=meta_data, series=series)


def triage(envelope: Envelope) -> tuple[MetaData, RawSeriesMap]:
  """Collapses an envelope into its payload or raises the matching upstream error."""
  match envelope:
    case Information(message=message):
      logging.warning(f"Alpha Vantage returned information instead of data: {message}")
      raise UpstreamInformationError(message)
    case ErrorMessage(message=message):
      logging.warning(f"Alpha Vantage returned an error message: {message}")
      raise UpstreamErrorMessageError(message)
    case Note(message=message):
      logging.warning(f"Alpha Vantage returned a note: {message}")
      raise UpstreamNoteError(message)
    case Payload(meta_data=meta_data, series=series):
      return meta_data, series
    case _:
      raise TypeError(f"Unknown envelope variant: {type(envelope).__name__}")


def triage_raw(raw: Any) -> tuple[MetaData, RawSeriesMap]:
  """Decodes and triages a raw JSON response in one step."""
  return triage(decode_envelope(raw))


def check_sentinels(raw: Any) -> dict[str, Any]:
  """Applies sentinel triage to an arbitrary response and returns the rest of it.

  Used for endpoints whose payload shape is unknown to this package. Sentinel
  keys are removed from the returned dict.
  """
  raw = _require_mapping(raw, "response")

  sentinel = _find_sentinel(raw)
  if sentinel is not None:
    triage(sentinel)

  data = {key: value for key, value in raw.items() if key not in _SENTINEL_NAMES}
  if not data:
    raise InvalidResponseShapeError()
  return data
