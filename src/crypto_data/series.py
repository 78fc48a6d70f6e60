from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from crypto_data.errors import FieldDecodeError, InsufficientDataError
from crypto_data.interfaces import FindData
from crypto_data.models import RawRecord, Record


class RecordCollection(Sequence, FindData):
  """An unordered, read-only collection of records from one response.

  Insertion order carries no meaning; only ``Record.time`` is used by queries.
  Timestamps are zero-padded ``YYYY-MM-DD[ HH:MM:SS]`` strings, so plain string
  comparison orders them chronologically.
  """

  def __init__(self, records: Sequence[Record] = ()):
    self._records: tuple[Record, ...] = tuple(records)

  def __len__(self) -> int:
    return len(self._records)

  def __getitem__(self, index):
    if isinstance(index, slice):
      return RecordCollection(self._records[index])
    return self._records[index]

  def __iter__(self) -> Iterator[Record]:
    return iter(self._records)

  def __eq__(self, other: object) -> bool:
    if isinstance(other, RecordCollection):
      return self._records == other._records
    if isinstance(other, (list, tuple)):
      return list(self._records) == list(other)
    return NotImplemented

  def __repr__(self) -> str:
    return f"RecordCollection({len(self._records)} records)"

  def find(self, time: str) -> Record | None:
    return next((record for record in self._records if record.time == time), None)

  def latest(self) -> Record | None:
    if not self._records:
      return None
    return max(self._records, key=lambda record: record.time)

  def latest_n(self, n: int) -> list[Record]:
    if n < 0:
      raise ValueError(f"n must not be negative, got {n}")

    times = sorted((record.time for record in self._records), reverse=True)
    if n > len(times):
      raise InsufficientDataError(len(times))

    return [self.find(time) for time in times[:n]]


def _decode_sample(time: str, fields: Mapping[str, Any]) -> Record:
  try:
    return RawRecord.model_validate(fields).to_record(time)
  except ValidationError as e:
    error = e.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else "<sample>"
    raise FieldDecodeError(time, field, error.get("input")) from e


def convert_series(
  raw_series: Mapping[str, Mapping[str, Mapping[str, Any]]],
) -> RecordCollection:
  """Flattens a group -> timestamp -> fields map into a RecordCollection.

  The outer grouping key (e.g. "Time Series (Digital Currency Daily)") only
  names the series in the wire format and is discarded; each record is keyed
  by its inner timestamp alone.

  Raises:
    FieldDecodeError: If a numeric field is missing or not a decimal.
  """
  records = []
  for _group, samples in raw_series.items():
    for time, fields in samples.items():
      records.append(_decode_sample(time, fields))

  logging.debug(f"Converted {len(records)} records from {len(raw_series)} series group(s).")
  return RecordCollection(records)
