from abc import ABC, abstractmethod

from crypto_data.models import Record


class FindData(ABC):
  """Abstract base class for point and recency queries over a record collection."""

  @abstractmethod
  def find(self, time: str) -> Record | None:
    """Returns the record whose time equals ``time``.

    Args:
      time: Timestamp key exactly as the service formats it.

    Returns:
      The matching Record, or None if the collection has no such time.
    """
    pass

  @abstractmethod
  def latest(self) -> Record | None:
    """Returns the most recent record, or None for an empty collection."""
    pass

  @abstractmethod
  def latest_n(self, n: int) -> list[Record]:
    """Returns the ``n`` most recent records, most recent first.

    Raises:
      InsufficientDataError: If fewer than ``n`` records are available.
    """
    pass
