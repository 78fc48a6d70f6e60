from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MetaData(BaseModel):
  """Descriptive fields returned under the "Meta Data" key of a response."""

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  information: str = Field(alias="1. Information")
  digital_code: str = Field(alias="2. Digital Currency Code")
  digital_name: str = Field(alias="3. Digital Currency Name")
  market_code: str = Field(alias="4. Market Code")
  market_name: str = Field(alias="5. Market Name")
  last_refreshed: str = Field(alias="6. Last Refreshed")
  time_zone: str = Field(alias="7. Time Zone")


class Record(BaseModel):
  """A single timestamped OHLCV sample."""

  model_config = ConfigDict(frozen=True)

  time: str
  open: float
  high: float
  low: float
  close: float
  volume: float


class RawRecord(BaseModel):
  """Wire shape of one sample; every value arrives as a decimal string."""

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  open: float = Field(alias="1. open")
  high: float = Field(alias="2. high")
  low: float = Field(alias="3. low")
  close: float = Field(alias="4. close")
  volume: float = Field(alias="5. volume")

  @field_validator("open", "high", "low", "close", "volume", mode="before")
  @classmethod
  def require_decimal_string(cls, v: object) -> str:
    """Only decimal strings are accepted; JSON numbers, booleans and nulls are not."""
    if not isinstance(v, str):
      raise ValueError(f"expected a decimal string, got {type(v).__name__}")
    return v

  def to_record(self, time: str) -> Record:
    return Record(
      time=time,
      open=self.open,
      high=self.high,
      low=self.low,
      close=self.close,
      volume=self.volume,
    )
