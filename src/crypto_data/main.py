from __future__ import annotations

import functools
import json
import logging
import sys

import click
from dotenv import load_dotenv

from crypto_data.client import ApiClient
from crypto_data.crypto import CryptoFunction
from crypto_data.errors import AlphaVantageError
from crypto_data.factory import ClientFactory
from crypto_data.utils.savers import save_to_csv

# --- Setup ---
logging.basicConfig(
  level=logging.DEBUG,
  format="%(asctime)s - %(levelname)s - %(message)s",
  stream=sys.stdout,
)

_FUNCTION_CHOICES = [member.name.lower() for member in CryptoFunction]

# --- Error Handling Decorator ---


def cli_error_handler(func):
  """Decorator to handle common CLI errors, log them, and exit."""

  @functools.wraps(func)
  def wrapper(*args, **kwargs):
    try:
      return func(*args, **kwargs)
    except (AlphaVantageError, ValueError, TypeError) as e:
      logging.error(f"Error: {e}")
      sys.exit(1)
    except Exception as e:
      logging.error(f"An unexpected error occurred: {e}", exc_info=True)
      sys.exit(1)

  return wrapper


# --- Private Helpers ---


def _get_client() -> ApiClient:
  return ClientFactory().create()


def _parse_params(params: tuple[str, ...]) -> list[tuple[str, str]]:
  parsed = []
  for param in params:
    key, sep, value = param.partition("=")
    if not sep or not key:
      raise ValueError(f"Invalid parameter '{param}', expected key=value.")
    parsed.append((key.strip(), value.strip()))
  return parsed


# --- CLI Commands ---


@click.group()
def cli():
  """A CLI for fetching digital currency time series from Alpha Vantage."""
  load_dotenv()


@cli.command()
@click.option("--symbol", required=True, help="Digital currency code (e.g., BTC).")
@click.option("--market", required=True, help="Market currency code (e.g., EUR).")
@click.option(
  "--function",
  "function_name",
  type=click.Choice(_FUNCTION_CHOICES, case_sensitive=False),
  default="daily",
  show_default=True,
  help="Series granularity.",
)
@click.option(
  "--latest",
  type=int,
  default=None,
  help="Keep only the N most recent records.",
)
@cli_error_handler
def fetch_crypto(symbol: str, market: str, function_name: str, latest: int | None):
  """Fetch a digital currency series and save it to CSV, newest first."""
  logging.info(f"Executing 'fetch-crypto' for {symbol}/{market} ({function_name})")

  function = CryptoFunction.from_name(function_name)
  crypto = _get_client().crypto(function, symbol, market).json()

  n = len(crypto.data) if latest is None else latest
  records = crypto.data.latest_n(n)
  if not records:
    logging.warning("No records were fetched.")
    return

  filename = f"{function_name.lower()}_{symbol.upper()}_{market.upper()}.csv"
  logging.info(f"Saving {len(records)} records to {filename}...")
  save_to_csv([r.model_dump() for r in records], filename)


@cli.command()
@click.option("--symbol", required=True, help="Digital currency code (e.g., BTC).")
@click.option("--market", required=True, help="Market currency code (e.g., EUR).")
@click.option(
  "--function",
  "function_name",
  type=click.Choice(_FUNCTION_CHOICES, case_sensitive=False),
  default="daily",
  show_default=True,
  help="Series granularity.",
)
@cli_error_handler
def latest_crypto(symbol: str, market: str, function_name: str):
  """Print the most recent record of a digital currency series."""
  function = CryptoFunction.from_name(function_name)
  crypto = _get_client().crypto(function, symbol, market).json()

  record = crypto.data.latest()
  if record is None:
    logging.warning(f"No records available for {symbol}/{market}.")
    return

  logging.info(f"Last refreshed {crypto.last_refreshed} ({crypto.time_zone})")
  click.echo(json.dumps(record.model_dump()))


@cli.command()
@click.option("--function", "function_name", required=True, help="API function name.")
@click.option(
  "--param",
  "params",
  multiple=True,
  help="Extra query parameter as key=value. May be repeated.",
)
@cli_error_handler
def fetch_custom(function_name: str, params: tuple[str, ...]):
  """Call any API function and print the JSON payload."""
  logging.info(f"Executing 'fetch-custom' for function: {function_name}")

  builder = _get_client().custom(function_name)
  for key, value in _parse_params(params):
    builder.extra_params(key, value)

  click.echo(json.dumps(builder.json(), indent=2))


if __name__ == "__main__":
  cli()
