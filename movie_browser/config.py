"""
Configuration for the Movie Browser.
Values come from environment variables with defaults suitable for local use.
"""

import os  # environment-based settings
import sys  # stderr sink for the logger
from dataclasses import dataclass  # plain settings container
from typing import Optional  # timeout may be unset

from loguru import logger  # console logger

# Public movies endpoint used when nothing else is configured
DEFAULT_API_URL = "https://dummyapi.online/api/movies/"

# Poster shown in the detail view when a movie has no poster URL of its own
DETAIL_POSTER_PLACEHOLDER = "https://placehold.co/400x600?text=No+Poster"


@dataclass(frozen=True)
class Settings:
	api_url: str = DEFAULT_API_URL  # movies listing endpoint
	timeout: Optional[float] = None  # None leaves the transport default in place
	log_level: str = "INFO"  # loguru level name
	grid_columns: int = 3  # cards per row in the list view


def _read_number(name: str, cast, default):
	"""Read a numeric environment variable, naming it in the error when it is invalid."""
	raw = os.getenv(name)  # unset or empty means default
	if raw is None or not raw.strip():
		return default
	try:
		return cast(raw.strip())
	except ValueError:
		raise ValueError(f"{name} must be a number, got {raw!r}")


def load_settings() -> Settings:
	"""Build Settings from MOVIE_BROWSER_* environment variables."""
	grid_columns = _read_number("MOVIE_BROWSER_GRID_COLUMNS", int, 3)
	if grid_columns < 1:
		raise ValueError(f"MOVIE_BROWSER_GRID_COLUMNS must be at least 1, got {grid_columns}")
	return Settings(
		api_url=os.getenv("MOVIE_BROWSER_API_URL") or DEFAULT_API_URL,
		timeout=_read_number("MOVIE_BROWSER_TIMEOUT", float, None),
		log_level=(os.getenv("MOVIE_BROWSER_LOG_LEVEL") or "INFO").upper(),
		grid_columns=grid_columns,
	)


def configure_logging(level: str = "INFO") -> None:
	"""Replace loguru's default sink with a stderr sink at the given level."""
	logger.remove()  # drop the default handler so the level applies
	logger.add(sys.stderr, level=level)
