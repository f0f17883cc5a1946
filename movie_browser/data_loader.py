"""
Data loading module.
Fetches the movie list from the movies API once and turns it into Movie records,
or into a failure message when the request or the payload is bad.
"""

# HTTP client for the single outbound request
import requests  # make web requests to the movies API
from typing import Any, Dict, List, Optional, Tuple  # type hints

# Import our data classes used across the project
from .models import Failed, Loaded, LoadState, Movie  # structured records and load states

# Console logging
from loguru import logger  # console logger


class MovieLoadError(Exception):
	"""Base class for everything that can go wrong while loading movies."""


class MovieFetchError(MovieLoadError):
	"""The request failed or the server answered with a non-success status."""

	def __init__(self, message: str, status_code: Optional[int] = None):
		super().__init__(message)
		self.status_code = status_code  # None for transport failures


class MovieParseError(MovieLoadError):
	"""The response body is not a valid list of movie records."""


def fetch_movies(url: str, timeout: Optional[float] = None) -> Tuple[Movie, ...]:
	"""
	GET the movies endpoint and parse the body.
	Raises MovieFetchError or MovieParseError; never returns a partial list.
	"""
	logger.info(f"[MovieLoader] Fetching movies from {url}")  # log action
	try:
		response = requests.get(url, timeout=timeout)  # plain GET, no params or headers
	except requests.RequestException as e:  # DNS, connection refused, timeouts...
		raise MovieFetchError(f"Request failed: {e}") from e

	# Any non-2xx status is a failure; the code goes into the message
	if not 200 <= response.status_code < 300:
		raise MovieFetchError(f"HTTP error! Status: {response.status_code}", status_code=response.status_code)

	try:
		payload = response.json()  # decode JSON body
	except ValueError as e:  # requests' JSONDecodeError subclasses ValueError
		raise MovieParseError(f"Invalid JSON in response: {e}") from e

	return parse_movies(payload)


def load_movies(url: str, timeout: Optional[float] = None) -> LoadState:
	"""Run fetch_movies and fold the outcome into Loaded or Failed."""
	try:
		movies = fetch_movies(url, timeout=timeout)
	except MovieLoadError as e:
		logger.warning(f"[MovieLoader] Loading movies failed: {e}")  # surfaced to the user as-is
		return Failed(str(e))
	logger.info(f"[MovieLoader] Successfully loaded {len(movies)} movies.")  # summary
	return Loaded(movies)


def parse_movies(payload: Any) -> Tuple[Movie, ...]:
	"""
	Validate a decoded JSON payload and convert it to Movie records.
	One malformed record fails the whole payload.
	"""
	if not isinstance(payload, list):
		raise MovieParseError(f"Expected a JSON array of movies, got {type(payload).__name__}")

	movies: List[Movie] = []  # accumulator for parsed Movie objects
	seen_ids = set()  # ids must be unique within a session
	for index, data in enumerate(payload):  # keep the index for diagnostics
		movie = _parse_movie_data(data, index)  # convert dict -> Movie
		if movie.id in seen_ids:
			raise MovieParseError(f"Duplicate movie id {movie.id!r} at index {index}")
		seen_ids.add(movie.id)
		movies.append(movie)  # collect
	return tuple(movies)


def _parse_movie_data(data: Any, index: int) -> Movie:
	"""
	Convert one raw dictionary into a Movie.
	Required fields are checked; optional ones get None when missing or empty.
	"""
	if not isinstance(data, dict):
		raise MovieParseError(f"Movie at index {index} is not an object")

	raw_id = data.get('id')  # may arrive as int or str
	if raw_id is None or str(raw_id).strip() == '':
		raise MovieParseError(f"Movie at index {index} has no id")

	title = _required_text(data, 'title', index)  # needed for filtering
	genre = _required_text(data, 'genre', index)  # needed for filtering

	return Movie(
		id=str(raw_id),  # ensure ID is string
		title=title,
		genre=genre,
		year=_optional_number(data.get('year'), int),  # int year when numeric
		rating=_optional_number(data.get('rating'), float),  # float rating when numeric
		director=_optional_text(data.get('director')),
		plot=_optional_text(data.get('plot')),
		cast=_optional_cast(data.get('cast')),
		poster_url=_optional_text(data.get('posterUrl') or data.get('poster_url')),  # prefer 'posterUrl'
	)


def _required_text(data: Dict, key: str, index: int) -> str:
	"""Return a non-blank string field or raise MovieParseError."""
	value = data.get(key)
	if not isinstance(value, str) or not value.strip():
		raise MovieParseError(f"Movie at index {index} has no valid '{key}'")
	return value


def _optional_text(value: Any) -> Optional[str]:
	"""Stringify a display value; None, empty and whitespace-only become None."""
	if value is None:  # missing field
		return None
	text = str(value).strip()
	return text or None


def _optional_number(value: Any, cast):
	"""Convert to int/float when possible, otherwise keep the text for display."""
	if value is None or isinstance(value, bool):
		return None
	if isinstance(value, (int, float)):
		try:
			return cast(value)
		except (ValueError, OverflowError):  # NaN or infinity
			return None
	text = str(value).strip()
	if not text:
		return None
	try:
		return cast(text)
	except ValueError:
		return text  # e.g. "2010-2012" or "PG-13" style values are shown verbatim


def _optional_cast(value: Any) -> Optional[str]:
	"""Cast may be a list of names or a single string; both become one string."""
	if isinstance(value, list):
		names = [str(item).strip() for item in value if item and str(item).strip()]  # clean each
		return ', '.join(names) or None
	return _optional_text(value)
