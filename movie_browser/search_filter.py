"""
Search filter module.
Case-insensitive substring matching of a search term against title and genre.
"""

from typing import Iterable, Tuple  # type hints

from .models import Movie  # movie data class


def normalize_term(term: str) -> str:
	"""Lowercase the raw search input; this is the form stored in the app state."""
	return (term or '').lower()


def matches(movie: Movie, term: str) -> bool:
	"""True when the lowercased term is a substring of the title or the genre."""
	needle = normalize_term(term)  # compare lowercase against lowercase
	return needle in movie.title.lower() or needle in movie.genre.lower()


def filter_movies(movies: Iterable[Movie], term: str) -> Tuple[Movie, ...]:
	"""
	Return the movies whose title or genre contains the term, in input order.
	An empty term keeps everything; no match gives an empty tuple.
	"""
	needle = normalize_term(term)  # normalize once for the whole pass
	return tuple(m for m in movies if matches(m, needle))
