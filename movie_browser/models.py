"""
Data models for the Movie Browser.
Defines the movie record, the three-state load result, and the application state.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Optional, Tuple, Union  # optional values, fixed tuples, unions


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie as returned by the movies API.
	Only id, title and genre are required; everything else is display-only.
	"""
	id: str  # unique identifier (string for consistency), used as the card key
	title: str  # display title, used for filtering
	genre: str  # display genre, used for filtering
	year: Optional[Union[int, str]] = None  # release year (int when numeric)
	rating: Optional[Union[float, str]] = None  # rating (float when numeric)
	director: Optional[str] = None  # director's name
	plot: Optional[str] = None  # short synopsis
	cast: Optional[str] = None  # comma-separated cast names
	poster_url: Optional[str] = None  # URL of the poster image


@dataclass(frozen=True)
class Loading:
	"""The movies request has not resolved yet."""


@dataclass(frozen=True)
class Loaded:
	"""The movies request succeeded; holds every movie in response order."""
	movies: Tuple[Movie, ...] = ()


@dataclass(frozen=True)
class Failed:
	"""The movies request failed; holds a human-readable message."""
	message: str


# The three states a load can be in; exactly one holds at any time
LoadState = Union[Loading, Loaded, Failed]


@dataclass(frozen=True)
class AppState:
	"""
	Everything the UI needs for one browsing session.
	Never mutated: reducers in state.py return a new value for every change.
	"""
	load_state: LoadState = field(default_factory=Loading)  # fetch lifecycle
	filtered_movies: Tuple[Movie, ...] = ()  # subsequence of movies matching search_term
	search_term: str = ''  # lowercased filter string
	selected_movie: Optional[Movie] = None  # None means the list view is active

	@property
	def movies(self) -> Tuple[Movie, ...]:
		"""All loaded movies, or an empty tuple before/without a successful load."""
		if isinstance(self.load_state, Loaded):
			return self.load_state.movies
		return ()
