"""
Application state transitions.
Each reducer takes the current AppState and returns the next one; nothing is mutated.

Transitions:
- Loading --apply_load_result--> Loaded | Failed (once per session)
- List --select(movie)--> Detail
- Detail --back()--> List
Anything else leaves the state unchanged.
"""

from dataclasses import replace  # copy a frozen dataclass with changes

from loguru import logger  # console logger

from .models import AppState, Failed, Loaded, Loading, LoadState, Movie  # state types
from .search_filter import filter_movies, normalize_term  # search predicate

LIST_VIEW = "list"
DETAIL_VIEW = "detail"


def initial_state() -> AppState:
	"""Session start: loading, empty search, list view."""
	return AppState(load_state=Loading())


def view_mode(state: AppState) -> str:
	"""Which of the two views is active."""
	return DETAIL_VIEW if state.selected_movie is not None else LIST_VIEW


def apply_load_result(state: AppState, result: LoadState) -> AppState:
	"""Record the outcome of the movies request; only the first outcome counts."""
	if not isinstance(state.load_state, Loading):
		logger.warning("[State] Ignoring load result: movies were already resolved")
		return state
	if isinstance(result, Loaded):
		logger.debug(f"[State] Loaded {len(result.movies)} movies")
		# No term has been applied yet, so the filtered list is the full list
		return replace(state, load_state=result, filtered_movies=result.movies)
	if isinstance(result, Failed):
		logger.debug(f"[State] Load failed: {result.message}")
		return replace(state, load_state=result, filtered_movies=())
	return state  # still Loading


def search(state: AppState, raw_term: str) -> AppState:
	"""Store the lowercased term and recompute the filtered list from all movies."""
	if view_mode(state) == DETAIL_VIEW:
		return state  # the detail view never touches the search
	term = normalize_term(raw_term)
	filtered = filter_movies(state.movies, term)  # always filter the full list
	logger.debug(f"[State] Search '{term}' matched {len(filtered)} of {len(state.movies)} movies")
	return replace(state, search_term=term, filtered_movies=filtered)


def select(state: AppState, movie: Movie) -> AppState:
	"""List -> Detail for one of the loaded movies."""
	if view_mode(state) == DETAIL_VIEW:
		logger.warning("[State] Ignoring select: a movie is already selected")
		return state
	if movie not in state.movies:
		logger.warning(f"[State] Ignoring select: movie {movie.id!r} is not in the loaded list")
		return state
	logger.debug(f"[State] Selected movie {movie.id!r}")
	return replace(state, selected_movie=movie)


def back(state: AppState) -> AppState:
	"""Detail -> List; the search term and filtered list stay as they were."""
	if view_mode(state) == LIST_VIEW:
		return state
	logger.debug("[State] Back to list")
	return replace(state, selected_movie=None)
