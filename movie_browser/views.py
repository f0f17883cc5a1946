"""
Streamlit rendering for the Movie Browser.
The page is drawn from an AppState; user actions are reported through callbacks
passed in by the caller, so nothing here touches the state directly.
"""

from typing import Callable, Sequence  # type hints

import streamlit as st  # UI primitives

from .config import DETAIL_POSTER_PLACEHOLDER  # fallback poster
from .models import AppState, Failed, Loaded, Loading, Movie  # state types
from .state import DETAIL_VIEW, view_mode  # which view is active

# Session key of the search text input widget
SEARCH_INPUT_KEY = "search_input"

PAGE_TITLE = "Movie Database"
LOADING_MESSAGE = "Loading..."
NO_RESULTS_MESSAGE = "No movies found matching your search."
SEARCH_PLACEHOLDER = "Search movies by title or genre..."
BACK_LABEL = "Back to Movies"
UNKNOWN_DIRECTOR = "Unknown"
NO_PLOT = "No plot description available."

# Characters that Streamlit markdown would treat as formatting or LaTeX
MARKDOWN_SPECIALS = "\\`*_[]$<>~|#"


def rating_label(movie: Movie) -> str:
	"""Star badge text; missing and zero ratings read N/A."""
	rating = movie.rating
	if not rating:
		return "★ N/A"
	if isinstance(rating, float):
		return f"★ {rating:g}"  # 8.0 -> 8, 8.8 -> 8.8
	return f"★ {rating}"


def year_label(movie: Movie) -> str:
	return str(movie.year) if movie.year is not None else ""


def director_label(movie: Movie) -> str:
	return movie.director or UNKNOWN_DIRECTOR


def plot_label(movie: Movie) -> str:
	return movie.plot or NO_PLOT


def detail_poster(movie: Movie) -> str:
	"""Poster for the detail view, falling back to a placeholder."""
	return movie.poster_url or DETAIL_POSTER_PLACEHOLDER


def error_label(message: str) -> str:
	return f"Error: {message}"


def escape_markdown(text: str) -> str:
	"""Backslash-escape API text so st.markdown shows it exactly as sent."""
	escaped = "".join("\\" + c if c in MARKDOWN_SPECIALS else c for c in text)
	if escaped[:1] in ("-", "+"):  # would start a list item
		escaped = "\\" + escaped
	return escaped


def render_page(
	state: AppState,
	on_search: Callable[[str], None],
	on_select: Callable[[Movie], None],
	on_back: Callable[[], None],
	grid_columns: int = 3,
) -> None:
	"""Draw the whole page for the given state."""
	# Exhaustive dispatch over the three load states
	load_state = state.load_state
	if isinstance(load_state, Loading):
		st.info(LOADING_MESSAGE)  # no header until the load resolves
	elif isinstance(load_state, Failed):
		st.error(escape_markdown(error_label(load_state.message)))
	elif isinstance(load_state, Loaded):
		st.title(PAGE_TITLE)
		if view_mode(state) == DETAIL_VIEW:
			render_movie_detail(state.selected_movie, on_back)
		else:
			render_movie_list(state, on_search, on_select, grid_columns)
	else:
		raise TypeError(f"Unknown load state: {load_state!r}")


def _forward_search(on_search: Callable[[str], None]) -> None:
	"""on_change callback: pass the widget's new value to the caller."""
	on_search(st.session_state[SEARCH_INPUT_KEY])


def render_movie_list(
	state: AppState,
	on_search: Callable[[str], None],
	on_select: Callable[[Movie], None],
	grid_columns: int = 3,
) -> None:
	"""Search box plus a grid of cards for the filtered movies."""
	# Seed the widget from the state; the widget is dropped while the detail view is shown
	st.session_state[SEARCH_INPUT_KEY] = state.search_term
	st.text_input(
		"Search",
		key=SEARCH_INPUT_KEY,
		placeholder=SEARCH_PLACEHOLDER,
		label_visibility="collapsed",
		on_change=_forward_search,
		args=(on_search,),
	)

	if not state.filtered_movies:
		st.info(NO_RESULTS_MESSAGE)
		return
	render_movie_grid(state.filtered_movies, on_select, grid_columns)


def render_movie_grid(movies: Sequence[Movie], on_select: Callable[[Movie], None], grid_columns: int = 3) -> None:
	columns = st.columns(grid_columns)  # fixed number of cards per row
	for i, movie in enumerate(movies):
		with columns[i % grid_columns]:
			render_movie_card(movie, on_select)


def render_movie_card(movie: Movie, on_select: Callable[[Movie], None]) -> None:
	"""One card: optional poster, title, year/genre, rating and a select button."""
	with st.container(border=True):
		if movie.poster_url:  # cards without a poster show text only
			st.image(movie.poster_url, width="stretch")
		st.subheader(escape_markdown(movie.title))
		st.caption(" · ".join(escape_markdown(part) for part in (year_label(movie), movie.genre) if part))
		st.markdown(rating_label(movie))
		st.button("View details", key=f"select-{movie.id}", on_click=on_select, args=(movie,))


def render_movie_detail(movie: Movie, on_back: Callable[[], None]) -> None:
	"""Full attributes of one movie plus the back action."""
	st.button(BACK_LABEL, key="back", on_click=on_back)

	poster_col, info_col = st.columns([1, 2])
	with poster_col:
		st.image(detail_poster(movie), width="stretch")
	with info_col:
		st.header(escape_markdown(movie.title))
		badges = [year_label(movie), movie.genre, rating_label(movie)]  # blank year is skipped
		st.caption("  |  ".join(escape_markdown(b) for b in badges if b))

		st.subheader("Director")
		st.markdown(escape_markdown(director_label(movie)))

		st.subheader("Plot")
		st.markdown(escape_markdown(plot_label(movie)))

		if movie.cast:  # section only when the API sent a cast
			st.subheader("Cast")
			st.markdown(escape_markdown(movie.cast))
