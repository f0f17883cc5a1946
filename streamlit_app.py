"""
Streamlit UI for the Movie Browser.
Fetches the movie list once per browser session, then lets the user filter it
by title or genre and open a detail view for any movie.

Run UI:                streamlit run streamlit_app.py
Run sample API:        uvicorn api:app --reload
                       (then MOVIE_BROWSER_API_URL=http://localhost:8000/api/movies/)
"""

# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Console logging
from loguru import logger  # console logger

from movie_browser.config import configure_logging, load_settings  # env-based settings
from movie_browser.data_loader import load_movies  # single outbound request
from movie_browser.models import AppState, Loading, Movie  # state types
from movie_browser.state import apply_load_result, back, initial_state, search, select  # reducers
from movie_browser.views import render_page  # page renderer

# Key under which the whole AppState lives in the session
STATE_KEY = "app_state"

settings = load_settings()  # read MOVIE_BROWSER_* variables
configure_logging(settings.log_level)  # apply log level

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Database", layout="wide")  # wide layout


def get_state() -> AppState:
	"""Current session state, created on the first run of the session."""
	if STATE_KEY not in st.session_state:
		logger.info("[App] New session")
		st.session_state[STATE_KEY] = initial_state()
	return st.session_state[STATE_KEY]


def dispatch(reducer, *args) -> None:
	"""Replace the session state with the reducer's result."""
	st.session_state[STATE_KEY] = reducer(get_state(), *args)


# Callbacks handed down to the views
def handle_search(term: str) -> None:
	dispatch(search, term)


def handle_select(movie: Movie) -> None:
	dispatch(select, movie)


def handle_back() -> None:
	dispatch(back)


# The request runs only while the session is still Loading, so once per session
if isinstance(get_state().load_state, Loading):
	with st.spinner("Loading..."):
		dispatch(apply_load_result, load_movies(settings.api_url, timeout=settings.timeout))

render_page(
	get_state(),
	on_search=handle_search,
	on_select=handle_select,
	on_back=handle_back,
	grid_columns=settings.grid_columns,
)

# Show where the data comes from
st.sidebar.caption(f"Movies endpoint: {settings.api_url}")
