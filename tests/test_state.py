"""
Tests for the state reducers: load lifecycle, search, and the list/detail
state machine, independent of any rendering.
"""

from movie_browser.models import AppState, Failed, Loaded, Loading, Movie
from movie_browser.state import (
	DETAIL_VIEW,
	LIST_VIEW,
	apply_load_result,
	back,
	initial_state,
	search,
	select,
	view_mode,
)

INCEPTION = Movie(id="1", title="Inception", genre="Sci-Fi", year=2010)
SHAWSHANK = Movie(id="2", title="The Shawshank Redemption", genre="Drama", year=1994)
INTERSTELLAR = Movie(id="3", title="Interstellar", genre="Sci-Fi", year=2014)
MOVIES = (INCEPTION, SHAWSHANK, INTERSTELLAR)


def loaded_state() -> AppState:
	return apply_load_result(initial_state(), Loaded(MOVIES))


def test_initial_state():
	state = initial_state()
	assert state.load_state == Loading()
	assert state.movies == ()
	assert state.filtered_movies == ()
	assert state.search_term == ''
	assert state.selected_movie is None
	assert view_mode(state) == LIST_VIEW


def test_successful_load_shows_everything():
	state = loaded_state()
	assert state.movies == MOVIES
	assert state.filtered_movies == MOVIES


def test_failed_load():
	state = apply_load_result(initial_state(), Failed("HTTP error! Status: 500"))
	assert state.load_state == Failed("HTTP error! Status: 500")
	assert state.movies == ()
	assert state.filtered_movies == ()


def test_only_first_load_result_counts():
	state = loaded_state()
	assert apply_load_result(state, Failed("late")) is state
	failed = apply_load_result(initial_state(), Failed("boom"))
	assert apply_load_result(failed, Loaded(MOVIES)) is failed


def test_search_lowercases_and_filters():
	state = search(loaded_state(), "SCI")
	assert state.search_term == "sci"
	assert state.filtered_movies == (INCEPTION, INTERSTELLAR)


def test_search_always_filters_the_full_list():
	state = search(loaded_state(), "zzz")
	assert state.filtered_movies == ()
	state = search(state, "drama")
	assert state.filtered_movies == (SHAWSHANK,)
	state = search(state, "")
	assert state.filtered_movies == MOVIES


def test_reducers_do_not_mutate():
	state = loaded_state()
	search(state, "sci")
	select(state, INCEPTION)
	assert state.search_term == ''
	assert state.selected_movie is None
	assert state.filtered_movies == MOVIES


def test_select_from_unfiltered_list():
	state = select(loaded_state(), SHAWSHANK)
	assert view_mode(state) == DETAIL_VIEW
	assert state.selected_movie is SHAWSHANK


def test_select_then_back_preserves_search():
	before = search(loaded_state(), "sci")
	detail = select(before, INTERSTELLAR)
	assert detail.selected_movie == INTERSTELLAR

	after = back(detail)
	assert view_mode(after) == LIST_VIEW
	assert after.search_term == before.search_term == "sci"
	assert after.filtered_movies == before.filtered_movies
	assert after == before


def test_every_movie_can_be_selected():
	state = loaded_state()
	for movie in MOVIES:
		detail = select(state, movie)
		assert detail.selected_movie == movie
		assert back(detail) == state


def test_search_is_ignored_in_detail_view():
	detail = select(search(loaded_state(), "sci"), INCEPTION)
	assert search(detail, "drama") is detail


def test_select_unknown_movie_is_ignored():
	stranger = Movie(id="99", title="Unknown Film", genre="Drama")
	state = loaded_state()
	assert select(state, stranger) is state


def test_select_before_load_is_ignored():
	state = initial_state()
	assert select(state, INCEPTION) is state


def test_select_in_detail_view_is_ignored():
	detail = select(loaded_state(), INCEPTION)
	assert select(detail, SHAWSHANK) is detail


def test_back_in_list_view_is_ignored():
	state = loaded_state()
	assert back(state) is state
