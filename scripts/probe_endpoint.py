"""
Probe the movies endpoint from the console.

This script:
1) Reads settings (MOVIE_BROWSER_API_URL, MOVIE_BROWSER_TIMEOUT)
2) Loads the movie list once, exactly as the UI does
3) Logs the movie count and the first few titles, or the failure message

Usage:
    python -m scripts.probe_endpoint [URL]

Exits with status 1 when the movies could not be loaded.
"""

import sys  # argv and exit status

from loguru import logger  # console logging

from movie_browser.config import configure_logging, load_settings  # env-based settings
from movie_browser.data_loader import load_movies  # single outbound request
from movie_browser.models import Failed  # failure state

# How many titles to echo after a successful load
PREVIEW_COUNT = 5


def main(argv=None) -> int:
	argv = sys.argv[1:] if argv is None else argv  # allow tests to pass arguments
	settings = load_settings()  # read environment
	configure_logging(settings.log_level)  # apply log level
	url = argv[0] if argv else settings.api_url  # CLI argument wins over the environment

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info(f"Probe movies endpoint: {url}")
	logger.info("=" * 60)

	result = load_movies(url, timeout=settings.timeout)  # Loaded or Failed
	if isinstance(result, Failed):
		logger.error(f"[FAIL] {result.message}")
		return 1

	logger.info(f"[OK] Loaded {len(result.movies)} movies")  # confirm count
	for movie in result.movies[:PREVIEW_COUNT]:
		logger.info(f"  {movie.id}: {movie.title} ({movie.genre})")
	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke probe
