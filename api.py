"""
FastAPI server exposing a sample movies API for local development.
Endpoints:
- GET /health: basic health check
- GET /api/movies/: the bundled movie records, same shape as the public endpoint

Run:  uvicorn api:app --reload
Then: MOVIE_BROWSER_API_URL=http://localhost:8000/api/movies/ streamlit run streamlit_app.py
"""

# Import standard libraries for file reading and paths
import json  # read the bundled dataset
from functools import lru_cache  # read the dataset once, on first request
from pathlib import Path  # path-safe filesystem handling
from typing import List, Optional, Union  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI  # FastAPI primitives
from pydantic import BaseModel, ConfigDict, Field  # response schema definitions

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Bundled dataset served by this app, shipped as package data of movie_browser
DATA_PATH = Path(__file__).resolve().parent / 'movie_browser' / 'data' / 'movies.json'

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Sample Movies API", version="1.0.0")  # web app


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	id: Union[int, str]  # unique id
	title: str  # human-readable title
	genre: str  # genre label
	year: Optional[int] = None  # release year
	rating: Optional[float] = None  # average rating
	director: Optional[str] = None  # director name if present
	plot: Optional[str] = None  # short synopsis
	cast: Optional[str] = None  # comma-separated cast
	poster_url: Optional[str] = Field(default=None, alias='posterUrl')  # poster image URL


def load_sample_movies(path: Path = DATA_PATH) -> List[MovieOut]:
	"""Read and validate the bundled dataset."""
	logger.info(f"[API] Loading sample movies from {path}")  # log intent
	with open(path, 'r', encoding='utf-8') as f:
		records = json.load(f)  # JSON array
	movies = [MovieOut.model_validate(r) for r in records]  # validate each record
	logger.info(f"[API] Loaded {len(movies)} sample movies")  # record dataset size
	return movies


@lru_cache(maxsize=1)
def get_movies() -> List[MovieOut]:
	"""The sample movies, read on first use rather than at import."""
	return load_sample_movies()


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"movies": len(get_movies()),  # dataset size
	}


# Listing endpoint in the same shape the browser expects from the public API
@app.get("/api/movies/", response_model=List[MovieOut], response_model_by_alias=True, response_model_exclude_none=True)
async def list_movies():
	"""Return every sample movie."""
	movies = get_movies()  # cached after the first call
	logger.debug(f"[API] /api/movies/ served {len(movies)} movies")  # trace
	return movies
