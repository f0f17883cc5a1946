"""
Shared fixtures: a fake movies API standing in for requests.get.
"""

import json

import pytest
import requests


class FakeResponse:
	"""The slice of requests.Response the loader uses."""

	def __init__(self, status_code=200, payload=None, text=None):
		self.status_code = status_code
		self._payload = payload
		self._text = text  # raw body; when set, json() really parses it

	def json(self):
		if self._text is not None:
			return json.loads(self._text)  # JSONDecodeError is a ValueError
		return self._payload


class FakeMoviesApi:
	"""Records every GET and answers with whatever was configured last."""

	def __init__(self):
		self.calls = []
		self.response = FakeResponse(payload=[])
		self.error = None

	def respond(self, status_code=200, payload=None, text=None):
		self.response = FakeResponse(status_code=status_code, payload=payload, text=text)
		self.error = None

	def fail_with(self, error):
		self.error = error

	def get(self, url, timeout=None, **kwargs):
		self.calls.append({"url": url, "timeout": timeout, **kwargs})
		if self.error is not None:
			raise self.error
		return self.response


@pytest.fixture
def fake_api(monkeypatch):
	api = FakeMoviesApi()
	monkeypatch.setattr(requests, "get", api.get)
	return api


@pytest.fixture
def sample_records():
	return [
		{"id": 1, "title": "Inception", "genre": "Sci-Fi", "year": 2010},
		{"id": 2, "title": "The Shawshank Redemption", "genre": "Drama", "year": 1994, "rating": 9.3,
		 "director": "Frank Darabont", "plot": "Two imprisoned men bond.", "cast": ["Tim Robbins", "Morgan Freeman"],
		 "posterUrl": "https://example.com/shawshank.jpg"},
		{"id": "3", "title": "Spirited Away", "genre": "Animation", "year": "2001", "rating": "8.6"},
	]
