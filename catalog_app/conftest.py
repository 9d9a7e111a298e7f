"""
Pytest fixtures shared by the catalog_app tests.
"""

from decimal import Decimal

import pytest

from catalog_app.models import Movie
from catalog_app.services.movie_record import MovieRecord, PageResult


@pytest.fixture
def make_movies(db):
    """Create one movie per title, with ids starting at start_id."""

    def _make_movies(titles, start_id=1):
        return [
            Movie.objects.create(
                id=start_id + index,
                movie_title=title,
                imdb_score=Decimal("7.0"),
            )
            for index, title in enumerate(titles)
        ]

    return _make_movies


@pytest.fixture
def thirty_titles():
    """30 distinct titles, deliberately created out of alphabetical order."""
    titles = [f"Movie {chr(ord('A') + i // 2)}{i % 2}" for i in range(30)]
    return list(reversed(titles))


@pytest.fixture
def make_page():
    """Build a PageResult without touching the database."""

    def _make_page(total_count, titles, start_id=1):
        return PageResult(
            total_count=total_count,
            items=tuple(
                MovieRecord(id=start_id + index, movie_title=title) for index, title in enumerate(titles)
            ),
        )

    return _make_page
