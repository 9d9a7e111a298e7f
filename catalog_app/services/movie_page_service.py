"""
Movie Page Service

Serves fixed-size pages of movies ordered by title, together with the
total number of movies so clients can compute their navigation bounds.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, models, transaction

from catalog_app.models import Movie
from catalog_app.services.movie_record import PAGE_SIZE, MovieRecord, PageResult

logger = logging.getLogger(__name__)

# Null titles sort last; id breaks ties so pages stay stable between requests.
MOVIE_ORDERING = (models.F("movie_title").asc(nulls_last=True), "id")


class InvalidPageError(ValueError):
    """Raised when a page index is negative."""

    pass


class MoviePageServiceError(Exception):
    """Exception raised when movies cannot be read from the database."""

    pass


class MoviePageService:
    """
    Read-only access to pages of the movie catalog.

    Page size and sort order are fixed; callers only choose the page index.
    """

    page_size = PAGE_SIZE

    def get_page(self, page: int) -> PageResult:
        """
        Get one page of movies ordered by title.

        Args:
            page: Zero-based page index. Pages past the end return no items.

        Returns:
            PageResult with the movies on the page and the total movie count

        Raises:
            InvalidPageError: If page is negative
            MoviePageServiceError: If the database query fails
        """
        if page < 0:
            raise InvalidPageError(f"Page must be zero or greater, got {page}")

        offset = page * self.page_size

        try:
            with transaction.atomic():
                total_count = Movie.objects.count()
                # Offsets past the end can exceed the database's integer range
                if offset >= total_count:
                    movies = []
                else:
                    movies = list(Movie.objects.order_by(*MOVIE_ORDERING)[offset : offset + self.page_size])
        except DatabaseError as e:
            logger.error("Failed to load movie page %d: %s", page, e)
            raise MoviePageServiceError(f"Failed to load movie page {page}") from e

        logger.info(
            "Served movie page: page=%d, size=%d, total=%d, returned=%d",
            page,
            self.page_size,
            total_count,
            len(movies),
        )

        return PageResult(
            total_count=total_count,
            items=tuple(MovieRecord.from_model(movie) for movie in movies),
        )
