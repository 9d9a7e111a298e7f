"""
Immutable movie values exchanged over the movies API.

MovieRecord mirrors the Movie model field for field. JSON payloads use
camelCase keys (e.g. movie_title -> "movieTitle") and null for unset fields.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from catalog_app.models import Movie

PAGE_SIZE = 25


class MovieRecordError(ValueError):
    """Raised when a JSON movie payload does not match the MovieRecord shape."""

    pass


@dataclass(frozen=True)
class MovieRecord:
    """A read-only movie. Only id is required."""

    id: int
    color: str | None = None
    director_name: str | None = None
    num_critic_for_reviews: str | None = None
    duration: int | None = None
    director_facebook_likes: int | None = None
    actor_three_facebook_likes: int | None = None
    actor_two_name: str | None = None
    actor_one_facebook_likes: int | None = None
    gross: int | None = None
    genres: str | None = None
    actor_one_name: str | None = None
    movie_title: str | None = None
    num_voted_users: int | None = None
    cast_total_facebook_likes: int | None = None
    actor_three_name: str | None = None
    facenumber_in_poster: int | None = None
    plot_keywords: str | None = None
    movie_imdb_link: str | None = None
    num_user_for_reviews: int | None = None
    language: str | None = None
    country: str | None = None
    content_rating: str | None = None
    budget: int | None = None
    title_year: int | None = None
    actor_two_facebook_likes: int | None = None
    imdb_score: Decimal | None = None
    aspect_ratio: str | None = None
    movie_facebook_likes: int | None = None

    @classmethod
    def from_model(cls, movie: Movie) -> MovieRecord:
        return cls(**{name: getattr(movie, name) for name in FIELD_NAMES})

    def to_json(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict with camelCase keys."""
        data: dict[str, Any] = {}
        for name in FIELD_NAMES:
            value = getattr(self, name)
            if isinstance(value, Decimal):
                value = float(value)
            data[to_camel_case(name)] = value
        return data

    @classmethod
    def from_json(cls, data: Any) -> MovieRecord:
        """
        Build a MovieRecord from a decoded JSON object.

        Missing keys become None and unknown keys are ignored.

        Raises:
            MovieRecordError: If data is not an object, id is missing, or a
                field has the wrong type
        """
        if not isinstance(data, dict):
            raise MovieRecordError(f"Movie payload must be an object, got {type(data).__name__}")

        if data.get("id") is None:
            raise MovieRecordError("Movie payload is missing 'id'")

        values = {}
        for name in FIELD_NAMES:
            key = to_camel_case(name)
            values[name] = _coerce(key, data.get(key), FIELD_KINDS[name])
        return cls(**values)


@dataclass(frozen=True)
class PageResult:
    """One page of movies plus the total count across all pages."""

    total_count: int
    items: tuple[MovieRecord, ...]

    def to_json(self) -> dict[str, Any]:
        return {
            "totalMovies": self.total_count,
            "movies": [item.to_json() for item in self.items],
        }

    @classmethod
    def from_json(cls, data: Any) -> PageResult:
        """
        Build a PageResult from a decoded movies API response.

        Raises:
            MovieRecordError: If the payload is not a valid page
        """
        if not isinstance(data, dict):
            raise MovieRecordError(f"Page payload must be an object, got {type(data).__name__}")

        total_count = data.get("totalMovies")
        if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
            raise MovieRecordError(f"'totalMovies' must be a non-negative integer, got {total_count!r}")

        movies = data.get("movies")
        if not isinstance(movies, list):
            raise MovieRecordError(f"'movies' must be a list, got {movies!r}")
        if len(movies) > PAGE_SIZE:
            raise MovieRecordError(f"Page holds {len(movies)} movies, more than the page size of {PAGE_SIZE}")

        return cls(
            total_count=total_count,
            items=tuple(MovieRecord.from_json(movie) for movie in movies),
        )


def to_camel_case(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def _coerce(key: str, value: Any, kind: type) -> Any:
    if value is None:
        return None

    if kind is int:
        # bool is a subclass of int but never a valid count
        if isinstance(value, bool) or not isinstance(value, int):
            raise MovieRecordError(f"Field '{key}' must be an integer, got {value!r}")
        return value

    if kind is str:
        if not isinstance(value, str):
            raise MovieRecordError(f"Field '{key}' must be a string, got {value!r}")
        return value

    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise MovieRecordError(f"Field '{key}' must be a number, got {value!r}")
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise MovieRecordError(f"Field '{key}' must be a number, got {value!r}") from e
    if not number.is_finite():
        raise MovieRecordError(f"Field '{key}' must be a finite number, got {value!r}")
    return number


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(MovieRecord))

_KIND_BY_ANNOTATION = {"int": int, "str": str, "Decimal": Decimal}

FIELD_KINDS: dict[str, type] = {
    f.name: _KIND_BY_ANNOTATION[f.type.split(" | ")[0]] for f in fields(MovieRecord)
}
