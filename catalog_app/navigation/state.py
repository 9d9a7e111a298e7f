"""
Navigation state for paging through the movies API.

NavigationState is never modified in place. Every transition goes through
update(state, action), which returns a new state.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from catalog_app.services.movie_record import PAGE_SIZE, MovieRecord, PageResult


class Status(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"


@dataclass(frozen=True)
class NavigationState:
    """What the navigator last received from the server."""

    current_page: int = 0
    total_count: int = 0
    items: tuple[MovieRecord, ...] = ()
    status: Status = Status.IDLE
    latest_request: int = 0
    last_error: str | None = None

    @property
    def last_page(self) -> int:
        return last_page(self.total_count)

    @property
    def is_loading(self) -> bool:
        return self.status is Status.LOADING


@dataclass(frozen=True)
class FetchStarted:
    request_id: int
    page: int


@dataclass(frozen=True)
class FetchSucceeded:
    request_id: int
    page: int
    result: PageResult


@dataclass(frozen=True)
class FetchFailed:
    request_id: int
    error: str


Action = FetchStarted | FetchSucceeded | FetchFailed


def last_page(total_count: int) -> int:
    """Index of the last navigable page for a total movie count."""
    return total_count // PAGE_SIZE


def previous_target(state: NavigationState) -> int:
    return max(0, state.current_page - 1)


def next_target(state: NavigationState) -> int:
    return min(state.last_page, state.current_page + 1)


def update(state: NavigationState, action: Action) -> NavigationState:
    """
    Apply an action to a navigation state.

    Responses for anything but the most recently started request are
    discarded, so a slow reply can never overwrite a newer page. A failed
    fetch keeps the page, total and items that were already displayed.
    """
    if isinstance(action, FetchStarted):
        return replace(state, status=Status.LOADING, latest_request=action.request_id)

    if not isinstance(action, (FetchSucceeded, FetchFailed)):
        raise TypeError(f"Unknown navigation action: {action!r}")

    if action.request_id != state.latest_request:
        return state

    if isinstance(action, FetchSucceeded):
        return replace(
            state,
            current_page=action.page,
            total_count=action.result.total_count,
            items=action.result.items,
            status=Status.IDLE,
            last_error=None,
        )

    return replace(state, status=Status.IDLE, last_error=action.error)
