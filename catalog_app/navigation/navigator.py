"""
Page navigator for the movies API.

Tracks the current page and total movie count and fetches a new page when
the user moves backward or forward. Moving past either end does nothing.
"""

from __future__ import annotations

import itertools
import logging
from typing import Protocol

from catalog_app.navigation.client import MovieApiError
from catalog_app.navigation.state import (
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    NavigationState,
    next_target,
    previous_target,
    update,
)
from catalog_app.services.movie_record import PageResult

logger = logging.getLogger(__name__)

INITIAL_PAGE = 0


class PageFetcher(Protocol):
    def fetch_page(self, page: int) -> PageResult: ...


class PageNavigator:
    """
    Owns a NavigationState and is the only thing that changes it.

    Each navigation action makes at most one fetch. A failed fetch is
    recorded in state.last_error and leaves the displayed page untouched.
    """

    def __init__(self, client: PageFetcher):
        self.client = client
        self.state = NavigationState()
        self._request_ids = itertools.count(1)

    def load_initial(self) -> NavigationState:
        return self._fetch(INITIAL_PAGE)

    def go_to_previous(self) -> NavigationState:
        target = previous_target(self.state)
        if target == self.state.current_page:
            logger.debug("Already at the first page, not fetching")
            return self.state
        return self._fetch(target)

    def go_to_next(self) -> NavigationState:
        target = next_target(self.state)
        if target == self.state.current_page:
            logger.debug("Already at the last page (%d), not fetching", self.state.last_page)
            return self.state
        return self._fetch(target)

    def _fetch(self, page: int) -> NavigationState:
        request_id = next(self._request_ids)
        self.state = update(self.state, FetchStarted(request_id=request_id, page=page))

        try:
            result = self.client.fetch_page(page)
        except MovieApiError as e:
            logger.warning("Failed to fetch movie page %d: %s", page, e)
            self.state = update(self.state, FetchFailed(request_id=request_id, error=str(e)))
        else:
            self.state = update(self.state, FetchSucceeded(request_id=request_id, page=page, result=result))

        return self.state
