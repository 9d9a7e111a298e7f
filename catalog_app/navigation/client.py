"""
HTTP client for the movies API.
"""

import logging

import requests

from catalog_app.services.movie_record import MovieRecordError, PageResult

logger = logging.getLogger(__name__)


class MovieApiError(Exception):
    """Exception raised when a movies API request fails."""

    pass


class MovieApiClient:
    """
    Fetches pages from a running movies API (GET /api/movies?page=N).
    """

    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_page(self, page: int) -> PageResult:
        """
        Fetch one page of movies.

        Args:
            page: Zero-based page index

        Returns:
            PageResult decoded from the response body

        Raises:
            MovieApiError: If the request fails or the body is not a valid page
        """
        url = f"{self.base_url}/api/movies"

        logger.info("Fetching movie page %d from %s", page, url)

        try:
            response = requests.get(
                url,
                params={"page": page},
                headers={"accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            logger.error("Movies API request timed out: %s", url)
            raise MovieApiError("Movies API request timed out")
        except requests.exceptions.HTTPError as e:
            logger.error("Movies API HTTP error: %s - %s", e.response.status_code, e.response.text)
            raise MovieApiError(f"Movies API error: {e.response.status_code}")
        except requests.exceptions.JSONDecodeError as e:
            logger.error("Movies API returned invalid JSON: %s", str(e))
            raise MovieApiError("Movies API returned invalid JSON")
        except requests.exceptions.RequestException as e:
            logger.error("Movies API request failed: %s", str(e))
            raise MovieApiError(f"Movies API request failed: {str(e)}")

        try:
            return PageResult.from_json(data)
        except MovieRecordError as e:
            logger.error("Movies API returned an invalid page: %s", str(e))
            raise MovieApiError(f"Movies API returned an invalid page: {e}") from e
