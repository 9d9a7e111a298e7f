from unittest.mock import MagicMock, patch

import pytest
import requests

from catalog_app.navigation.client import MovieApiClient, MovieApiError
from catalog_app.services.movie_record import MovieRecord


class TestMovieApiClient:
    @pytest.fixture
    def mock_get(self):
        with patch("catalog_app.navigation.client.requests.get") as mock_get:
            yield mock_get

    def _response(self, payload):
        response = MagicMock()
        response.json.return_value = payload
        response.raise_for_status.return_value = None
        return response

    def test_fetch_page_requests_the_movies_endpoint(self, mock_get):
        mock_get.return_value = self._response({"totalMovies": 0, "movies": []})

        MovieApiClient("http://movies.test/").fetch_page(3)

        mock_get.assert_called_once_with(
            "http://movies.test/api/movies",
            params={"page": 3},
            headers={"accept": "application/json"},
            timeout=10,
        )

    def test_fetch_page_decodes_the_page(self, mock_get):
        mock_get.return_value = self._response(
            {"totalMovies": 30, "movies": [{"id": 1, "movieTitle": "Alien", "imdbScore": 8.5}]}
        )

        result = MovieApiClient("http://movies.test").fetch_page(0)

        assert result.total_count == 30
        assert result.items[0] == MovieRecord.from_json({"id": 1, "movieTitle": "Alien", "imdbScore": 8.5})

    def test_timeout_raises_api_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(MovieApiError, match="timed out"):
            MovieApiClient("http://movies.test").fetch_page(0)

    def test_http_error_raises_api_error_with_status(self, mock_get):
        error_response = MagicMock(status_code=500, text="Internal Server Error")
        response = MagicMock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=error_response)
        mock_get.return_value = response

        with pytest.raises(MovieApiError, match="500"):
            MovieApiClient("http://movies.test").fetch_page(0)

    def test_connection_error_raises_api_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(MovieApiError, match="request failed"):
            MovieApiClient("http://movies.test").fetch_page(0)

    def test_invalid_json_raises_api_error(self, mock_get):
        response = MagicMock()
        response.raise_for_status.return_value = None
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        mock_get.return_value = response

        with pytest.raises(MovieApiError, match="invalid JSON"):
            MovieApiClient("http://movies.test").fetch_page(0)

    def test_malformed_page_raises_api_error(self, mock_get):
        mock_get.return_value = self._response({"movies": []})

        with pytest.raises(MovieApiError, match="invalid page"):
            MovieApiClient("http://movies.test").fetch_page(0)
