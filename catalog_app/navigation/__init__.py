from catalog_app.navigation.client import MovieApiClient, MovieApiError
from catalog_app.navigation.navigator import PageNavigator
from catalog_app.navigation.state import NavigationState, Status, last_page, update

__all__ = ["MovieApiClient", "MovieApiError", "NavigationState", "PageNavigator", "Status", "last_page", "update"]
