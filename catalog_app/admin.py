from django.contrib import admin

from catalog_app.models import Movie
from catalog_app.services.movie_page_service import MOVIE_ORDERING


@admin.register(Movie)
class MovieAdmin(admin.ModelAdmin):
    """Read-only view of the catalog. Records are loaded with load_movies."""

    list_display = ["movie_title", "title_year", "imdb_score", "director_name"]
    list_filter = ["content_rating", "title_year"]
    ordering = list(MOVIE_ORDERING)
    list_per_page = 25

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
