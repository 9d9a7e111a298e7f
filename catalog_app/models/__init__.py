from catalog_app.models.movie import Movie

__all__ = ["Movie"]
