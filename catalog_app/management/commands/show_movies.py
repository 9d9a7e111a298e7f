"""
Print the first movies in the catalog, in listing order.

Usage:
    python manage.py show_movies
    python manage.py show_movies --limit 10
"""

from django.core.management.base import BaseCommand, CommandError

from catalog_app.models import Movie
from catalog_app.services.movie_page_service import MOVIE_ORDERING


class Command(BaseCommand):
    help = "Print the first movies in the catalog sorted by title"

    def add_arguments(self, parser):
        parser.add_argument(
            "--limit",
            type=int,
            default=100,
            help="Maximum number of movies to print (default: 100)",
        )

    def handle(self, *args, **options):
        limit = options["limit"]
        if limit < 1:
            raise CommandError("--limit must be at least 1")

        total = Movie.objects.count()
        if total == 0:
            self.stdout.write(self.style.WARNING("No movies loaded. Use load_movies to import a CSV."))
            return

        for movie in Movie.objects.order_by(*MOVIE_ORDERING)[:limit]:
            score = f"  {movie.imdb_score}" if movie.imdb_score is not None else ""
            self.stdout.write(f"{movie.pk:>6}  {movie}{score}")

        self.stdout.write(self.style.SUCCESS(f"\nShowing {min(limit, total)} of {total} movies"))
