"""
Browse the movies API page by page from the terminal.

Usage:
    python manage.py browse_movies
    python manage.py browse_movies --base-url http://localhost:8000

Commands at the prompt: n (next page), p (previous page), q (quit).
"""

from django.conf import settings
from django.core.management.base import BaseCommand

from catalog_app.navigation import MovieApiClient, NavigationState, PageNavigator


class Command(BaseCommand):
    help = "Page through the movies API interactively"

    def add_arguments(self, parser):
        parser.add_argument(
            "--base-url",
            type=str,
            default=None,
            help="Base URL of the running movies API (default: MOVIES_API_BASE_URL setting)",
        )

    def handle(self, *args, **options):
        base_url = options["base_url"] or settings.MOVIES_API_BASE_URL
        navigator = PageNavigator(MovieApiClient(base_url))

        self.stdout.write(f"Browsing movies from {base_url}")
        self._render(navigator.load_initial())

        while True:
            try:
                choice = input("\n[n]ext, [p]revious, [q]uit: ").strip().lower()
            except EOFError:
                break

            if choice == "q":
                break
            if choice == "n":
                self._render(navigator.go_to_next())
            elif choice == "p":
                self._render(navigator.go_to_previous())
            else:
                self.stdout.write(self.style.WARNING(f"Unknown command: '{choice}'"))

    def _render(self, state: NavigationState):
        if state.last_error:
            self.stderr.write(self.style.ERROR(f"Error: {state.last_error}"))

        self.stdout.write(self.style.HTTP_INFO("\nTop Rated Movies"))
        if not state.items:
            self.stdout.write("  (no movies on this page)")
        for movie in state.items:
            score = movie.imdb_score if movie.imdb_score is not None else ""
            self.stdout.write(f"  {movie.movie_title or '(untitled)'}  {score}")
        self.stdout.write(f"\nTotal: {state.total_count}, page {state.current_page} of {state.last_page}")
