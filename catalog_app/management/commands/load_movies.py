"""
Load movies from a CSV file into the database.

Usage:
    # Load the IMDB 5000 movie metadata export
    python manage.py load_movies seed_data/movie_metadata.csv

    # Show what would change without writing anything
    python manage.py load_movies seed_data/movie_metadata.csv --dry-run

This command performs an upsert operation using the movie's id as the unique
identifier. If the CSV has no id column, rows are numbered from 1 in file
order. Column headers are the Movie field names; the IMDB export's
actor_1/actor_2/actor_3 and num_critic_for_review spellings are accepted too.
Empty cells are stored as NULL.
"""

import csv
from decimal import Decimal, InvalidOperation
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from catalog_app.models import Movie
from catalog_app.services.movie_record import FIELD_KINDS

COLUMN_ALIASES = {
    "num_critic_for_review": "num_critic_for_reviews",
    "actor_1_name": "actor_one_name",
    "actor_2_name": "actor_two_name",
    "actor_3_name": "actor_three_name",
    "actor_1_facebook_likes": "actor_one_facebook_likes",
    "actor_2_facebook_likes": "actor_two_facebook_likes",
    "actor_3_facebook_likes": "actor_three_facebook_likes",
}


class Command(BaseCommand):
    help = "Load movies from a CSV file (upsert by id)"

    def add_arguments(self, parser):
        parser.add_argument(
            "csv_path",
            type=str,
            help="Path to the CSV file to load",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report what would change without writing to the database",
        )

    def handle(self, *args, **options):
        csv_path = Path(options["csv_path"])
        dry_run = options["dry_run"]

        if not csv_path.exists():
            raise CommandError(f"CSV file not found: {csv_path}")

        with open(csv_path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        created_count = 0
        updated_count = 0
        unchanged_count = 0

        # Unsaved rows a dry run has already seen, so repeated ids compare against them
        pending = {}

        with transaction.atomic():
            for row_number, row in enumerate(rows, 1):
                movie_id, new_values = self._parse_row(row, row_number)
                movie = pending.get(movie_id) or Movie.objects.filter(pk=movie_id).first()

                if movie is None:
                    if dry_run:
                        pending[movie_id] = Movie(id=movie_id, **new_values)
                    else:
                        Movie.objects.create(id=movie_id, **new_values)
                    created_count += 1
                    self.stdout.write(f"  Created: {new_values.get('movie_title') or movie_id}")
                    continue

                changed_fields = self._get_changed_fields(movie, new_values)
                if changed_fields:
                    for field, value in new_values.items():
                        setattr(movie, field, value)
                    if dry_run:
                        pending[movie_id] = movie
                    else:
                        movie.save()
                    updated_count += 1
                    self.stdout.write(f"  Updated: {movie} ({', '.join(changed_fields)})")
                else:
                    unchanged_count += 1

        prefix = "Dry run. Would have created" if dry_run else "Done. Created"
        self.stdout.write(
            self.style.SUCCESS(
                f"\n{prefix}: {created_count}, Updated: {updated_count}, Unchanged: {unchanged_count}"
            )
        )

    def _parse_row(self, row: dict, row_number: int) -> tuple[int, dict]:
        """Convert one CSV row into (id, field values) for the Movie model."""
        values = {}
        for column, raw_value in row.items():
            if column is None:
                continue
            field = COLUMN_ALIASES.get(column.strip(), column.strip())
            if field not in FIELD_KINDS:
                continue
            values[field] = self._parse_value(field, raw_value, row_number)

        movie_id = values.pop("id", None)
        if movie_id is None:
            movie_id = row_number
        return movie_id, values

    def _parse_value(self, field: str, raw_value: str | None, row_number: int):
        # The IMDB export pads titles with non-breaking spaces
        value = (raw_value or "").replace("\xa0", " ").strip()
        if not value:
            return None

        kind = FIELD_KINDS[field]
        try:
            if kind is int:
                return int(Decimal(value))
            if kind is Decimal:
                return Decimal(value).quantize(Decimal("0.1"))
        except (InvalidOperation, ValueError, OverflowError):
            raise CommandError(f"Row {row_number}: invalid value for {field}: '{value}'")
        return value

    def _get_changed_fields(self, movie: Movie, new_values: dict) -> list[str]:
        """Return list of field names that differ between movie and new_values."""
        changed = []
        for field, new_value in new_values.items():
            current_value = getattr(movie, field)
            if current_value != new_value:
                changed.append(field)
        return changed
