"""Create the Movie table."""

import django.db.models.expressions
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Movie",
            fields=[
                ("id", models.BigIntegerField(help_text="Stable record identifier", primary_key=True, serialize=False)),
                ("color", models.CharField(blank=True, max_length=50, null=True)),
                ("director_name", models.CharField(blank=True, max_length=200, null=True)),
                ("num_critic_for_reviews", models.CharField(blank=True, max_length=50, null=True)),
                ("duration", models.IntegerField(blank=True, help_text="Runtime in minutes", null=True)),
                ("director_facebook_likes", models.IntegerField(blank=True, null=True)),
                ("actor_three_facebook_likes", models.IntegerField(blank=True, null=True)),
                ("actor_two_name", models.CharField(blank=True, max_length=200, null=True)),
                ("actor_one_facebook_likes", models.IntegerField(blank=True, null=True)),
                ("gross", models.IntegerField(blank=True, help_text="Box office gross in dollars", null=True)),
                (
                    "genres",
                    models.CharField(
                        blank=True,
                        help_text="Pipe-separated genre names (e.g., 'Action|Adventure')",
                        max_length=300,
                        null=True,
                    ),
                ),
                ("actor_one_name", models.CharField(blank=True, max_length=200, null=True)),
                (
                    "movie_title",
                    models.CharField(
                        blank=True,
                        help_text="Movie title, used as the listing sort key",
                        max_length=300,
                        null=True,
                    ),
                ),
                ("num_voted_users", models.IntegerField(blank=True, null=True)),
                ("cast_total_facebook_likes", models.IntegerField(blank=True, null=True)),
                ("actor_three_name", models.CharField(blank=True, max_length=200, null=True)),
                ("facenumber_in_poster", models.IntegerField(blank=True, null=True)),
                ("plot_keywords", models.CharField(blank=True, max_length=500, null=True)),
                ("movie_imdb_link", models.CharField(blank=True, max_length=500, null=True)),
                ("num_user_for_reviews", models.IntegerField(blank=True, null=True)),
                ("language", models.CharField(blank=True, max_length=100, null=True)),
                ("country", models.CharField(blank=True, max_length=100, null=True)),
                ("content_rating", models.CharField(blank=True, max_length=20, null=True)),
                (
                    "budget",
                    models.BigIntegerField(blank=True, help_text="Production budget in the source currency", null=True),
                ),
                ("title_year", models.IntegerField(blank=True, help_text="Release year", null=True)),
                ("actor_two_facebook_likes", models.IntegerField(blank=True, null=True)),
                (
                    "imdb_score",
                    models.DecimalField(
                        blank=True,
                        decimal_places=1,
                        help_text="IMDB user rating (0.0-10.0)",
                        max_digits=3,
                        null=True,
                    ),
                ),
                ("aspect_ratio", models.CharField(blank=True, max_length=20, null=True)),
                ("movie_facebook_likes", models.IntegerField(blank=True, null=True)),
            ],
            options={
                "ordering": [
                    django.db.models.expressions.OrderBy(
                        django.db.models.expressions.F("movie_title"),
                        nulls_last=True,
                    ),
                    "id",
                ],
                "indexes": [
                    models.Index(fields=["movie_title", "id"], name="movie_title_id_idx"),
                ],
            },
        ),
    ]
