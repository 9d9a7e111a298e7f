"""
Movie model for the browsable movie catalog.
"""

from __future__ import annotations

from django.db import models


class Movie(models.Model):
    """
    A single movie record.

    Records are loaded by operators (see the load_movies command) and are only
    read by the web application. Every field except the primary key is optional.
    """

    id = models.BigIntegerField(
        primary_key=True,
        help_text="Stable record identifier",
    )
    color = models.CharField(max_length=50, null=True, blank=True)
    director_name = models.CharField(max_length=200, null=True, blank=True)
    num_critic_for_reviews = models.CharField(max_length=50, null=True, blank=True)
    duration = models.IntegerField(
        null=True,
        blank=True,
        help_text="Runtime in minutes",
    )
    director_facebook_likes = models.IntegerField(null=True, blank=True)
    actor_three_facebook_likes = models.IntegerField(null=True, blank=True)
    actor_two_name = models.CharField(max_length=200, null=True, blank=True)
    actor_one_facebook_likes = models.IntegerField(null=True, blank=True)
    gross = models.IntegerField(
        null=True,
        blank=True,
        help_text="Box office gross in dollars",
    )
    genres = models.CharField(
        max_length=300,
        null=True,
        blank=True,
        help_text="Pipe-separated genre names (e.g., 'Action|Adventure')",
    )
    actor_one_name = models.CharField(max_length=200, null=True, blank=True)
    movie_title = models.CharField(
        max_length=300,
        null=True,
        blank=True,
        help_text="Movie title, used as the listing sort key",
    )
    num_voted_users = models.IntegerField(null=True, blank=True)
    cast_total_facebook_likes = models.IntegerField(null=True, blank=True)
    actor_three_name = models.CharField(max_length=200, null=True, blank=True)
    facenumber_in_poster = models.IntegerField(null=True, blank=True)
    plot_keywords = models.CharField(max_length=500, null=True, blank=True)
    movie_imdb_link = models.CharField(max_length=500, null=True, blank=True)
    num_user_for_reviews = models.IntegerField(null=True, blank=True)
    language = models.CharField(max_length=100, null=True, blank=True)
    country = models.CharField(max_length=100, null=True, blank=True)
    content_rating = models.CharField(max_length=20, null=True, blank=True)
    budget = models.BigIntegerField(
        null=True,
        blank=True,
        help_text="Production budget in the source currency",
    )
    title_year = models.IntegerField(
        null=True,
        blank=True,
        help_text="Release year",
    )
    actor_two_facebook_likes = models.IntegerField(null=True, blank=True)
    imdb_score = models.DecimalField(
        max_digits=3,
        decimal_places=1,
        null=True,
        blank=True,
        help_text="IMDB user rating (0.0-10.0)",
    )
    aspect_ratio = models.CharField(max_length=20, null=True, blank=True)
    movie_facebook_likes = models.IntegerField(null=True, blank=True)

    class Meta:
        ordering = [models.F("movie_title").asc(nulls_last=True), "id"]
        indexes = [
            models.Index(fields=["movie_title", "id"], name="movie_title_id_idx"),
        ]

    def __str__(self):
        title = self.movie_title or f"Movie #{self.pk}"
        if self.title_year:
            return f"{title} ({self.title_year})"
        return title
