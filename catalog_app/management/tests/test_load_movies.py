"""
Tests for the load_movies management command.
"""

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from catalog_app.models import Movie

IMDB_HEADER = (
    "color,director_name,num_critic_for_review,duration,director_facebook_likes,"
    "actor_3_facebook_likes,actor_2_name,actor_1_facebook_likes,gross,genres,actor_1_name,"
    "movie_title,num_voted_users,cast_total_facebook_likes,actor_3_name,facenumber_in_poster,"
    "plot_keywords,movie_imdb_link,num_user_for_reviews,language,country,content_rating,budget,"
    "title_year,actor_2_facebook_likes,imdb_score,aspect_ratio,movie_facebook_likes"
)

AVATAR_ROW = (
    "Color,James Cameron,723,178,0,855,Joel David Moore,1000,760505847,Action|Adventure|Fantasy|Sci-Fi,"
    "CCH Pounder,Avatar ,886204,4834,Wes Studi,0,avatar|future|marine|native|paraplegic,"
    "http://www.imdb.com/title/tt0499549/?ref_=fn_tt_tt_1,3054,English,USA,PG-13,237000000,2009,936,7.9,1.78,33000"
)

SPECTRE_ROW = (
    "Color,Sam Mendes,602,148,0,161,Rory Kinnear,11000,200074175,Action|Adventure|Thriller,"
    "Christoph Waltz,Spectre ,275868,11700,Stephanie Sigman,1,bomb|espionage|sequel|spy|terrorist,"
    "http://www.imdb.com/title/tt2379713/?ref_=fn_tt_tt_1,994,English,UK,PG-13,245000000,2015,393,6.8,2.35,85000"
)


@pytest.fixture
def write_csv(tmp_path):
    def _write_csv(*lines):
        path = tmp_path / "movies.csv"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write_csv


def _load(path, *args):
    out = StringIO()
    call_command("load_movies", str(path), *args, stdout=out)
    return out.getvalue()


class TestLoadMovies:
    @pytest.mark.django_db
    def test_loads_imdb_export_and_numbers_rows(self, write_csv):
        path = write_csv(IMDB_HEADER, AVATAR_ROW, SPECTRE_ROW)

        output = _load(path)

        assert "Created: 2" in output
        avatar = Movie.objects.get(pk=1)
        assert avatar.movie_title == "Avatar"
        assert avatar.actor_one_name == "CCH Pounder"
        assert avatar.actor_three_facebook_likes == 855
        assert avatar.num_critic_for_reviews == "723"
        assert avatar.budget == 237000000
        assert avatar.imdb_score == Decimal("7.9")
        assert Movie.objects.get(pk=2).movie_title == "Spectre"

    @pytest.mark.django_db
    def test_empty_cells_are_stored_as_null(self, write_csv):
        path = write_csv("id,movie_title,gross,imdb_score", "10,Primer,,")

        _load(path)

        movie = Movie.objects.get(pk=10)
        assert movie.movie_title == "Primer"
        assert movie.gross is None
        assert movie.imdb_score is None

    @pytest.mark.django_db
    def test_reload_updates_changed_rows_and_skips_unchanged(self, write_csv):
        _load(write_csv("id,movie_title,imdb_score", "1,Heat,8.2", "2,Ronin,7.2"))

        output = _load(write_csv("id,movie_title,imdb_score", "1,Heat,8.3", "2,Ronin,7.2"))

        assert "Created: 0, Updated: 1, Unchanged: 1" in output
        assert Movie.objects.get(pk=1).imdb_score == Decimal("8.3")

    @pytest.mark.django_db
    def test_dry_run_writes_nothing(self, write_csv):
        output = _load(write_csv("id,movie_title", "1,Heat"), "--dry-run")

        assert "Dry run" in output
        assert Movie.objects.count() == 0

    @pytest.mark.django_db
    def test_invalid_number_is_reported_with_row(self, write_csv):
        path = write_csv("id,movie_title,duration", "1,Heat,170", "2,Ronin,long")

        with pytest.raises(CommandError, match="Row 2"):
            _load(path)

        assert Movie.objects.count() == 0

    def test_missing_file_is_an_error(self, tmp_path):
        with pytest.raises(CommandError, match="not found"):
            _load(tmp_path / "missing.csv")

    @pytest.mark.django_db
    def test_dry_run_counts_repeated_id_once_as_created(self, write_csv):
        path = write_csv("id,movie_title", "1,Heat", "1,Heat")

        output = _load(path, "--dry-run")

        assert "Would have created: 1, Updated: 0, Unchanged: 1" in output
        assert Movie.objects.count() == 0

    @pytest.mark.django_db
    def test_dry_run_matches_real_run_counts_for_repeated_ids(self, write_csv):
        path = write_csv("id,movie_title,imdb_score", "1,Heat,8.2", "1,Heat,8.3", "2,Ronin,7.2", "1,Heat,8.3")

        dry_output = _load(path, "--dry-run")
        real_output = _load(path)

        assert "Would have created: 2, Updated: 1, Unchanged: 1" in dry_output
        assert "Done. Created: 2, Updated: 1, Unchanged: 1" in real_output
        assert Movie.objects.get(pk=1).imdb_score == Decimal("8.3")
