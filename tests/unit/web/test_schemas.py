"""Tests des schemas pydantic de l'API."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from cinecatalog.web.schemas import MovieCreate, MovieUpdate, parse_release_date


class TestParseReleaseDate:
    @pytest.mark.parametrize(
        "value",
        [
            "1999-03-31",
            "1999-03-31T00:00:00",
            "1999-03-31T00:00:00.000Z",
            datetime(1999, 3, 31, 20, 15),
            date(1999, 3, 31),
        ],
    )
    def test_date_like_inputs(self, value):
        assert parse_release_date(value) == date(1999, 3, 31)

    def test_invalid_string_left_to_validation(self):
        assert parse_release_date("demain") == "demain"


class TestMovieSchemas:
    def test_create_parses_datetime_string(self):
        body = MovieCreate(
            title="Matrix",
            genre_id=1,
            language_id=1,
            oscar_count=4,
            release_date="1999-03-31T12:00:00Z",
            duration=136,
        )

        assert body.release_date == date(1999, 3, 31)

    def test_create_rejects_negative_oscar_count(self):
        with pytest.raises(ValidationError):
            MovieCreate(
                title="Matrix",
                genre_id=1,
                language_id=1,
                oscar_count=-1,
                release_date="1999-03-31",
                duration=136,
            )

    def test_update_tracks_supplied_fields(self):
        body = MovieUpdate(duration=150)

        assert body.model_dump(exclude_unset=True) == {"duration": 150}

    def test_update_invalid_date(self):
        with pytest.raises(ValidationError):
            MovieUpdate(release_date="pas une date")

    def test_update_empty_date_means_absent(self):
        body = MovieUpdate(release_date="", duration=120)

        assert body.release_date is None
        assert body.duration == 120


class TestReleaseDateTimezone:
    def test_offset_datetime_converted_to_utc_day(self):
        assert parse_release_date("1999-03-31T23:00:00-03:00") == date(1999, 4, 1)

    def test_positive_offset_can_move_back_one_day(self):
        assert parse_release_date("1999-04-01T01:00:00+02:00") == date(1999, 3, 31)

    def test_naive_datetime_keeps_its_day(self):
        assert parse_release_date("1999-03-31T23:00:00") == date(1999, 3, 31)
