"""Unit tests for the required-field rules."""

from datetime import date, time

import pytest

from src.music_api.core.errors import MusicValidationError
from src.music_api.core.services.music.validation import (
    RULES,
    first_violation,
    validate_music,
)
from src.music_api.entities.service.music import Music


def _valid_music(**overrides) -> Music:
    fields = {
        "title": "Title",
        "artist": "Artist",
        "release_date": date(2020, 1, 1),
        "duration": time(0, 6, 44),
    }
    fields.update(overrides)
    return Music(**fields)


class TestValidateMusic:
    """Test validate_music and its rule ordering."""

    def test_valid_music_passes(self):
        validate_music(_valid_music())

    def test_optional_fields_are_not_required(self):
        music = _valid_music()
        assert music.number_views == 0
        assert music.feat is False
        validate_music(music)

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"title": ""}, "Title is required!"),
            ({"title": None}, "Title is required!"),
            ({"title": "   "}, "Title is required!"),
            ({"artist": ""}, "Artist is required!"),
            ({"artist": None}, "Artist is required!"),
            ({"release_date": None}, "Release Date is required!"),
            ({"duration": None}, "Duration is required!"),
        ],
    )
    def test_missing_field_message(self, overrides, message):
        with pytest.raises(MusicValidationError) as exc_info:
            validate_music(_valid_music(**overrides))

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_title_reported_before_artist(self):
        """Only the first failing rule is reported."""
        with pytest.raises(MusicValidationError, match="Title is required!"):
            validate_music(_valid_music(title="", artist=""))

    def test_everything_missing_reports_title(self):
        with pytest.raises(MusicValidationError) as exc_info:
            validate_music(Music())

        assert exc_info.value.message == "Title is required!"
        assert exc_info.value.field == "title"

    def test_release_date_reported_before_duration(self):
        with pytest.raises(MusicValidationError, match="Release Date is required!"):
            validate_music(_valid_music(release_date=None, duration=None))


class TestRules:
    """Test the rule table itself."""

    def test_rule_order(self):
        assert [rule.field for rule in RULES] == [
            "title",
            "artist",
            "release_date",
            "duration",
        ]

    def test_first_violation_none_for_valid_music(self):
        assert first_violation(_valid_music()) is None

    def test_first_violation_returns_rule(self):
        rule = first_violation(_valid_music(duration=None))
        assert rule is not None
        assert rule.field == "duration"
        assert rule.message == "Duration is required!"
