"""
Unit tests for domain validators.
"""

import pytest

from flashcards.domain_core import ValidationError, is_reviewable, validate_deck_name
from flashcards.domain_core.entities import Card
from flashcards.domain_core.validators import CardValidators, DeckValidators


class TestDeckValidators:
    def test_validate_deck_name_trims(self):
        assert validate_deck_name("  Bio  ") == "Bio"

    def test_validate_deck_name_keeps_inner_spaces(self):
        assert DeckValidators.validate_deck_name("Cell biology") == "Cell biology"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_validate_deck_name_blank_raises_error(self, name):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_deck_name(name)

    def test_validate_deck_name_none_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_deck_name(None)
        assert exc_info.value.field == "name"

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_deck_name("")


class TestCardValidators:
    def _card(self, front):
        return Card(deck_id=1, front_image=front, created_at=0, due_at=0)

    def test_is_reviewable_with_front(self):
        assert is_reviewable(self._card(b"\xff\xd8data")) is True

    @pytest.mark.parametrize("front", [None, b""])
    def test_is_reviewable_without_front(self, front):
        assert is_reviewable(self._card(front)) is False

    def test_validate_front_image_returns_bytes(self):
        assert CardValidators.validate_front_image(bytearray(b"abc")) == b"abc"

    @pytest.mark.parametrize("image", [None, b"", "not-bytes"])
    def test_validate_front_image_rejects_missing_or_wrong_type(self, image):
        with pytest.raises(ValidationError) as exc_info:
            CardValidators.validate_front_image(image)
        assert exc_info.value.field == "front_image"

    def test_validate_back_image_allows_none(self):
        assert CardValidators.validate_back_image(None) is None

    def test_validate_back_image_rejects_empty(self):
        with pytest.raises(ValidationError, match="back image"):
            CardValidators.validate_back_image(b"")

    @pytest.mark.parametrize("days", [1, 2, 180, 365])
    def test_validate_interval_days_in_range(self, days):
        assert CardValidators.validate_interval_days(days) == days

    @pytest.mark.parametrize("days", [0, -1, 366, 1.5, True])
    def test_validate_interval_days_out_of_range(self, days):
        with pytest.raises(ValidationError):
            CardValidators.validate_interval_days(days)
