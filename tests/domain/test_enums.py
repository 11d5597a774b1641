"""Tests for IBAN domain enums."""

import pytest

from openiban.domain.enums import CharClass, ElementCategory, ValidationStatus

pytestmark = pytest.mark.unit


class TestCharClass:
    """Test character class matching."""

    @pytest.mark.parametrize(
        "char_class,text,expected",
        [
            (CharClass.NUMERIC, "0123456789", True),
            (CharClass.NUMERIC, "12A4", False),
            (CharClass.ALPHABETIC, "WEST", True),
            (CharClass.ALPHABETIC, "WES1", False),
            (CharClass.ALPHABETIC, "west", False),
            (CharClass.ALPHANUMERIC, "13M02606", True),
            (CharClass.ALPHANUMERIC, "13m02606", False),
            (CharClass.ALPHANUMERIC, "13-02606", False),
            (CharClass.ZERO_FILLED, "000", True),
            (CharClass.ZERO_FILLED, "001", False),
        ],
    )
    def test_matches(self, char_class, text, expected):
        assert char_class.matches(text) is expected

    @pytest.mark.parametrize("char_class", list(CharClass))
    def test_empty_string_never_matches(self, char_class):
        assert char_class.matches("") is False

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digits are str.isdigit() but not 0-9
        assert CharClass.NUMERIC.matches("١٢٣") is False

    def test_non_ascii_letters_rejected(self):
        assert CharClass.ALPHABETIC.matches("ÄÖÜ") is False


class TestValidationStatus:
    """Test ValidationStatus helpers."""

    def test_only_valid_is_valid(self):
        assert ValidationStatus.VALID.is_valid
        assert not ValidationStatus.INVALID.is_valid
        assert not ValidationStatus.INCOMPLETE.is_valid
        assert not ValidationStatus.UNKNOWN_COUNTRY.is_valid

    def test_str_is_value(self):
        assert str(ValidationStatus.UNKNOWN_COUNTRY) == "unknown_country"
        assert str(ElementCategory.ELEMENT) == "element"
