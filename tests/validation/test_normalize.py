"""Tests for input normalization."""

import pytest

from openiban.utils.config import reload_settings
from openiban.validation.normalize import is_ready, normalize, prepare

pytestmark = pytest.mark.unit


class TestNormalize:
    """Whitespace removal and uppercasing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("GB82 WEST 1234 5698 7654 32", "GB82WEST12345698765432"),
            ("gb82west12345698765432", "GB82WEST12345698765432"),
            ("  de89\t3704\n0044 0532 0130 00  ", "DE89370400440532013000"),
            ("", ""),
        ],
    )
    def test_normalize(self, text, expected):
        assert normalize(text) == expected

    def test_punctuation_is_kept(self):
        assert normalize("gb82-west") == "GB82-WEST"


class TestIsReady:
    """Minimum input length gate."""

    def test_default_threshold(self):
        assert not is_ready("GB82W")
        assert is_ready("GB82WE")

    def test_explicit_threshold(self):
        assert is_ready("GB", min_length=1)
        assert not is_ready("GB", min_length=2)

    def test_threshold_from_settings(self, monkeypatch):
        monkeypatch.setenv("OPENIBAN_MIN_INPUT_LENGTH", "10")
        reload_settings()

        assert not is_ready("GB82WEST12")
        assert is_ready("GB82WEST123")


class TestPrepare:
    """Normalize and gate in one step."""

    def test_prepare_returns_normalized(self):
        assert prepare("gb82 west 1234 5698 7654 32") == "GB82WEST12345698765432"

    def test_prepare_too_short(self):
        assert prepare(" gb 82 ") is None
