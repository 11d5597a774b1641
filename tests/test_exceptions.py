"""Tests for the OpenIBAN exception hierarchy."""

import pytest

from openiban.exceptions import (
    ConfigurationError,
    CountryNotFoundError,
    InputError,
    OpenIBANError,
    RegistryError,
    wrap_exception,
)

pytestmark = pytest.mark.unit


class TestOpenIBANError:
    def test_str_without_context(self):
        assert str(OpenIBANError("Something failed")) == "Something failed"

    def test_str_with_context_and_cause(self):
        error = OpenIBANError(
            "Something failed",
            context={"source": "ibans.txt"},
            original_error=OSError("missing"),
        )

        assert str(error) == "Something failed (source=ibans.txt) [caused by: OSError]"

    def test_repr(self):
        error = OpenIBANError("Something failed", context={"a": 1})

        assert repr(error) == "OpenIBANError(message='Something failed', context={'a': 1})"


class TestSubclasses:
    @pytest.mark.parametrize(
        "error",
        [
            RegistryError("x"),
            CountryNotFoundError("x"),
            ConfigurationError("x"),
            InputError("x"),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, OpenIBANError)

    def test_registry_error_problems(self):
        error = RegistryError("Bad table", country_code="XX", problems=["gap", "overlap"])

        assert error.problems == ["gap", "overlap"]
        assert error.context == {
            "country_code": "XX",
            "problem_count": 2,
            "first_problem": "gap",
        }

    def test_country_not_found_keeps_code(self):
        error = CountryNotFoundError("Unknown", country_code="ZZ")

        assert error.country_code == "ZZ"
        assert error.context == {"country_code": "ZZ"}

    def test_configuration_error_context(self):
        error = ConfigurationError("Bad", setting="output_format", expected="rich or json")

        assert error.context == {"setting": "output_format", "expected": "rich or json"}


class TestWrapException:
    def test_wrap_keeps_original(self):
        original = OSError("No such file")

        wrapped = wrap_exception(original, "Cannot read", exception_class=InputError, source="x")

        assert isinstance(wrapped, InputError)
        assert wrapped.original_error is original
        assert wrapped.context == {"source": "x"}

    def test_default_class(self):
        assert type(wrap_exception(ValueError("x"), "Wrapped")) is OpenIBANError
