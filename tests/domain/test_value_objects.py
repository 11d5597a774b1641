"""Tests for IBAN domain value objects.

Tests cover:
- FieldSpec range validation and extraction
- CheckDigitPolicy construction and zero padding
- CountryRule shape validation and alias materialization
- ValidationResult helpers and serialization
"""

from dataclasses import FrozenInstanceError

import pytest

from openiban.domain.enums import CharClass, CheckDigitMode, ElementCategory, ValidationStatus
from openiban.domain.value_objects import (
    MOD97,
    CheckDigitPolicy,
    CountryRule,
    DisplayElement,
    FieldSpec,
    ValidationResult,
)

pytestmark = pytest.mark.unit


# ============================================================================
# FIELD SPEC TESTS
# ============================================================================


class TestFieldSpec:
    """Test suite for FieldSpec."""

    def test_extract_uses_full_iban_offsets(self):
        spec = FieldSpec(4, 4, CharClass.ALPHABETIC, "BIC bank code")

        assert spec.end == 8
        assert spec.extract("GB82WEST12345698765432") == "WEST"

    def test_offset_inside_country_prefix_rejected(self):
        with pytest.raises(ValueError, match="offset must be >= 4"):
            FieldSpec(2, 4, CharClass.NUMERIC)

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError, match="length must be positive"):
            FieldSpec(4, 0, CharClass.NUMERIC)

    def test_label_defaults_to_none(self):
        assert FieldSpec(4, 22, CharClass.NUMERIC).label is None

    def test_field_spec_is_frozen(self):
        spec = FieldSpec(4, 4, CharClass.NUMERIC)

        with pytest.raises(FrozenInstanceError):
            spec.offset = 5  # type: ignore


# ============================================================================
# CHECK DIGIT POLICY TESTS
# ============================================================================


class TestCheckDigitPolicy:
    """Test suite for CheckDigitPolicy."""

    def test_mod97_policy(self):
        assert MOD97.mode is CheckDigitMode.MOD97
        assert MOD97.fixed_value is None
        assert MOD97.expected_digits is None
        assert str(MOD97) == "mod97"

    def test_fixed_value_is_zero_padded(self):
        policy = CheckDigitPolicy.fixed(7)

        assert policy.mode is CheckDigitMode.FIXED
        assert policy.expected_digits == "07"
        assert str(policy) == "fixed 07"

    @pytest.mark.parametrize("value", [-1, 100, None])
    def test_fixed_value_out_of_range(self, value):
        with pytest.raises(ValueError, match="Fixed check digits"):
            CheckDigitPolicy(CheckDigitMode.FIXED, value)

    def test_fixed_value_on_mod97_rejected(self):
        with pytest.raises(ValueError, match="only applies to fixed"):
            CheckDigitPolicy(CheckDigitMode.MOD97, 39)


# ============================================================================
# COUNTRY RULE TESTS
# ============================================================================


class TestCountryRule:
    """Test suite for CountryRule."""

    @pytest.fixture
    def denmark(self) -> CountryRule:
        return CountryRule(
            "Denmark",
            official=True,
            expected_length=18,
            check_digits=MOD97,
            fields=(
                FieldSpec(4, 4, CharClass.NUMERIC, "National bank code"),
                FieldSpec(8, 9, CharClass.NUMERIC, "Account number"),
                FieldSpec(17, 1, CharClass.NUMERIC, "National check digit"),
            ),
        )

    def test_concrete_rule_requires_structure(self):
        with pytest.raises(ValueError, match="needs expected_length"):
            CountryRule("Nowhere", expected_length=18)

    def test_alias_entry_cannot_carry_fields(self):
        with pytest.raises(ValueError, match="must not define its own structure"):
            CountryRule(
                "Faroe Islands",
                alias_of="DK",
                fields=(FieldSpec(4, 14, CharClass.NUMERIC),),
            )

    def test_alias_entry_is_not_materialized(self):
        alias = CountryRule("Faroe Islands", official=True, alias_of="DK")

        assert alias.is_alias
        assert not alias.is_materialized
        assert alias.bban_length is None

    def test_materialize_copies_structure(self, denmark):
        alias = CountryRule("Greenland", official=True, alias_of="DK")

        resolved = alias.materialize(denmark, alias_of="DK")

        assert resolved.name == "Greenland"
        assert resolved.alias_of == "DK"
        assert resolved.expected_length == 18
        assert resolved.fields == denmark.fields
        assert resolved.check_digits == denmark.check_digits

    def test_materialize_leaves_base_untouched(self, denmark):
        CountryRule("Somewhere", official=False, alias_of="DK").materialize(denmark, "DK")

        assert denmark.name == "Denmark"
        assert denmark.official is True
        assert denmark.alias_of is None

    def test_bban_length(self, denmark):
        assert denmark.bban_length == 14


# ============================================================================
# VALIDATION RESULT TESTS
# ============================================================================


class TestValidationResult:
    """Test suite for ValidationResult."""

    @pytest.fixture
    def result(self) -> ValidationResult:
        return ValidationResult(
            status=ValidationStatus.VALID,
            country_code="GB",
            country_name="United Kingdom",
            message="Valid IBAN",
            elements=(
                DisplayElement("BBAN", "WEST12345698765432", ElementCategory.IBAN),
                DisplayElement("Country", "United Kingdom", ElementCategory.COUNTRY),
                DisplayElement("BIC bank code", "WEST", ElementCategory.ELEMENT),
            ),
        )

    def test_is_valid(self, result):
        assert result.is_valid

    def test_elements_in_category(self, result):
        labels = [e.label for e in result.elements_in(ElementCategory.ELEMENT)]

        assert labels == ["BIC bank code"]

    def test_get_element(self, result):
        assert result.get_element("BIC bank code").value == "WEST"
        assert result.get_element("Sort code") is None

    def test_to_dict(self, result):
        data = result.to_dict()

        assert data["status"] == "valid"
        assert data["country_code"] == "GB"
        assert data["elements"][2] == {
            "label": "BIC bank code",
            "value": "WEST",
            "category": "element",
        }

    def test_elements_default_empty(self):
        result = ValidationResult(
            ValidationStatus.INCOMPLETE, "GB", "United Kingdom", "IBAN Incomplete"
        )

        assert result.elements == ()
        assert not result.is_valid
