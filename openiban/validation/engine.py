"""IBAN validation engine.

``validate`` applies a country's rule set to a normalized candidate string
and returns a ``ValidationResult``; it never raises for string input.

Checks run in a fixed order and the first failure decides the result:

1. Country code (first two characters) must be in the registry
2. Length must equal the country's expected length (shorter is *incomplete*)
3. Check digits must be two ASCII digits
4. Fixed check-digit countries must carry their fixed value
5. Every BBAN field must match its character class
6. Supplementary BBAN checks must pass
7. Mod-97 countries must satisfy the checksum

Display elements are assembled from step 5 onwards, so a checksum failure
still reports the decomposed IBAN; earlier failures report none.

Usage:
    >>> from openiban import validate
    >>> result = validate("GB82WEST12345698765432")
    >>> result.status, result.country_name, result.message
    (<ValidationStatus.VALID: 'valid'>, 'United Kingdom', 'Valid IBAN')
"""

from ..domain.enums import CharClass, CheckDigitMode, ElementCategory, ValidationStatus
from ..domain.value_objects import (
    BBAN_OFFSET,
    UNKNOWN_COUNTRY_NAME,
    CountryRule,
    DisplayElement,
    ValidationResult,
)
from ..registry import RuleRegistry, get_registry
from ..utils.logging import get_logger
from .checksum import mod97
from .formatting import human_readable

logger = get_logger(__name__)

MESSAGE_VALID = "Valid IBAN"
MESSAGE_INCOMPLETE = "IBAN Incomplete"
MESSAGE_CHECK_DIGITS = "Check digits invalid"


def validate(raw: str, registry: RuleRegistry | None = None) -> ValidationResult:
    """Validate a normalized (uppercase, whitespace-free) IBAN candidate.

    Args:
        raw: Candidate string; any length is accepted
        registry: Rule registry to validate against (defaults to the
            process-wide registry)

    Returns:
        ValidationResult tagged valid, invalid, incomplete or unknown country

    Raises:
        TypeError: If ``raw`` is not a string
    """
    if not isinstance(raw, str):
        raise TypeError(f"IBAN candidate must be a str, got {type(raw).__name__}")
    if registry is None:
        registry = get_registry()

    result = _validate(raw, registry)
    logger.debug(
        "iban_validated",
        country_code=result.country_code,
        status=str(result.status),
        elements=len(result.elements),
    )
    return result


def _validate(raw: str, registry: RuleRegistry) -> ValidationResult:
    country_code = raw[:2]
    rule = registry.lookup(country_code)
    if rule is None:
        return ValidationResult(
            status=ValidationStatus.UNKNOWN_COUNTRY,
            country_code=country_code,
            country_name=UNKNOWN_COUNTRY_NAME,
            message=f"We are unaware of IBANs beginning {country_code}",
        )

    def invalid(message: str, elements: list[DisplayElement] | None = None) -> ValidationResult:
        return ValidationResult(
            status=ValidationStatus.INVALID,
            country_code=country_code,
            country_name=rule.name,
            message=message,
            elements=tuple(elements or ()),
        )

    expected_length = rule.expected_length
    if len(raw) < expected_length:
        return ValidationResult(
            status=ValidationStatus.INCOMPLETE,
            country_code=country_code,
            country_name=rule.name,
            message=MESSAGE_INCOMPLETE,
        )
    if len(raw) > expected_length:
        return invalid(f"{country_code} IBAN Too Long")

    check = raw[2:BBAN_OFFSET]
    if not CharClass.NUMERIC.matches(check):
        return invalid(MESSAGE_CHECK_DIGITS)

    policy = rule.check_digits
    if policy.mode is CheckDigitMode.FIXED and check != policy.expected_digits:
        return invalid(MESSAGE_CHECK_DIGITS)

    bban = raw[BBAN_OFFSET:]
    elements = _base_elements(raw, bban, country_code, rule)

    structure_ok = True
    for spec in rule.fields:
        text = spec.extract(raw)
        elements.append(
            DisplayElement(_field_label(spec.label, text, bban), text, ElementCategory.ELEMENT)
        )
        if not spec.char_class.matches(text):
            structure_ok = False
    if not structure_ok:
        return invalid(f"BBAN structure invalid for {rule.name}")

    if not all(check_bban(bban) for check_bban in rule.supplementary_checks):
        return invalid(f"{rule.name} BBAN check digits invalid")

    if policy.mode is CheckDigitMode.MOD97 and mod97(raw) != 1:
        return invalid(MESSAGE_CHECK_DIGITS, elements)

    return ValidationResult(
        status=ValidationStatus.VALID,
        country_code=country_code,
        country_name=rule.name,
        message=MESSAGE_VALID,
        elements=tuple(elements),
    )


def _base_elements(
    raw: str, bban: str, country_code: str, rule: CountryRule
) -> list[DisplayElement]:
    """Whole-IBAN and country elements shown ahead of the BBAN fields."""
    elements = [
        DisplayElement("Machine-readable IBAN", raw, ElementCategory.IBAN),
        DisplayElement(
            "Human-readable IBAN", human_readable(raw, country_code), ElementCategory.IBAN
        ),
        DisplayElement("BBAN", bban, ElementCategory.IBAN),
        DisplayElement("Country Code", country_code, ElementCategory.COUNTRY),
        DisplayElement("Country", rule.name, ElementCategory.COUNTRY),
    ]
    if not rule.official:
        elements.append(
            DisplayElement(
                "Note",
                f"{rule.name} makes unofficial use of the IBAN standard",
                ElementCategory.COUNTRY,
            )
        )
    return elements


def _field_label(label: str | None, text: str, bban: str) -> str:
    if label is not None:
        return label
    if text == bban:
        # A single unnamed field spanning the whole BBAN
        return "BBAN"
    return "Unnamed element"
