"""Domain value objects for IBAN validation.

Value Objects in DDD:
- Immutable (frozen dataclasses)
- No identity (equality based on attributes)
- Describe characteristics, not entities
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .enums import CharClass, CheckDigitMode, ElementCategory, ValidationStatus

# Offsets 0-3 hold the country code and the check digits
BBAN_OFFSET = 4

UNKNOWN_COUNTRY_NAME = "Unknown Country"

SupplementaryCheck = Callable[[str], bool]


@dataclass(frozen=True)
class FieldSpec:
    """One labeled sub-range of the BBAN.

    Offsets are zero-based positions in the *full* IBAN string, so the first
    field of every rule set starts at offset 4. ``label`` is None when the
    published structure does not name the field.
    """

    offset: int
    length: int
    char_class: CharClass
    label: str | None = None

    def __post_init__(self) -> None:
        """Validate field range constraints."""
        if self.offset < BBAN_OFFSET:
            raise ValueError(f"Field offset must be >= {BBAN_OFFSET}, got {self.offset}")
        if self.length <= 0:
            raise ValueError(f"Field length must be positive, got {self.length}")

    @property
    def end(self) -> int:
        """Exclusive end offset of the field."""
        return self.offset + self.length

    def extract(self, iban: str) -> str:
        """Slice this field out of a full IBAN string."""
        return iban[self.offset : self.end]


@dataclass(frozen=True)
class CheckDigitPolicy:
    """How the check digits at offset 2-3 are verified."""

    mode: CheckDigitMode
    fixed_value: int | None = None

    def __post_init__(self) -> None:
        if self.mode is CheckDigitMode.FIXED:
            if self.fixed_value is None or not 0 <= self.fixed_value <= 99:
                raise ValueError(f"Fixed check digits must be 0-99, got {self.fixed_value}")
        elif self.fixed_value is not None:
            raise ValueError(f"fixed_value only applies to fixed policies, got {self.mode}")

    @classmethod
    def mod97(cls) -> "CheckDigitPolicy":
        return cls(CheckDigitMode.MOD97)

    @classmethod
    def fixed(cls, value: int) -> "CheckDigitPolicy":
        return cls(CheckDigitMode.FIXED, value)

    @property
    def expected_digits(self) -> str | None:
        """Zero-padded two-digit form of a fixed value (``7`` -> ``"07"``)."""
        if self.fixed_value is None:
            return None
        return f"{self.fixed_value:02d}"

    def __str__(self) -> str:
        if self.mode is CheckDigitMode.FIXED:
            return f"fixed {self.expected_digits}"
        return str(self.mode)


MOD97 = CheckDigitPolicy.mod97()


@dataclass(frozen=True)
class CountryRule:
    """BBAN rule set for one ISO 3166-1 alpha-2 country code.

    Alias entries carry only ``name``, ``official`` and ``alias_of``; the
    registry materializes them into full rule sets by copying the referenced
    entry's structure. A materialized alias keeps ``alias_of`` so callers can
    tell where its structure came from.

    Attributes:
        name: Display name of the country or territory
        official: False when the territory makes unofficial use of the format
        expected_length: Total IBAN length including country code and check digits
        check_digits: Check-digit policy (mod-97 or a fixed value)
        fields: Ordered fields partitioning the BBAN
        supplementary_checks: Predicates over the raw BBAN string
        alias_of: Country code whose structure this entry reuses
    """

    name: str
    official: bool = True
    expected_length: int | None = None
    check_digits: CheckDigitPolicy | None = None
    fields: tuple[FieldSpec, ...] = ()
    supplementary_checks: tuple[SupplementaryCheck, ...] = ()
    alias_of: str | None = None

    def __post_init__(self) -> None:
        """Validate rule set shape (partitioning is checked by the registry)."""
        if self.alias_of is None:
            if self.expected_length is None or self.check_digits is None or not self.fields:
                raise ValueError(
                    f"Rule set for {self.name} needs expected_length, check_digits and fields"
                )
        elif self.expected_length is None and (self.fields or self.check_digits):
            raise ValueError(f"Alias entry for {self.name} must not define its own structure")

    @property
    def is_alias(self) -> bool:
        """Whether this entry borrows its structure from another country."""
        return self.alias_of is not None

    @property
    def is_materialized(self) -> bool:
        """Whether the structural attributes are populated."""
        return self.expected_length is not None

    @property
    def bban_length(self) -> int | None:
        if self.expected_length is None:
            return None
        return self.expected_length - BBAN_OFFSET

    def materialize(self, base: "CountryRule", alias_of: str) -> "CountryRule":
        """Build a full rule set from ``base``, keeping this entry's identity.

        ``base`` is never modified; a new object is returned.
        """
        return CountryRule(
            name=self.name,
            official=self.official,
            expected_length=base.expected_length,
            check_digits=base.check_digits,
            fields=base.fields,
            supplementary_checks=base.supplementary_checks,
            alias_of=alias_of,
        )


@dataclass(frozen=True)
class DisplayElement:
    """A labeled value for presentation. Carries no validation semantics."""

    label: str
    value: str
    category: ElementCategory

    def to_dict(self) -> dict[str, str]:
        return {"label": self.label, "value": self.value, "category": str(self.category)}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call.

    ``elements`` is populated on ``VALID`` results and on checksum failures;
    every other outcome leaves it empty.
    """

    status: ValidationStatus
    country_code: str
    country_name: str
    message: str
    elements: tuple[DisplayElement, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.status.is_valid

    def elements_in(self, category: ElementCategory) -> list[DisplayElement]:
        """Elements of one category, in their original order."""
        return [element for element in self.elements if element.category is category]

    def get_element(self, label: str) -> DisplayElement | None:
        """First element carrying ``label``, or None."""
        for element in self.elements:
            if element.label == label:
                return element
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": str(self.status),
            "country_code": self.country_code,
            "country_name": self.country_name,
            "message": self.message,
            "elements": [element.to_dict() for element in self.elements],
        }
