"""Domain enums for IBAN validation."""

from enum import Enum


class CharClass(str, Enum):
    """Character class a BBAN field must conform to."""

    NUMERIC = "numeric"  # digits 0-9
    ALPHABETIC = "alphabetic"  # letters A-Z
    ALPHANUMERIC = "alphanumeric"  # A-Z or 0-9
    ZERO_FILLED = "zero_filled"  # the digit 0 only

    def __str__(self) -> str:
        return self.value

    def matches(self, text: str) -> bool:
        """Whether every character of ``text`` belongs to this class.

        An empty string never matches.
        """
        if not text:
            return False
        if self is CharClass.NUMERIC:
            return all("0" <= ch <= "9" for ch in text)
        if self is CharClass.ALPHABETIC:
            return all("A" <= ch <= "Z" for ch in text)
        if self is CharClass.ALPHANUMERIC:
            return all("0" <= ch <= "9" or "A" <= ch <= "Z" for ch in text)
        return all(ch == "0" for ch in text)


class CheckDigitMode(str, Enum):
    """How the two IBAN check digits are verified."""

    MOD97 = "mod97"  # ISO 7064 mod-97 relation
    FIXED = "fixed"  # literal two-digit value
    NONE = "none"

    def __str__(self) -> str:
        return self.value


class ValidationStatus(str, Enum):
    """Outcome of a validation call.

    ``INCOMPLETE`` is distinct from ``INVALID``: the input may still be
    mid-typing.
    """

    VALID = "valid"
    INVALID = "invalid"
    INCOMPLETE = "incomplete"
    UNKNOWN_COUNTRY = "unknown_country"

    def __str__(self) -> str:
        return self.value

    @property
    def is_valid(self) -> bool:
        """Whether the IBAN passed every check."""
        return self is ValidationStatus.VALID


class ElementCategory(str, Enum):
    """Presentation category of a display element."""

    IBAN = "iban"
    COUNTRY = "country"
    ELEMENT = "element"

    def __str__(self) -> str:
        return self.value
