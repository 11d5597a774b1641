"""Supplementary BBAN checks.

Predicates over the raw BBAN (the IBAN minus its first four characters) for
rules that a per-field character class cannot express. Each returns True
when the BBAN passes.
"""

from ..domain.enums import CharClass


def bank_code_letters_then_digits(bban: str) -> bool:
    """Bank code is four letters followed by two digits (Mauritius, Seychelles)."""
    return CharClass.ALPHABETIC.matches(bban[0:4]) and CharClass.NUMERIC.matches(bban[4:6])
