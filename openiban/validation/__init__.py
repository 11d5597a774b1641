"""IBAN validation: normalization, checksum, printed form and the engine.

Usage:
    >>> from openiban.validation import normalize, validate
    >>> validate(normalize("de89 3704 0044 0532 0130 00")).is_valid
    True
"""

__all__ = [
    "validate",
    "normalize",
    "is_ready",
    "prepare",
    "human_readable",
    "mod97",
    "is_valid_checksum",
    "compute_check_digits",
]

from .checksum import compute_check_digits, is_valid_checksum, mod97
from .engine import validate
from .formatting import human_readable
from .normalize import is_ready, normalize, prepare
