"""OpenIBAN - structural validation of International Bank Account Numbers.

Checks a candidate IBAN against its country's published BBAN layout and the
ISO 7064 mod-97 checksum, and decomposes it into named fields for display.
It does not check that an account exists.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "validate",
    "normalize",
    "lookup",
    "get_registry",
    "ValidationResult",
    "ValidationStatus",
]

from .domain.enums import ValidationStatus
from .domain.value_objects import ValidationResult
from .registry import get_registry, lookup
from .validation import normalize, validate
