"""Country rule registry.

Maps ISO 3166-1 alpha-2 country codes to the BBAN layout, length and
check-digit policy of their IBANs.

Usage:
    >>> from openiban.registry import lookup
    >>> lookup("DE").expected_length
    22
"""

__all__ = [
    "COUNTRY_TABLE",
    "RuleRegistry",
    "build_registry",
    "get_registry",
    "lookup",
    "partition_problems",
]

from .countries import COUNTRY_TABLE
from .registry import RuleRegistry, build_registry, get_registry, lookup, partition_problems
