"""Rule registry: country code -> fully materialized BBAN rule set.

The registry is built once, when this module is imported, from
``COUNTRY_TABLE``. Alias entries are resolved at build time into new
``CountryRule`` objects; the entry they point at is never modified, so two
aliases of the same country cannot interfere with each other. Once built,
the registry is read-only and safe to share between threads.

Usage:
    >>> from openiban.registry import get_registry
    >>> rule = get_registry().lookup("IE")
    >>> rule.name, rule.alias_of, rule.expected_length
    ('Ireland', 'GB', 22)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..domain.value_objects import BBAN_OFFSET, CountryRule
from ..exceptions import CountryNotFoundError, RegistryError
from ..utils.logging import get_logger
from .countries import COUNTRY_TABLE

logger = get_logger(__name__)


class RuleRegistry:
    """Immutable mapping of country codes to materialized rule sets."""

    def __init__(self, rules: Mapping[str, CountryRule]) -> None:
        unresolved = sorted(code for code, rule in rules.items() if not rule.is_materialized)
        if unresolved:
            raise RegistryError(
                "Registry rules must be materialized",
                problems=[f"{code}: unresolved alias" for code in unresolved],
            )
        self._rules: Mapping[str, CountryRule] = MappingProxyType(dict(rules))

    def lookup(self, country_code: str) -> CountryRule | None:
        """Rule set for ``country_code``, or None when the code is unknown."""
        return self._rules.get(country_code)

    def require(self, country_code: str) -> CountryRule:
        """Strict lookup.

        Raises:
            CountryNotFoundError: If the code is not in the registry
        """
        rule = self._rules.get(country_code)
        if rule is None:
            raise CountryNotFoundError(
                f"We are unaware of IBANs beginning {country_code}",
                country_code=country_code,
            )
        return rule

    @property
    def rules(self) -> Mapping[str, CountryRule]:
        """Read-only view of every rule set."""
        return self._rules

    def codes(self) -> list[str]:
        """Sorted list of known country codes."""
        return sorted(self._rules)

    def aliases(self) -> dict[str, str]:
        """Alias country code -> code whose structure it reuses."""
        return {
            code: rule.alias_of for code, rule in self._rules.items() if rule.alias_of is not None
        }

    def __contains__(self, country_code: object) -> bool:
        return country_code in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.codes())


def partition_problems(country_code: str, rule: CountryRule) -> list[str]:
    """Describe how ``rule.fields`` fails to partition ``[4, expected_length)``.

    Returns an empty list for a well-formed rule set.
    """
    problems = []
    position = BBAN_OFFSET
    for spec in rule.fields:
        if spec.offset > position:
            problems.append(f"{country_code}: gap between offsets {position} and {spec.offset}")
        elif spec.offset < position:
            problems.append(f"{country_code}: field at offset {spec.offset} overlaps {position}")
        position = spec.end
    if position != rule.expected_length:
        problems.append(
            f"{country_code}: fields end at {position}, expected length {rule.expected_length}"
        )
    return problems


def _resolve_alias(country_code: str, table: Mapping[str, CountryRule]) -> CountryRule:
    """Follow an alias chain to the first concrete rule set.

    Chains are one level deep in practice; longer ones resolve transitively.
    """
    entry = table[country_code]
    seen = [country_code]
    base_code = entry.alias_of
    while base_code is not None:
        if base_code in seen:
            raise RegistryError(
                "Cyclic alias in rule table",
                country_code=country_code,
                problems=[" -> ".join(seen + [base_code])],
            )
        base = table.get(base_code)
        if base is None:
            raise RegistryError(
                "Alias points to an unknown country",
                country_code=country_code,
                problems=[f"{country_code}: alias of unknown code {base_code}"],
            )
        if not base.is_alias:
            return entry.materialize(base, alias_of=base_code)
        seen.append(base_code)
        base_code = base.alias_of
    return entry


def build_registry(table: Mapping[str, CountryRule] | None = None) -> RuleRegistry:
    """Resolve aliases, verify every rule set and return a registry.

    Args:
        table: Raw rule table (defaults to ``COUNTRY_TABLE``)

    Raises:
        RegistryError: If a country code is malformed, an alias cannot be
            resolved, or a rule set's fields do not partition its BBAN
    """
    if table is None:
        table = COUNTRY_TABLE

    problems: list[str] = []
    resolved: dict[str, CountryRule] = {}
    for code in table:
        if len(code) != 2 or not code.isascii() or not code.isalpha() or not code.isupper():
            problems.append(f"{code!r}: country codes are two uppercase letters")
            continue
        rule = _resolve_alias(code, table)
        problems.extend(partition_problems(code, rule))
        resolved[code] = rule

    if problems:
        raise RegistryError("Rule table violates field partitioning", problems=problems)

    registry = RuleRegistry(resolved)
    logger.info(
        "rule_registry_built",
        entries=len(registry),
        aliases=len(registry.aliases()),
    )
    return registry


_registry = build_registry()


def get_registry() -> RuleRegistry:
    """The process-wide registry, built from ``COUNTRY_TABLE`` at import time."""
    return _registry


def lookup(country_code: str) -> CountryRule | None:
    """Shortcut for ``get_registry().lookup(country_code)``."""
    return _registry.lookup(country_code)
