"""Standardized exception hierarchy for OpenIBAN.

Validation outcomes are never exceptions: ``validate`` always returns a
``ValidationResult``. The exceptions below cover programming and environment
problems around the engine (a broken rule table, a strict lookup of an
unknown country, bad settings, unreadable CLI input).

Usage:
    from openiban.exceptions import CountryNotFoundError

    try:
        rule = registry.require(code)
    except CountryNotFoundError as e:
        logger.error("country_lookup_failed", error=str(e), context=e.context)
"""

from __future__ import annotations

from typing import Any


class OpenIBANError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Additional context for debugging (dict)
        original_error: Original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        """Format exception with context for logging."""
        base = self.message
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({ctx_str})"
        if self.original_error:
            base = f"{base} [caused by: {type(self.original_error).__name__}]"
        return base

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# Rule Registry Errors
# =============================================================================


class RegistryError(OpenIBANError):
    """Raised when the rule table violates a structural invariant.

    Used for field gaps/overlaps, dangling or cyclic aliases and rule sets
    whose last field does not end at the expected IBAN length.
    """

    def __init__(
        self,
        message: str,
        *,
        country_code: str | None = None,
        problems: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if country_code:
            context["country_code"] = country_code
        if problems:
            context["problem_count"] = len(problems)
            context["first_problem"] = problems[0]
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.problems = problems or []


class CountryNotFoundError(OpenIBANError):
    """Raised by strict lookups when a country code is not in the registry."""

    def __init__(self, message: str, *, country_code: str | None = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if country_code is not None:
            context["country_code"] = country_code
        kwargs["context"] = context
        super().__init__(message, **kwargs)
        self.country_code = country_code


# =============================================================================
# Configuration & Input Errors
# =============================================================================


class ConfigurationError(OpenIBANError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if setting:
            context["setting"] = setting
        if expected:
            context["expected"] = expected
        kwargs["context"] = context
        super().__init__(message, **kwargs)


class InputError(OpenIBANError):
    """Raised when CLI input cannot be read (missing batch file, bad encoding)."""

    def __init__(self, message: str, *, source: str | None = None, **kwargs: Any) -> None:
        context = kwargs.get("context", {})
        if source:
            context["source"] = source
        kwargs["context"] = context
        super().__init__(message, **kwargs)


# =============================================================================
# Utility Functions
# =============================================================================


def wrap_exception(
    error: Exception,
    message: str,
    *,
    exception_class: type[OpenIBANError] = OpenIBANError,
    **context: Any,
) -> OpenIBANError:
    """Wrap an external exception in the OpenIBAN exception hierarchy.

    Example:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise wrap_exception(e, "Cannot read batch file", exception_class=InputError)
    """
    return exception_class(
        message,
        context=context,
        original_error=error,
    )


__all__ = [
    "OpenIBANError",
    "RegistryError",
    "CountryNotFoundError",
    "ConfigurationError",
    "InputError",
    "wrap_exception",
]
