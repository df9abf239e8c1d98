"""
Taxonomy error types.

Enumeration misses are never raised (callers get an empty list).
Conversions always raise: an empty or partial MFA would corrupt the
asset identifier it is persisted under.
"""

from typing import Optional


class TaxonomyError(Exception):
    """Base class for all taxonomy errors."""
    pass


class TaxonomyLookupError(TaxonomyError, LookupError):
    """
    A conversion could not resolve one or more segments, or the input
    is structurally invalid (too few segments, non-numeric MFA part).
    """

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message)
        self.value = value


class AmbiguousMappingError(TaxonomyLookupError):
    """A numeric code reverse-resolves to more than one alphabetic code."""

    def __init__(self, message: str, value: Optional[str] = None, candidates: tuple[str, ...] = ()):
        super().__init__(message, value)
        self.candidates = candidates


class TaxonomyIntegrityError(TaxonomyError):
    """The reference table failed its load-time integrity check."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f" (+{len(self.problems) - 5} more)"
        super().__init__(f"Taxonomy integrity check failed: {summary}")
