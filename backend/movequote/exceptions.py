"""Custom exception hierarchy for the movequote engine.

Missing ZIPs, missing home size and unconfigured bands are estimate
outcomes, not errors. Only malformed static data raises.
"""

from __future__ import annotations


class MoveQuoteError(Exception):
    """Base exception for all movequote errors."""


class RateTableError(MoveQuoteError):
    """Raised when the rate band table fails validation at load time."""


class ReferenceDataError(MoveQuoteError):
    """Raised when the ZIP centroid reference table is malformed."""
