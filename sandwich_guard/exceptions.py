"""
Exception hierarchy for the bundle sandwich screener.

Detection itself never raises for malformed input; these types cover
configuration problems, unparseable caller input and the explicit
"sandwich detected" signal of the raising API.
"""

from typing import Any, Dict, Optional


class SandwichGuardError(Exception):
    """Base exception for all sandwich screening errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SandwichGuardError):
    """Raised when there are configuration-related issues."""

    pass


class DecodeError(SandwichGuardError):
    """Raised when caller-supplied logs or bundles cannot be parsed."""

    pass


class SandwichDetectedError(SandwichGuardError):
    """Raised by SandwichDetector.check when a bundle contains a sandwich."""

    def __init__(
        self,
        pool: Any,
        pattern: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"sandwich attack detected on pool: {pool}", details)
        self.pool = pool
        self.pattern = pattern
