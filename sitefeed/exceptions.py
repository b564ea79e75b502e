"""
Exception types for sitefeed.

Every error carries a machine-readable code plus the context it was raised in,
so a host build log can show both the technical and the user-facing message.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def create_error_context(**kwargs: Any) -> Dict[str, Any]:
    """Build an error context dict, dropping unset values."""
    context = {key: value for key, value in kwargs.items() if value is not None}
    context["timestamp"] = datetime.now(timezone.utc).isoformat()
    return context


class SiteFeedError(Exception):
    """Base class for all sitefeed errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.user_message = user_message or message

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for structured logging."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(SiteFeedError):
    """Raised when plugin options or settings are malformed."""


class QueryError(SiteFeedError):
    """Raised when the content graph query reports errors."""

    def __init__(
        self,
        errors: List[Any],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = list(errors)
        details = "; ".join(_describe_error(e) for e in self.errors)
        super().__init__(
            message=f"Content query failed: {details}",
            error_code="QUERY_FAILED",
            context=context,
            user_message="The content graph query returned errors; no feed was written.",
        )


def _describe_error(error: Any) -> str:
    # GraphQL errors are usually mappings with a "message" key
    if isinstance(error, dict) and "message" in error:
        return str(error["message"])
    return str(error)
