"""Domain-specific exceptions for rep_finder.

The cache layer never raises these for delegate failures; whatever the
wrapped finder raises reaches the caller untouched. ``APIError`` models the
structured error returned by the upstream civic information API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class RepFinderError(Exception):
    """Base exception for all rep_finder errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code for programmatic handling
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DomainError(RepFinderError):
    """Base class for domain-layer errors."""

    pass


class ValidationError(DomainError):
    """Raised when a value fails validation."""

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        """
        Initialize validation error.

        Args:
            message: Validation error message
            field: Field that failed validation
            **kwargs: Additional error details
        """
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        super().__init__(message, error_code="VALIDATION_ERROR", details=details)


@dataclass(frozen=True)
class APIErrorDetail:
    """One entry of the upstream API's auxiliary error list."""

    domain: str = ""
    reason: str = ""
    message: str = ""


class APIError(DomainError):
    """Error reported by the civic information API.

    Carries the numeric status code, the top-level message and the list of
    (domain, reason, message) details. Rendering skips details whose message
    repeats the top-level one.
    """

    def __init__(
        self,
        code: int,
        message: str,
        errors: list[APIErrorDetail] | None = None,
    ) -> None:
        self.code = code
        self.errors = list(errors or [])
        super().__init__(
            message,
            error_code="API_ERROR",
            details={
                "code": code,
                "errors": [
                    {"domain": e.domain, "reason": e.reason, "message": e.message}
                    for e in self.errors
                ],
            },
        )

    def __str__(self) -> str:
        parts = [f"{self.code} {self.message}"]
        for e in self.errors:
            if e.message != self.message:
                parts.append(f";[domain={e.domain}, reason={e.reason}: {e.message}]")
        return "".join(parts)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> APIError:
        """Build an APIError from a decoded API error body.

        Accepts either the ``{"error": {...}}`` envelope or the inner object.
        """
        body = data.get("error", data)
        return cls(
            code=int(body.get("code", 0)),
            message=body.get("message", ""),
            errors=[
                APIErrorDetail(
                    domain=e.get("domain", ""),
                    reason=e.get("reason", ""),
                    message=e.get("message", ""),
                )
                for e in body.get("errors", [])
            ],
        )


class InfrastructureError(RepFinderError):
    """Base class for infrastructure-layer errors."""

    pass


class ConfigurationError(InfrastructureError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, reason: str, **kwargs: Any) -> None:
        """
        Initialize configuration error.

        Args:
            config_key: Configuration key that has issues
            reason: Reason for configuration error
            **kwargs: Additional error details
        """
        message = f"Configuration error for '{config_key}': {reason}"
        details = {
            "config_key": config_key,
            "reason": reason,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="CONFIGURATION_ERROR", details=details)
