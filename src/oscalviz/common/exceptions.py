"""Custom exceptions for OSCALViz.

Provides a hierarchy of exceptions with HTTP-style status codes
and structured error payloads for the calling API layer.
"""

from typing import Any


class OSCALVizError(Exception):
    """Base exception for all OSCALViz errors."""

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize exception with optional details.

        Args:
            message: Human-readable error message.
            details: Additional error details for debugging.
            cause: Original exception that caused this error.
        """
        self.message = message or self.message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# 400 Bad Request errors
class ValidationError(OSCALVizError):
    """Input validation failed."""

    status_code = 400
    error_code = "VALIDATION_ERROR"
    message = "Input validation failed"


class UnknownVariantError(ValidationError):
    """A string did not name any member of a closed variant set."""

    error_code = "UNKNOWN_VARIANT"
    message = "Unknown variant"

    def __init__(self, kind: str, raw: Any) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(
            f"Unknown {kind}: {raw}",
            details={"kind": kind, "value": None if raw is None else str(raw)},
        )


class UnknownFormatError(UnknownVariantError):
    """Unsupported OSCAL document format."""

    error_code = "UNKNOWN_FORMAT"


# 404 Not Found errors
class NotFoundError(OSCALVizError):
    """Resource not found."""

    status_code = 404
    error_code = "NOT_FOUND"
    message = "Resource not found"


class MissingCatalogError(NotFoundError):
    """A profile import references a catalog that was not supplied.

    The caller may fetch the catalog and retry the resolution.
    """

    error_code = "MISSING_CATALOG"
    message = "Catalog not supplied"

    def __init__(self, href: str, missing_hrefs: list[str] | None = None) -> None:
        self.href = href
        super().__init__(
            f"Catalog not supplied for import: {href}",
            details={"href": href, "missing_hrefs": missing_hrefs or [href]},
        )


# 500 Internal errors
class InternalError(OSCALVizError):
    """Internal error."""

    status_code = 500
    error_code = "INTERNAL_ERROR"
    message = "An internal error occurred"


class UnresolvedImportError(InternalError):
    """Catalog handed to the import resolver is not the one the import references.

    Raised on caller contract violations; never retried.
    """

    error_code = "UNRESOLVED_IMPORT"
    message = "Catalog does not match import href"

    def __init__(self, import_href: str, catalog_href: str) -> None:
        super().__init__(
            f"Catalog {catalog_href!r} does not match import href {import_href!r}",
            details={"import_href": import_href, "catalog_href": catalog_href},
        )


class ConfigurationError(InternalError):
    """Configuration error."""

    error_code = "CONFIGURATION_ERROR"
    message = "Service configuration error"
