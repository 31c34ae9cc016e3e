"""Exception hierarchy for registry lookups."""

from __future__ import annotations


class CompanyLookupError(RuntimeError):
    """Base class for all errors raised by ``companylookup``."""


class ValidationError(CompanyLookupError, ValueError):
    """Raised when an input identifier is malformed or fails its checksum."""

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class ServiceUnavailableError(CompanyLookupError):
    """Raised when the registry session cannot be established or was rejected."""


class NoActiveReportError(CompanyLookupError):
    """Raised when classification codes are requested without an active report."""


class UnsupportedEntityTypeError(CompanyLookupError):
    """Raised for legal-form tags that have no matching registry report."""

    def __init__(self, message: str, *, legal_form: str | None = None) -> None:
        super().__init__(message)
        self.legal_form = legal_form


class RegistryError(RuntimeError):
    """Base class for errors signalled by a registry client."""


class SessionError(RegistryError):
    """The registry rejected the API key or the session expired."""


class NotFoundError(RegistryError):
    """The registry holds no entity for the queried identifier."""
