"""Zentrale Exporte für das ``companylookup``-Paket."""

from .classification import activity_report_type, fetch_pkd_codes, full_report_type
from .config import Settings, load_settings
from .exceptions import (
    CompanyLookupError,
    NoActiveReportError,
    NotFoundError,
    RegistryError,
    ServiceUnavailableError,
    SessionError,
    UnsupportedEntityTypeError,
    ValidationError,
)
from .mapping import format_street_address, map_company_data
from .models import CompanyAddress, CompanyData, CompanyIdentifier, IdentifierKind
from .registry import LegalForm, RawReport, RegistryClient, ReportType
from .service import RegonLookupService
from .utils.logging_setup import get_logger, setup_logger
from .vatid import resolve_vatid, validate_vatid

__all__ = [
    "CompanyAddress",
    "CompanyData",
    "CompanyIdentifier",
    "CompanyLookupError",
    "IdentifierKind",
    "LegalForm",
    "NoActiveReportError",
    "NotFoundError",
    "RawReport",
    "RegistryClient",
    "RegistryError",
    "RegonLookupService",
    "ReportType",
    "ServiceUnavailableError",
    "SessionError",
    "Settings",
    "UnsupportedEntityTypeError",
    "ValidationError",
    "activity_report_type",
    "fetch_pkd_codes",
    "format_street_address",
    "full_report_type",
    "get_logger",
    "load_settings",
    "map_company_data",
    "resolve_vatid",
    "setup_logger",
    "validate_vatid",
]
