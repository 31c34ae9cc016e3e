"""PKD classification codes fetched through the registry detail reports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import NoActiveReportError, UnsupportedEntityTypeError
from .registry import LegalForm, RawReport, RegistryClient, ReportType
from .utils.logging_setup import get_logger

LOGGER = get_logger("classification")

_ACTIVITY_REPORTS: dict[LegalForm, ReportType] = {
    LegalForm.LEGAL_ENTITY: ReportType.PUBLIC_ACTIVITY_LEGAL_ENTITIES,
    LegalForm.NATURAL_PERSON: ReportType.PUBLIC_ACTIVITY_INDIVIDUALS,
}

_FULL_REPORTS: dict[LegalForm, ReportType] = {
    LegalForm.LEGAL_ENTITY: ReportType.PUBLIC_LEGAL_ENTITY,
    LegalForm.NATURAL_PERSON: ReportType.ACTIVITY_NATURAL_PERSON_CEIDG,
}

# PKD code column of the activity report rows, for both legal forms.
PKD_CODE_FIELD = "praw_pkdKod"


def require_active(report: RawReport | None) -> RawReport:
    if report is None or not report.is_active:
        raise NoActiveReportError("Kein aktiver Registereintrag, bitte zuerst Firma suchen")
    return report


def legal_form_of(report: RawReport) -> LegalForm:
    try:
        return LegalForm(report.legal_form)
    except ValueError as exc:
        raise UnsupportedEntityTypeError(
            f"Unbekannte Rechtsform: {report.legal_form!r}",
            legal_form=report.legal_form,
        ) from exc


def activity_report_type(report: RawReport) -> ReportType:
    """Report listing the PKD codes for the report's legal form."""

    return _ACTIVITY_REPORTS[legal_form_of(report)]


def full_report_type(report: RawReport) -> ReportType:
    """Report with the complete public data for the report's legal form."""

    return _FULL_REPORTS[legal_form_of(report)]


def _extract_code(row: Mapping[str, Any]) -> str:
    value = row.get(PKD_CODE_FIELD)
    if value is None:
        LOGGER.debug("PKD-Zeile ohne Code: %s", row)
        return ""
    return str(value).strip()


def fetch_pkd_codes(client: RegistryClient, report: RawReport | None) -> list[str]:
    """Return the PKD codes of ``report`` in registry order."""

    report = require_active(report)
    report_type = activity_report_type(report)
    LOGGER.debug("Frage PKD-Bericht %s für REGON %s ab", report_type.value, report.regon)

    return [_extract_code(row) for row in client.fetch_detail_report(report, report_type)]
