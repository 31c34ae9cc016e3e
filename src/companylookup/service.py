"""Company lookup against the GUS REGON registry."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Optional

from .classification import fetch_pkd_codes, full_report_type, require_active
from .config import Settings, load_settings
from .exceptions import (
    NotFoundError,
    ServiceUnavailableError,
    SessionError,
    ValidationError,
)
from .mapping import map_company_data
from .models import CompanyData, CompanyIdentifier, IdentifierKind
from .registry import RawReport, RegistryClient
from .utils.logging_setup import get_logger
from .vatid import resolve_vatid

LOGGER = get_logger("service")

ClientFactory = Callable[[str], RegistryClient]


class RegonLookupService:
    """Looks up companies by NIP, KRS or REGON and normalises the result.

    See https://api.stat.gov.pl/Home/RegonApi/ for the registry itself; the
    transport is supplied through ``client_factory``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client_factory: ClientFactory,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self.api_key = api_key or self._settings.api_key
        if not self.api_key:
            raise ServiceUnavailableError(
                "GUS_API_KEY muss gesetzt sein (Umgebungsvariable oder Parameter)."
            )
        self.home_country = self._settings.home_country

        self._client = client_factory(self.api_key)
        try:
            self._client.login()
        except SessionError as exc:
            LOGGER.error("Anmeldung am REGON-Dienst fehlgeschlagen: %s", exc)
            raise ServiceUnavailableError(
                "Abfrage derzeit nicht verfügbar [Anmeldung abgelehnt]"
            ) from exc

    def lookup_by_tax(self, raw_tax_id: str) -> CompanyData:
        country, number = resolve_vatid(raw_tax_id, self.home_country)
        if country != self.home_country:
            raise ValidationError(
                f"Nur Steuernummern aus {self.home_country} werden unterstützt: {country}",
                value=raw_tax_id,
            )
        return self._lookup(self._client.query_by_tax, IdentifierKind.VAT, number)

    def lookup_by_register_number(self, register_id: str) -> CompanyData:
        return self._lookup(
            self._client.query_by_register_number,
            IdentifierKind.NATIONAL_REGISTER,
            register_id,
            append_searched=True,
        )

    def lookup_by_statistical_number(self, stat_id: str) -> CompanyData:
        return self._lookup(
            self._client.query_by_statistical_number,
            IdentifierKind.STATISTICAL_NUMBER,
            stat_id,
        )

    def pkd_codes(self, report: RawReport | None) -> list[str]:
        with _session_guard():
            return fetch_pkd_codes(self._client, report)

    def full_report(self, report: RawReport | None) -> Sequence[Mapping[str, Any]]:
        """Fetch the complete public data report for an active ``report``."""

        report = require_active(report)
        report_type = full_report_type(report)
        with _session_guard():
            return self._client.fetch_detail_report(report, report_type)

    def _lookup(
        self,
        query: Callable[[str], Sequence[RawReport]],
        kind: IdentifierKind,
        value: str,
        *,
        append_searched: bool = False,
    ) -> CompanyData:
        LOGGER.info("Suche Firma im REGON-Register: %s=%s", kind.value, value)
        with _session_guard():
            try:
                reports = query(value)
            except NotFoundError:
                LOGGER.warning("REGON: keine Daten für %s=%s", kind.value, value)
                return CompanyData.invalid(kind, value)

            report = self._first_active(reports)
            if report is None:
                LOGGER.warning("REGON: kein aktiver Eintrag für %s=%s", kind.value, value)
                return CompanyData.invalid(kind, value)

            company = map_company_data(report, self._client, country=self.home_country)

        if append_searched:
            company.identifiers.append(CompanyIdentifier(kind, value))
        return company

    @staticmethod
    def _first_active(reports: Sequence[RawReport]) -> Optional[RawReport]:
        for report in reports:
            if not report.is_active:
                LOGGER.debug(
                    "Überspringe inaktiven Eintrag REGON %s (beendet %s)",
                    report.regon,
                    report.activity_end_date,
                )
                continue
            return report
        return None


@contextmanager
def _session_guard() -> Iterator[None]:
    """Turn registry session failures into :class:`ServiceUnavailableError`."""

    try:
        yield
    except SessionError as exc:
        LOGGER.error("REGON-Sitzung ungültig: %s", exc)
        raise ServiceUnavailableError(
            "Abfrage derzeit nicht verfügbar [API-Schlüssel ungültig]"
        ) from exc
