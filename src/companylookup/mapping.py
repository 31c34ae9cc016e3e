"""Conversion of raw registry hits into :class:`CompanyData`."""

from __future__ import annotations

from .classification import fetch_pkd_codes
from .models import CompanyAddress, CompanyData, CompanyIdentifier, IdentifierKind
from .registry import RawReport, RegistryClient


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def format_street_address(report: RawReport) -> str:
    address = f"{_text(report.street)} {_text(report.property_number)}".strip()
    apartment = _text(report.apartment_number)
    if apartment:
        address = f"{address}/{apartment}"
    return address


def map_company_data(
    report: RawReport,
    client: RegistryClient,
    *,
    country: str = "PL",
) -> CompanyData:
    """Build a valid record from an active ``report``.

    The PKD codes are fetched with a second registry call keyed by the very
    same ``report``.
    """

    address = CompanyAddress(
        country=country,
        postal_code=_text(report.zip_code),
        address=format_street_address(report),
        city=_text(report.city),
    )
    return CompanyData(
        valid=True,
        name=_text(report.name),
        identifiers=[
            CompanyIdentifier(IdentifierKind.VAT, _text(report.nip)),
            CompanyIdentifier(IdentifierKind.STATISTICAL_NUMBER, _text(report.regon)),
        ],
        main_address=address,
        pkd_codes=fetch_pkd_codes(client, report),
    )
