"""Registry client interface and the raw report types it exchanges."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional, Protocol


class LegalForm(str, Enum):
    LEGAL_ENTITY = "p"
    NATURAL_PERSON = "f"


class ReportType(str, Enum):
    """Detail reports offered by the REGON registry."""

    PUBLIC_ACTIVITY_LEGAL_ENTITIES = "PublDaneRaportDzialalnosciPrawnej"
    PUBLIC_ACTIVITY_INDIVIDUALS = "PublDaneRaportLokalneFizycznej"
    PUBLIC_LEGAL_ENTITY = "PublDaneRaportPrawna"
    ACTIVITY_NATURAL_PERSON_CEIDG = "PublDaneRaportDzialalnoscFizycznejCeidg"


@dataclass(frozen=True)
class RawReport:
    """One search hit as delivered by the registry."""

    regon: Optional[str] = None
    nip: Optional[str] = None
    name: Optional[str] = None
    province: Optional[str] = None
    district: Optional[str] = None
    community: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    street: Optional[str] = None
    property_number: Optional[str] = None
    apartment_number: Optional[str] = None
    legal_form: Optional[str] = None
    silo_id: Optional[int] = None
    activity_end_date: Optional[date] = None
    post_city: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return not self.activity_end_date


class RegistryClient(Protocol):
    """Protocol implemented by transports talking to the REGON registry.

    Query methods raise :class:`~companylookup.exceptions.NotFoundError` when the
    registry knows no entity and :class:`~companylookup.exceptions.SessionError`
    when the API key was rejected.
    """

    def login(self) -> None:
        ...

    def query_by_tax(self, number: str) -> Sequence[RawReport]:
        ...

    def query_by_register_number(self, krs: str) -> Sequence[RawReport]:
        ...

    def query_by_statistical_number(self, regon: str) -> Sequence[RawReport]:
        ...

    def fetch_detail_report(
        self, report: RawReport, report_type: ReportType
    ) -> Sequence[Mapping[str, Any]]:
        ...
