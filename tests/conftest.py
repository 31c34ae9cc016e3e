from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

import pytest

from companylookup.config import Settings
from companylookup.exceptions import NotFoundError
from companylookup.registry import RawReport, ReportType


class StubRegistryClient:
    """In-memory registry answering from prepared reports."""

    def __init__(self) -> None:
        self.by_tax: dict[str, list[RawReport]] = {}
        self.by_krs: dict[str, list[RawReport]] = {}
        self.by_regon: dict[str, list[RawReport]] = {}
        self.detail_rows: dict[ReportType, list[dict[str, Any]]] = {}
        self.detail_calls: list[tuple[RawReport, ReportType]] = []
        self.login_calls = 0
        self.login_error: Exception | None = None
        self.query_error: Exception | None = None
        self.detail_error: Exception | None = None

    def login(self) -> None:
        self.login_calls += 1
        if self.login_error is not None:
            raise self.login_error

    def _query(self, table: dict[str, list[RawReport]], key: str) -> Sequence[RawReport]:
        if self.query_error is not None:
            raise self.query_error
        if key not in table:
            raise NotFoundError(key)
        return list(table[key])

    def query_by_tax(self, number: str) -> Sequence[RawReport]:
        return self._query(self.by_tax, number)

    def query_by_register_number(self, krs: str) -> Sequence[RawReport]:
        return self._query(self.by_krs, krs)

    def query_by_statistical_number(self, regon: str) -> Sequence[RawReport]:
        return self._query(self.by_regon, regon)

    def fetch_detail_report(
        self, report: RawReport, report_type: ReportType
    ) -> Sequence[Mapping[str, Any]]:
        self.detail_calls.append((report, report_type))
        if self.detail_error is not None:
            raise self.detail_error
        return list(self.detail_rows.get(report_type, []))


@pytest.fixture
def client() -> StubRegistryClient:
    return StubRegistryClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", home_country="PL")


@pytest.fixture
def acme_report() -> RawReport:
    return RawReport(
        regon="987654321",
        nip="1234563218",
        name="ACME SP Z O O",
        province="MAZOWIECKIE",
        city="Warszawa",
        zip_code="00-001",
        street="Długa",
        property_number="10",
        legal_form="p",
        silo_id=6,
    )


@pytest.fixture
def closed_report() -> RawReport:
    return RawReport(
        regon="111111111",
        nip="1234563218",
        name="ACME W LIKWIDACJI",
        city="Kraków",
        street="Krótka",
        property_number="1",
        legal_form="p",
        activity_end_date=date(2019, 12, 31),
    )
