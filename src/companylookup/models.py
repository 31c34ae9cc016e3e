"""Unified company record returned by every lookup."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class IdentifierKind(str, Enum):
    VAT = "vat"
    NATIONAL_REGISTER = "krs"
    STATISTICAL_NUMBER = "regon"


@dataclass(frozen=True)
class CompanyIdentifier:
    kind: IdentifierKind
    value: str


@dataclass
class CompanyAddress:
    country: str = ""
    postal_code: str = ""
    address: str = ""
    city: str = ""


@dataclass
class CompanyData:
    """Normalised registry record.

    An invalid record carries only the identifier that was searched for.
    A valid one starts with the tax and statistical numbers reported by the
    registry and holds the main address and the PKD classification codes.
    """

    valid: bool = False
    name: str = ""
    identifiers: list[CompanyIdentifier] = field(default_factory=list)
    main_address: CompanyAddress | None = None
    pkd_codes: list[str] = field(default_factory=list)

    @classmethod
    def invalid(cls, kind: IdentifierKind, value: str) -> CompanyData:
        return cls(valid=False, identifiers=[CompanyIdentifier(kind, value)])

    def identifier(self, kind: IdentifierKind) -> str | None:
        """Return the first identifier value of ``kind`` or ``None``."""

        for identifier in self.identifiers:
            if identifier.kind is kind:
                return identifier.value
        return None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["identifiers"] = [
            {"kind": identifier.kind.value, "value": identifier.value}
            for identifier in self.identifiers
        ]
        return data
