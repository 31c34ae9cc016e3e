"""Parsing and checksum validation of VAT identifiers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from .exceptions import ValidationError

_NON_ALNUM = re.compile(r"[^0-9A-Za-z]+")
_COUNTRY_PREFIX = re.compile(r"^[A-Za-z]{2}")

_PL_WEIGHTS: Final = (6, 5, 7, 2, 3, 4, 5, 6, 7)


def _check_pl(number: str) -> None:
    if len(number) != 10 or not number.isdigit():
        raise ValidationError(
            f"NIP muss aus 10 Ziffern bestehen: {number!r}", value=number
        )
    digits = [int(ch) for ch in number]
    checksum = sum(weight * digit for weight, digit in zip(_PL_WEIGHTS, digits)) % 11
    if checksum == 10 or checksum != digits[-1]:
        raise ValidationError(f"Ungültige NIP-Prüfsumme: {number}", value=number)


CHECKSUM_RULES: dict[str, Callable[[str], None]] = {
    "PL": _check_pl,
}


def resolve_vatid(raw: str, default_country: str = "PL") -> tuple[str, str]:
    """Split ``raw`` into ``(country, number)`` after validating it.

    Separators and whitespace are dropped, so ``"pl 123-456-32-18"`` resolves to
    ``("PL", "1234563218")``. Without a two-letter prefix ``default_country``
    is assumed.
    """

    cleaned = _NON_ALNUM.sub("", raw or "")
    if not cleaned:
        raise ValidationError("Leere Steuernummer", value=raw)

    if _COUNTRY_PREFIX.match(cleaned):
        country, number = cleaned[:2].upper(), cleaned[2:]
    else:
        country, number = default_country.strip().upper(), cleaned

    rule = CHECKSUM_RULES.get(country)
    if rule is None:
        raise ValidationError(f"Land nicht unterstützt: {country}", value=raw)
    rule(number)
    return country, number


def validate_vatid(raw: str, default_country: str = "PL") -> str:
    """Return the canonical, country-prefixed form of ``raw``."""

    country, number = resolve_vatid(raw, default_country)
    return f"{country}{number}"
