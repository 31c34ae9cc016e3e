"""Runtime settings from ``.env``, an optional YAML file and the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

API_KEY_ENV = "GUS_API_KEY"
HOME_COUNTRY_ENV = "COMPANYLOOKUP_HOME_COUNTRY"
DEFAULT_HOME_COUNTRY = "PL"


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    home_country: str = DEFAULT_HOME_COUNTRY

    def __post_init__(self) -> None:
        object.__setattr__(self, "home_country", self.home_country.strip().upper())


def _load_yaml(path: str | Path) -> Mapping[str, Any]:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Konfigurationsdatei nicht gefunden: {config_path}")

    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError("Konfigurations-YAML muss ein Dictionary enthalten")
    return data


def load_settings(
    config_path: str | Path | None = None,
    *,
    dotenv_path: str | Path = ".env",
) -> Settings:
    """Collect settings; environment variables win over the YAML file."""

    env_file = Path(dotenv_path)
    if env_file.exists():
        load_dotenv(dotenv_path=env_file)

    file_values = _load_yaml(config_path) if config_path else {}

    api_key = os.getenv(API_KEY_ENV) or file_values.get("api_key")
    home_country = os.getenv(HOME_COUNTRY_ENV) or file_values.get("home_country")

    if api_key is not None:
        api_key = str(api_key).strip() or None

    return Settings(
        api_key=api_key,
        home_country=str(home_country or DEFAULT_HOME_COUNTRY),
    )
