from pathlib import Path

import pytest

from companylookup.config import API_KEY_ENV, HOME_COUNTRY_ENV, Settings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so that teardown also removes values written by load_dotenv
    for name in (API_KEY_ENV, HOME_COUNTRY_ENV):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults_without_sources(tmp_path: Path) -> None:
    settings = load_settings(dotenv_path=tmp_path / "missing.env")
    assert settings == Settings(api_key=None, home_country="PL")


def test_reads_yaml_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("api_key: yaml-key\nhome_country: pl\n", encoding="utf-8")

    settings = load_settings(config, dotenv_path=tmp_path / "missing.env")

    assert settings.api_key == "yaml-key"
    assert settings.home_country == "PL"


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("api_key: yaml-key\n", encoding="utf-8")
    monkeypatch.setenv(API_KEY_ENV, "env-key")

    settings = load_settings(config, dotenv_path=tmp_path / "missing.env")

    assert settings.api_key == "env-key"


def test_reads_dotenv_file(tmp_path: Path) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{API_KEY_ENV}=dotenv-key\n", encoding="utf-8")

    settings = load_settings(dotenv_path=dotenv_file)

    assert settings.api_key == "dotenv-key"


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("", encoding="utf-8")

    assert load_settings(config, dotenv_path=tmp_path / "missing.env") == Settings()


def test_blank_api_key_counts_as_missing(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("api_key: '   '\n", encoding="utf-8")

    assert load_settings(config, dotenv_path=tmp_path / "missing.env").api_key is None


def test_missing_yaml_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml", dotenv_path=tmp_path / "missing.env")


def test_yaml_must_be_mapping(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(config, dotenv_path=tmp_path / "missing.env")


def test_settings_uppercase_home_country() -> None:
    assert Settings(home_country=" pl ").home_country == "PL"
