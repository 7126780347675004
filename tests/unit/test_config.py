"""Configuration tests."""

from pathlib import Path

import pytest

from ui_catalog.core import DEFAULT_CATALOG_PATH, Settings
from ui_catalog.core.validate import MAX_JSON_DEPTH, MAX_PAYLOAD_SIZE


@pytest.mark.unit
def test_settings_defaults(monkeypatch):
    """Test default settings load correctly."""
    for var in ("CATALOG_CATALOG_PATH", "CATALOG_LOG_LEVEL", "CATALOG_COLLAPSE_VARIANTS"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings()

    assert settings.catalog_path is None
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.design_system_name == "Andes"
    assert settings.collapse_variants is True
    assert settings.max_payload_size == MAX_PAYLOAD_SIZE
    assert settings.max_json_depth == MAX_JSON_DEPTH


@pytest.mark.unit
def test_settings_from_environment(monkeypatch, tmp_path):
    """Environment variables use the CATALOG_ prefix."""
    catalog = tmp_path / "catalog.json"
    monkeypatch.setenv("CATALOG_CATALOG_PATH", str(catalog))
    monkeypatch.setenv("CATALOG_COLLAPSE_VARIANTS", "false")

    settings = Settings()

    assert settings.catalog_path == catalog
    assert settings.collapse_variants is False
    assert settings.resolved_catalog_path() == catalog


@pytest.mark.unit
def test_packaged_catalog_is_default():
    """Without a configured path the packaged catalog is used."""
    settings = Settings(catalog_path=None)
    assert settings.resolved_catalog_path() == DEFAULT_CATALOG_PATH
    assert DEFAULT_CATALOG_PATH.name == "components-catalog.json"
    assert DEFAULT_CATALOG_PATH.exists()


@pytest.mark.unit
def test_settings_validation():
    """Limits must be positive."""
    with pytest.raises(Exception):
        Settings(max_payload_size=0)

    with pytest.raises(Exception):
        Settings(max_json_depth=-1)

    assert Settings(catalog_path=Path("x.json")).catalog_path == Path("x.json")
