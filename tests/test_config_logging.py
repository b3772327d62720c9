"""Tests for settings loading and the structured log formatter."""
import logging

import pytest

from culinary_intel.catalog.sources import CsvCatalogSource
from culinary_intel.config import Settings, build_catalog, load_settings
from culinary_intel.logging_utils import RUN_ID, StructuredFormatter, get_logger, init_logging


@pytest.fixture
def root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


def test_load_settings_defaults(monkeypatch):
    for key in (
        "CULINARY_CATALOG_SOURCE",
        "CULINARY_CATALOG_CSV",
        "CULINARY_MAX_SUGGESTIONS",
        "CULINARY_SUGGESTIONS_PER_ELEMENT",
        "CULINARY_SCORE_PARITY",
        "CULINARY_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    assert load_settings() == Settings()


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("CULINARY_CATALOG_SOURCE", "CSV")
    monkeypatch.setenv("CULINARY_CATALOG_CSV", "data/sample_ingredients.csv")
    monkeypatch.setenv("CULINARY_MAX_SUGGESTIONS", "5")
    monkeypatch.setenv("CULINARY_SUGGESTIONS_PER_ELEMENT", "lots")
    monkeypatch.setenv("CULINARY_SCORE_PARITY", "yes")
    settings = load_settings()
    assert settings.catalog_source == "csv"
    assert settings.max_suggestions == 5
    assert settings.suggestions_per_element == 3
    assert settings.score_parity is True


def test_load_settings_applies_log_level(monkeypatch, root_level):
    monkeypatch.setenv("CULINARY_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
    assert root_level.level == logging.DEBUG
    assert get_logger("culinary_intel.analysis.balance").isEnabledFor(logging.DEBUG)


def test_unknown_log_level_falls_back_to_info(monkeypatch, root_level):
    monkeypatch.setenv("CULINARY_LOG_LEVEL", "chatty")
    load_settings()
    assert root_level.level == logging.INFO


def test_init_logging_without_level_keeps_configured_level(root_level):
    init_logging(logging.WARNING)
    init_logging()
    get_logger("culinary_intel.catalog.store")
    assert root_level.level == logging.WARNING


def test_build_catalog_csv(tmp_path):
    catalog = build_catalog(Settings(catalog_source="csv", catalog_csv_path=str(tmp_path / "c.csv")))
    assert isinstance(catalog.source, CsvCatalogSource)
    with pytest.raises(ValueError):
        build_catalog(Settings(catalog_source="csv"))


def test_structured_formatter_line():
    record = logging.LogRecord(
        name="culinary_intel.analysis.balance",
        level=logging.WARNING,
        pathname="/x/balance.py",
        lineno=42,
        msg="ratio %.1f",
        args=(0.2,),
        exc_info=None,
        func="analyze",
    )
    record.invoking_func = "analyze_balance"
    record.next_step = "Suggest acid"
    line = StructuredFormatter().format(record)
    parts = line.split("|")
    assert parts[0] == RUN_ID
    assert parts[3] == "WARNING"
    assert parts[4] == "balance.py:42"
    assert parts[5] == "balance.analyze"
    assert parts[6] == StructuredFormatter.MODULE_PURPOSES["balance"]
    assert parts[7] == "analyze_balance"
    assert parts[9] == "ratio 0.2"
    assert parts[10] == "Suggest acid"
    assert parts[-1] == "<END>"
