"""Unit tests for config.yaml loading and environment substitution."""

import pytest

from src.catalog.runtime.config.config_data import CatalogConfig
from src.catalog.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("CATALOG_TEST_VAR", raising=False)

        assert substitute_env_vars("x=${CATALOG_TEST_VAR:-fallback}") == "x=fallback"

    def test_value_wins_over_default(self, monkeypatch):
        monkeypatch.setenv("CATALOG_TEST_VAR", "set")

        assert substitute_env_vars("${CATALOG_TEST_VAR:-fallback}") == "set"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("CATALOG_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="CATALOG_TEST_VAR"):
            substitute_env_vars("${CATALOG_TEST_VAR:?needed for tests}")


class TestLoadTemplatedYaml:
    def test_loads_catalog_section(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CATALOG_TEST_DB", "sqlite:///./other.db")
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  database:\n"
            "    url: ${CATALOG_TEST_DB}\n"
            "  catalog:\n"
            "    low_stock_threshold: 5\n"
            "    medium_stock_threshold: 20\n"
            "    currency_symbol: \"EUR \"\n",
            encoding="utf-8",
        )

        config = load_templated_yaml(path)

        assert config.database.url == "sqlite:///./other.db"
        assert config.database.is_sqlite
        assert config.catalog.low_stock_threshold == 5
        assert config.catalog.currency_symbol == "EUR "
        assert config.catalog.price_decimal_places == 2

    def test_invalid_thresholds_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "config:\n"
            "  catalog:\n"
            "    low_stock_threshold: 10\n"
            "    medium_stock_threshold: 5\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_empty_file_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ValueError):
            load_templated_yaml(path)


def test_catalog_defaults():
    config = CatalogConfig()

    assert config.low_stock_threshold == 7
    assert config.medium_stock_threshold == 30
    assert config.currency_symbol == "$"
