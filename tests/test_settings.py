"""
Tests for the pydantic settings models.
"""

import logging

import pytest
from pydantic import ValidationError

from artsearch.config import AppSettings, SearchSettings, configure_logging


def test_defaults():
    settings = AppSettings.from_env({})

    assert settings.catalog_path is None
    assert settings.search.cache_ttl_seconds == 300.0
    assert settings.search.default_limit == 50
    assert settings.search.relevance_threshold == pytest.approx(0.1)
    assert settings.search.raise_on_upstream_error is False
    assert settings.visual.max_side == 256
    assert settings.log_level == "INFO"


def test_environment_overrides_nested_values():
    settings = AppSettings.from_env(
        {
            "ARTSEARCH_LOG_LEVEL": "DEBUG",
            "ARTSEARCH_CATALOG_PATH": "/data/catalog.json",
            "ARTSEARCH_SEARCH__CACHE_TTL_SECONDS": "60",
            "ARTSEARCH_SEARCH__RAISE_ON_UPSTREAM_ERROR": "true",
            "ARTSEARCH_VISUAL__SAMPLE_STEP": "4",
            "UNRELATED": "ignored",
        }
    )

    assert settings.log_level == "DEBUG"
    assert str(settings.catalog_path) == "/data/catalog.json"
    assert settings.search.cache_ttl_seconds == 60.0
    assert settings.search.raise_on_upstream_error is True
    assert settings.visual.sample_step == 4


def test_invalid_values_are_rejected():
    with pytest.raises(ValidationError):
        AppSettings.from_env({"ARTSEARCH_SEARCH__CACHE_TTL_SECONDS": "0"})
    with pytest.raises(ValidationError):
        SearchSettings(relevance_threshold=1.5)


def test_configure_logging_accepts_unknown_levels():
    configure_logging("nonsense")

    assert logging.getLogger().getEffectiveLevel() <= logging.WARNING
