"""
Pytest configuration and fixtures for mailcheck tests.

Provides:
- Fresh settings/validator singletons per test
- Fake oracles for every classification branch
"""

import sys

import pytest
from loguru import logger

from mailcheck.catalog import DomainCatalog
from mailcheck.config import get_config, get_settings
from mailcheck.oracle import StaticOracle
from mailcheck.validator import AddressValidator, reset_address_validator


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test without .env/config.yml from the working directory."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_config.cache_clear()
    reset_address_validator()
    yield
    get_settings.cache_clear()
    get_config.cache_clear()
    reset_address_validator()
    # CLI tests point loguru at the runner's captured stderr
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def catalog():
    """Small catalog with gmail first."""
    return DomainCatalog(["gmail.com", "yahoo.com", "gmx.de"])


@pytest.fixture
def offline_validator(catalog):
    """Validator whose oracle knows no domain at all."""
    return AddressValidator(oracle=StaticOracle(), catalog=catalog)
