"""Tests for the shared validator and catalog configuration."""

from datetime import timedelta

import pytest

from mailcheck.catalog import DEFAULT_DOMAINS
from mailcheck.config import get_settings
from mailcheck.models import AddressStatus
from mailcheck.oracle import CachedOracle, StaticOracle
from mailcheck.validator import (
    AddressValidator,
    get_address_validator,
    reset_address_validator,
    set_domain_list,
)


class TestSharedValidator:
    """Tests for get_address_validator and set_domain_list."""

    def test_singleton(self):
        assert get_address_validator() is get_address_validator()

    def test_reset(self):
        first = get_address_validator()
        reset_address_validator()

        assert get_address_validator() is not first

    def test_uses_default_catalog(self):
        assert get_address_validator().catalog.domains == DEFAULT_DOMAINS

    def test_settings_are_applied(self, monkeypatch):
        monkeypatch.setenv("MAILCHECK_TYPO_THRESHOLD", "1")

        assert get_address_validator().typo_threshold == 1

    def test_oracle_cache_ttl_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAILCHECK_ORACLE_CACHE_TTL_HOURS", "3")
        oracle = StaticOracle(mail_domains=["corp.example"])

        validator = AddressValidator.from_settings(get_settings(), oracle=oracle)

        assert isinstance(validator.oracle, CachedOracle)
        assert validator.oracle.cache_ttl == timedelta(hours=3)

    def test_oracle_cache_disabled(self, monkeypatch):
        monkeypatch.setenv("MAILCHECK_ORACLE_CACHE_TTL_HOURS", "0")
        oracle = StaticOracle()

        validator = AddressValidator.from_settings(get_settings(), oracle=oracle)

        assert validator.oracle is oracle

    def test_catalog_from_config_file(self, tmp_path):
        (tmp_path / "config.yml").write_text("catalog:\n  domains: [corp.example]\n")

        assert get_address_validator().catalog.domains == ("corp.example",)

    def test_set_domain_list(self):
        assert set_domain_list(["corp.example", "mail.example"]) is True
        assert get_address_validator().catalog.domains == ("corp.example", "mail.example")

    def test_set_domain_list_empty_keeps_prior_entries(self):
        set_domain_list(["corp.example"])

        assert set_domain_list([]) is False
        assert set_domain_list(None) is False
        assert get_address_validator().catalog.domains == ("corp.example",)

    @pytest.mark.asyncio
    async def test_replaced_catalog_drives_suggestions(self):
        set_domain_list(["corp.example"])

        result = await get_address_validator().validate("jane@corp.exmaple")

        assert result.status == AddressStatus.TYPO_DETECTED
        assert result.suggestion == "jane@corp.example"

    @pytest.mark.asyncio
    async def test_offline_default_gnail(self):
        """With the default catalog and no oracle, gnail.com suggests gmail.com."""
        result = await get_address_validator().validate("x@gnail.com")

        assert result.status == AddressStatus.TYPO_DETECTED
        assert result.suggestion == "x@gmail.com"
