"""Tests for address parsing and domain normalization."""

import pytest

from mailcheck.errors import AddressSyntaxError
from mailcheck.models import SchemaProblem
from mailcheck.parser import normalize_domain, parse_address, schema_problem


class TestParseAddress:
    """Tests for parse_address."""

    def test_splits_local_part_and_domain(self):
        parsed = parse_address("john.doe@gmail.com")

        assert parsed.local_part == "john.doe"
        assert parsed.domain == "gmail.com"
        assert parsed.raw_domain == "gmail.com"

    def test_trims_whitespace(self):
        """Surrounding whitespace and blanks around @ are ignored."""
        parsed = parse_address("  john @ gmail.com \n")

        assert parsed.local_part == "john"
        assert parsed.domain == "gmail.com"

    def test_lowercases_domain_only(self):
        parsed = parse_address("John@GMail.COM")

        assert parsed.local_part == "John"
        assert parsed.domain == "gmail.com"

    def test_converts_unicode_domain_to_punycode(self):
        parsed = parse_address("info@bücher.de")

        assert parsed.domain == "xn--bcher-kva.de"
        assert parsed.raw_domain == "bücher.de"

    @pytest.mark.parametrize(
        "address",
        ["not-an-email", "user@", "@gmail.com", "a@b@c.com", "", "@", "   "],
    )
    def test_rejects_malformed_structure(self, address):
        """Anything but two non-empty parts around a single @ is rejected."""
        with pytest.raises(AddressSyntaxError):
            parse_address(address)

    def test_rejects_empty_label(self):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_address("user@gmail..com")

        assert exc_info.value.problem == SchemaProblem.MALFORMED

    def test_error_carries_schema_problem(self):
        with pytest.raises(AddressSyntaxError) as exc_info:
            parse_address("john")

        assert exc_info.value.problem == SchemaProblem.INCOMPLETE
        assert exc_info.value.address == "john"


class TestNormalizeDomain:
    """Tests for normalize_domain."""

    def test_ascii_domain_unchanged(self):
        assert normalize_domain("t-online.de") == "t-online.de"

    def test_underscore_falls_back_to_raw_domain(self):
        """Strict IDNA refuses underscores; plain ASCII is kept as typed."""
        assert normalize_domain("mail_host.example.org") == "mail_host.example.org"

    @pytest.mark.parametrize("domain", ["-", "--", "-corp.example", "corp-.example", "a.-.b"])
    def test_hyphen_edged_labels_raise(self, domain):
        """Fallback labels must start and end with a letter or digit."""
        with pytest.raises(AddressSyntaxError):
            normalize_domain(domain)

    def test_invalid_unicode_domain_raises(self):
        with pytest.raises(AddressSyntaxError):
            normalize_domain("bü cher.de")


class TestSchemaProblem:
    """Tests for schema_problem."""

    def test_incomplete_without_at_and_dot(self):
        assert schema_problem("not-an-email") == SchemaProblem.INCOMPLETE

    def test_malformed_with_dot(self):
        assert schema_problem("john.doe") == SchemaProblem.MALFORMED

    def test_malformed_with_at(self):
        assert schema_problem("a@b@c") == SchemaProblem.MALFORMED
