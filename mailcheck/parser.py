"""Split an address into local part and normalized domain."""

import re
from dataclasses import dataclass

import idna

from .core.logging import get_logger
from .errors import AddressSyntaxError
from .models import SchemaProblem

logger = get_logger(__name__)

# Accepted as-is when strict IDNA rejects a plain ASCII domain (e.g. underscores)
# Labels start and end with a letter or digit
ASCII_DOMAIN_REGEX = re.compile(
    r"^[a-z0-9]([a-z0-9_-]*[a-z0-9])?(\.[a-z0-9]([a-z0-9_-]*[a-z0-9])?)*\.?$"
)


@dataclass(frozen=True)
class ParsedAddress:
    """An address split at its "@"."""

    local_part: str
    domain: str  # ASCII compatible, lowercase
    raw_domain: str


def schema_problem(address: str) -> SchemaProblem:
    """Tell an unfinished address apart from a malformed one."""
    if "@" not in address and "." not in address:
        return SchemaProblem.INCOMPLETE
    return SchemaProblem.MALFORMED


def normalize_domain(domain: str) -> str:
    """
    Convert a domain to its lowercase ASCII compatible encoding.

    Unicode labels become punycode ("bücher.de" -> "xn--bcher-kva.de").
    Plain ASCII domains that IDNA refuses are kept unchanged.

    Raises:
        AddressSyntaxError: If a non-ASCII domain cannot be encoded
    """
    domain = domain.strip().lower()
    try:
        return idna.encode(domain, uts46=True).decode("ascii")
    except idna.IDNAError as e:
        if domain.isascii() and ASCII_DOMAIN_REGEX.match(domain):
            logger.bind(domain=domain, error=str(e)).debug("idna_fallback_to_raw_domain")
            return domain
        raise AddressSyntaxError(
            domain, SchemaProblem.MALFORMED, f"Invalid domain {domain!r}: {e}"
        ) from e


def parse_address(address: str) -> ParsedAddress:
    """
    Split an address into its local part and normalized domain.

    Args:
        address: Raw address, surrounding whitespace is ignored

    Returns:
        ParsedAddress with trimmed local part and ASCII domain

    Raises:
        AddressSyntaxError: Unless the address is exactly two non-empty parts
            joined by "@" with an encodable domain
    """
    address = address.strip()
    parts = address.split("@")
    if len(parts) != 2:
        raise AddressSyntaxError(
            address, schema_problem(address), f"Expected exactly one '@' in {address!r}"
        )

    local_part, raw_domain = parts[0].strip(), parts[1].strip()
    if not local_part or not raw_domain:
        raise AddressSyntaxError(
            address, schema_problem(address), f"Empty local part or domain in {address!r}"
        )

    try:
        domain = normalize_domain(raw_domain)
    except AddressSyntaxError as e:
        raise AddressSyntaxError(address, SchemaProblem.MALFORMED, str(e)) from e

    return ParsedAddress(local_part=local_part, domain=domain, raw_domain=raw_domain)
