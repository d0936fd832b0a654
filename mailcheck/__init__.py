"""Email address validation with typo suggestions for well known domains."""

from .catalog import DEFAULT_DOMAINS, DomainCatalog
from .distance import damerau_levenshtein
from .errors import AddressSyntaxError, MailcheckError, OracleError
from .models import AddressStatus, SchemaProblem, ValidationResult
from .oracle import BaseDomainOracle, CachedOracle, NullOracle, StaticOracle
from .parser import ParsedAddress, parse_address
from .validator import (
    AddressValidator,
    get_address_validator,
    reset_address_validator,
    set_domain_list,
)

__all__ = [
    "DEFAULT_DOMAINS",
    "AddressStatus",
    "AddressSyntaxError",
    "AddressValidator",
    "BaseDomainOracle",
    "CachedOracle",
    "DomainCatalog",
    "MailcheckError",
    "NullOracle",
    "OracleError",
    "ParsedAddress",
    "SchemaProblem",
    "StaticOracle",
    "ValidationResult",
    "damerau_levenshtein",
    "get_address_validator",
    "parse_address",
    "reset_address_validator",
    "set_domain_list",
]
