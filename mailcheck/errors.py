"""Exception hierarchy for mailcheck."""

from .models import SchemaProblem


class MailcheckError(Exception):
    """Base class for mailcheck errors."""


class AddressSyntaxError(MailcheckError, ValueError):
    """Raised when an address cannot be split into local part and domain."""

    def __init__(self, address: str, problem: SchemaProblem, message: str) -> None:
        super().__init__(message)
        self.address = address
        self.problem = problem


class OracleError(MailcheckError):
    """Transient failure of a domain oracle (network error, timeout, ...)."""

    def __init__(self, domain: str, message: str = "") -> None:
        super().__init__(message or f"Oracle lookup failed for {domain}")
        self.domain = domain
