"""Null oracle - offline stand-in that knows nothing."""

from .base import BaseDomainOracle


class NullOracle(BaseDomainOracle):
    """
    Oracle that answers "no" to every question.

    Use for offline operation: every well-formed address then ends up as
    either a typo suggestion or notRegistered.
    """

    provider_name = "null"

    async def has_mail_record(self, domain: str) -> bool:
        return False

    async def is_registered(self, domain: str) -> bool:
        return False
