"""Oracle backed by fixed allow-lists."""

from collections.abc import Iterable

from .base import BaseDomainOracle


class StaticOracle(BaseDomainOracle):
    """Answers from in-memory domain sets. Mail domains count as registered."""

    provider_name = "static"

    def __init__(
        self,
        mail_domains: Iterable[str] = (),
        registered_domains: Iterable[str] = (),
    ) -> None:
        """
        Initialize static oracle.

        Args:
            mail_domains: Domains which accept mail
            registered_domains: Domains which exist but do not accept mail
        """
        self.mail_domains = frozenset(d.strip().lower() for d in mail_domains)
        self.registered_domains = self.mail_domains | frozenset(
            d.strip().lower() for d in registered_domains
        )

    async def has_mail_record(self, domain: str) -> bool:
        return domain.lower() in self.mail_domains

    async def is_registered(self, domain: str) -> bool:
        return domain.lower() in self.registered_domains
