"""Abstract base class for domain oracles."""

from abc import ABC, abstractmethod


class BaseDomainOracle(ABC):
    """
    Answers facts about a domain that the validator cannot compute itself.

    Implementations raise OracleError on transient failures (network errors,
    timeouts). They must not retry on behalf of the validator.
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def has_mail_record(self, domain: str) -> bool:
        """
        Check whether the domain accepts mail (has a usable MX record).

        Args:
            domain: ASCII compatible, lowercase domain

        Returns:
            True if mail can be delivered to the domain
        """
        pass

    @abstractmethod
    async def is_registered(self, domain: str) -> bool:
        """
        Check whether the domain is registered at all.

        Args:
            domain: ASCII compatible, lowercase domain

        Returns:
            True if the domain exists
        """
        pass
