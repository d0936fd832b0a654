"""Address classification: parse, ask the oracle, suggest typo corrections."""

import asyncio
from collections.abc import Iterable

from .catalog import DEFAULT_TYPO_THRESHOLD, DomainCatalog
from .config import Settings, get_config
from .core.logging import get_logger
from .distance import DEFAULT_ALPHABET_SIZE
from .errors import AddressSyntaxError, OracleError
from .models import AddressStatus, ValidationResult
from .oracle import BaseDomainOracle, CachedOracle, NullOracle
from .parser import ParsedAddress, parse_address

logger = get_logger(__name__)


class AddressValidator:
    """
    Classifies an email address into exactly one AddressStatus.

    Stateless between calls apart from the shared catalog, so a single
    instance may serve concurrent validations.
    """

    def __init__(
        self,
        oracle: BaseDomainOracle | None = None,
        catalog: DomainCatalog | None = None,
        typo_threshold: int = DEFAULT_TYPO_THRESHOLD,
        alphabet_size: int = DEFAULT_ALPHABET_SIZE,
        trust_known_domains: bool = False,
    ) -> None:
        """
        Initialize validator.

        Args:
            oracle: Source of MX/registration facts, NullOracle if omitted
            catalog: Known domains for typo suggestions, defaults if omitted
            typo_threshold: Maximum edit distance for a suggestion
            alphabet_size: Alphabet bound passed to the distance function
            trust_known_domains: Treat exact catalog matches as valid without
                asking the oracle
        """
        self.oracle = oracle or NullOracle()
        self.catalog = catalog if catalog is not None else DomainCatalog()
        self.typo_threshold = typo_threshold
        self.alphabet_size = alphabet_size
        self.trust_known_domains = trust_known_domains

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        oracle: BaseDomainOracle | None = None,
        catalog: DomainCatalog | None = None,
    ) -> "AddressValidator":
        """
        Build a validator using thresholds from settings.

        A supplied oracle is wrapped in a CachedOracle unless
        oracle_cache_ttl_hours is 0.
        """
        if oracle is not None and settings.oracle_cache_ttl_hours > 0:
            oracle = CachedOracle(oracle, cache_ttl_hours=settings.oracle_cache_ttl_hours)
        return cls(
            oracle=oracle,
            catalog=catalog,
            typo_threshold=settings.typo_threshold,
            alphabet_size=settings.alphabet_size,
            trust_known_domains=settings.trust_known_domains,
        )

    async def validate(self, address: str) -> ValidationResult:
        """
        Validate a single address.

        Order of checks: syntax, known domain (if trusted), mail record,
        typo suggestion, registration.

        Args:
            address: The raw address as typed by the user

        Returns:
            ValidationResult, never with status PENDING
        """
        address = address.strip()
        try:
            parsed = parse_address(address)
        except AddressSyntaxError as e:
            logger.bind(address=address, problem=e.problem.value).debug("wrong_schema")
            return ValidationResult(
                address=address,
                status=AddressStatus.WRONG_SCHEMA,
                schema_problem=e.problem,
                reason=str(e),
            )

        domain = parsed.domain
        if self.trust_known_domains and domain in self.catalog:
            return self._result(address, parsed, AddressStatus.VALID, suggestion=address)

        try:
            if await self.oracle.has_mail_record(domain):
                return self._result(address, parsed, AddressStatus.VALID, suggestion=address)
        except asyncio.CancelledError as e:
            return self._cancelled_result(address, parsed, e)
        except Exception as e:
            return self._unknown_result(address, parsed, e)

        match = self.catalog.find_typo(domain, self.typo_threshold, self.alphabet_size)
        if match is not None:
            suggestion = f"{parsed.local_part}@{match}"
            logger.bind(domain=domain, suggestion=match).debug("typo_detected")
            return self._result(
                address, parsed, AddressStatus.TYPO_DETECTED, suggestion=suggestion
            )

        try:
            registered = await self.oracle.is_registered(domain)
        except asyncio.CancelledError as e:
            return self._cancelled_result(address, parsed, e)
        except Exception as e:
            return self._unknown_result(address, parsed, e)

        if registered:
            return self._result(
                address, parsed, AddressStatus.NO_MX_RECORD, reason=f"{domain} has no mail servers"
            )
        return self._result(
            address, parsed, AddressStatus.NOT_REGISTERED, reason=f"{domain} does not exist"
        )

    async def validate_batch(self, addresses: Iterable[str]) -> list[ValidationResult]:
        """Validate multiple addresses concurrently, results in input order."""
        return list(await asyncio.gather(*(self.validate(a) for a in addresses)))

    def _result(
        self,
        address: str,
        parsed: ParsedAddress,
        status: AddressStatus,
        suggestion: str | None = None,
        reason: str | None = None,
    ) -> ValidationResult:
        return ValidationResult(
            address=address,
            status=status,
            suggestion=suggestion,
            domain=parsed.domain,
            reason=reason,
        )

    def _cancelled_result(
        self, address: str, parsed: ParsedAddress, error: asyncio.CancelledError
    ) -> ValidationResult:
        """Map a cancelled lookup to UNKNOWN unless this task itself is being cancelled."""
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            raise error
        return self._unknown_result(address, parsed, error)

    def _unknown_result(
        self, address: str, parsed: ParsedAddress, error: BaseException
    ) -> ValidationResult:
        """Map an oracle failure to UNKNOWN (no retry here, the caller decides)."""
        if isinstance(error, (OracleError, TimeoutError, asyncio.CancelledError)):
            logger.bind(domain=parsed.domain, error=str(error)).warning("oracle_failure")
        else:
            logger.bind(domain=parsed.domain, error=repr(error)).error("oracle_unexpected_error")
        return self._result(
            address,
            parsed,
            AddressStatus.UNKNOWN,
            reason=f"{self.oracle.provider_name} lookup failed: {error}",
        )


_validator_instance: AddressValidator | None = None


def get_address_validator() -> AddressValidator:
    """
    Get the shared validator instance.

    Built once from settings and config.yml. Uses NullOracle, so callers
    needing real lookups construct their own AddressValidator.
    """
    global _validator_instance
    if _validator_instance is not None:
        return _validator_instance

    config = get_config()
    catalog = DomainCatalog()
    if config.catalog.domains:
        catalog.replace(config.catalog.domains)

    _validator_instance = AddressValidator.from_settings(config.settings, catalog=catalog)
    return _validator_instance


def set_domain_list(domains: Iterable[str] | None) -> bool:
    """
    Replace the shared catalog used for typo suggestions.

    None or an empty list is ignored. Do not call while validations are in flight.

    Returns:
        True if the catalog was replaced
    """
    return get_address_validator().catalog.replace(domains)


def reset_address_validator() -> None:
    """Reset the shared validator instance. Useful for testing."""
    global _validator_instance
    _validator_instance = None
