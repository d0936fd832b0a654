"""Catalog of well known mail domains used for typo suggestions."""

import threading
from collections.abc import Iterable, Iterator

from .core.logging import get_logger
from .distance import DEFAULT_ALPHABET_SIZE, damerau_levenshtein

logger = get_logger(__name__)

DEFAULT_TYPO_THRESHOLD = 2

# Order matters: the first entry within the threshold wins
DEFAULT_DOMAINS: tuple[str, ...] = (
    "web.de",
    "gmx.de",
    "gmx.com",
    "gmx.net",
    "freenet.net",
    "hotmail.com",
    "gmail.com",
    "googlemail.com",
    "live.de",
    "live.com",
    "hotmail.de",
    "aol.com",
    "t-online.de",
    "hushmail.com",
    "uni.de",
    "yahoo.com",
    "yahoo.de",
)


def _clean_domains(domains: Iterable[str]) -> tuple[str, ...]:
    """Strip and lowercase entries, dropping blanks. Entries must be ASCII."""
    cleaned = []
    for domain in domains:
        domain = domain.strip().lower()
        if not domain:
            continue
        if not domain.isascii():
            raise ValueError(f"Catalog domains must be ASCII (punycode), got {domain!r}")
        cleaned.append(domain)
    return tuple(cleaned)


class DomainCatalog:
    """
    Ordered list of known-good domains.

    Reads take a snapshot of the current list, so a concurrent replace()
    never exposes a half-written catalog.
    """

    def __init__(self, domains: Iterable[str] | None = None) -> None:
        self._lock = threading.Lock()
        self._domains = _clean_domains(DEFAULT_DOMAINS if domains is None else domains)

    @property
    def domains(self) -> tuple[str, ...]:
        with self._lock:
            return self._domains

    def replace(self, domains: Iterable[str] | None) -> bool:
        """
        Replace the whole catalog.

        Args:
            domains: New ordered list of ASCII domains. None or an empty list
                leaves the current catalog untouched.

        Returns:
            True if the catalog was replaced
        """
        if domains is None:
            return False
        if isinstance(domains, str):
            domains = [domains]
        cleaned = _clean_domains(domains)
        if not cleaned:
            logger.debug("catalog_replace_ignored_empty")
            return False
        with self._lock:
            self._domains = cleaned
        logger.bind(size=len(cleaned)).info("catalog_replaced")
        return True

    def find_typo(
        self,
        domain: str,
        threshold: int = DEFAULT_TYPO_THRESHOLD,
        alphabet_size: int = DEFAULT_ALPHABET_SIZE,
    ) -> str | None:
        """Return the first catalog domain within `threshold` edits of `domain`."""
        for candidate in self.domains:
            if damerau_levenshtein(candidate, domain, alphabet_size) <= threshold:
                return candidate
        return None

    def __contains__(self, domain: object) -> bool:
        return domain in self.domains

    def __iter__(self) -> Iterator[str]:
        return iter(self.domains)

    def __len__(self) -> int:
        return len(self.domains)

    def __repr__(self) -> str:
        return f"DomainCatalog({list(self.domains)!r})"
