"""Domain oracles: external facts about a domain the validator consumes."""

from mailcheck.errors import OracleError

from .base import BaseDomainOracle
from .cached import CachedOracle
from .null import NullOracle
from .static import StaticOracle

__all__ = [
    "BaseDomainOracle",
    "CachedOracle",
    "NullOracle",
    "OracleError",
    "StaticOracle",
]
