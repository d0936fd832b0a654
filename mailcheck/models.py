"""Address validation models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class AddressStatus(str, Enum):
    """Classification outcome of an address check."""

    VALID = "valid"  # Domain accepts mail
    WRONG_SCHEMA = "wrongSchema"  # Missing @, empty part, malformed domain
    NOT_REGISTERED = "notRegistered"  # Domain is not registered at all
    NO_MX_RECORD = "noMxRecord"  # Registered, but cannot receive mail
    TYPO_DETECTED = "typoDetected"  # Domain is close to a well known one
    UNKNOWN = "unknown"  # Oracle failed, could not decide
    PENDING = "pending"  # Placeholder set by the caller, never returned by the validator


# Statuses which carry a suggested address
SUGGESTION_STATUSES = frozenset({AddressStatus.VALID, AddressStatus.TYPO_DETECTED})


class SchemaProblem(str, Enum):
    """Presentation hint for WRONG_SCHEMA results."""

    INCOMPLETE = "incomplete"  # Neither "@" nor "." typed yet
    MALFORMED = "malformed"


class ValidationResult(BaseModel):
    """Result of a single address validation."""

    model_config = ConfigDict(frozen=True)

    address: str
    status: AddressStatus
    suggestion: str | None = None
    domain: str | None = None
    schema_problem: SchemaProblem | None = None
    reason: str | None = None

    @model_validator(mode="after")
    def _check_suggestion(self) -> "ValidationResult":
        has_suggestion = self.suggestion is not None
        if has_suggestion != (self.status in SUGGESTION_STATUSES):
            raise ValueError(
                f"suggestion must be set if and only if status is valid or typoDetected "
                f"(status={self.status.value}, suggestion={self.suggestion!r})"
            )
        return self

    @classmethod
    def pending(cls, address: str) -> "ValidationResult":
        """Placeholder result for callers which display an in-progress state."""
        return cls(address=address.strip(), status=AddressStatus.PENDING)

    @property
    def is_valid(self) -> bool:
        return self.status == AddressStatus.VALID
