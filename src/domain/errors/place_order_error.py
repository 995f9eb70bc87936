"""Place order workflow failures.

The workflow returns exactly one of these on failure:

- ValidationError: malformed or rejected input, unknown products,
  rejected addresses.
- PricingError: a line price or the order total falls outside its bounds.
- RemoteServiceError: a collaborator could not be reached or answered with
  something other than a domain verdict (timeouts, 5xx). Distinct from a
  domain rejection such as "Address Not Found".

Architecture:
- Domain layer errors (part of the workflow contract)
- Inherit from DomainError (core layer)
- Used in Result types (railway-oriented programming)

Usage:
    from src.domain.errors import PlaceOrderError, ValidationError

    match result:
        case Failure(error=ValidationError(message=message)):
            ...
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceInfo:
    """Identifies a remote collaborator in error reports.

    Attributes:
        name: Service name (e.g. "AddressVerification").
        endpoint: URL the request was sent to.
    """

    name: str
    endpoint: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Order input validation failure.

    Attributes:
        code: ErrorCode (VALIDATION_FAILED unless more specific).
        message: Human-readable message.
        field: Field name that failed validation, when known.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PricingError(DomainError):
    """Price or billing amount out of bounds.

    Attributes:
        code: ErrorCode (PRICING_FAILED).
        message: Human-readable message.
        details: Additional context.
    """


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteServiceError(DomainError):
    """Collaborator unavailable or misbehaving.

    Attributes:
        code: ErrorCode (REMOTE_SERVICE_FAILED or REMOTE_SERVICE_TIMEOUT).
        message: Human-readable message.
        service: Which service failed.
        cause: Description of the underlying problem.
        details: Additional context.
    """

    service: ServiceInfo
    cause: str


PlaceOrderError: TypeAlias = ValidationError | PricingError | RemoteServiceError
