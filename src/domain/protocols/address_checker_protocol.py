"""Address verification port.

Defines the interface the validation stage uses to ask an external service
whether an address exists. The call is asynchronous: it is one of the two
suspension points of the workflow.

Infrastructure layer provides concrete implementations
(StubAddressChecker, HttpAddressChecker).
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities import CheckedAddress, UnvalidatedAddress
from src.domain.enums import AddressValidationError
from src.domain.errors import RemoteServiceError


class CheckAddressExists(Protocol):
    """Address verification service (port).

    Domain verdicts are reported as AddressValidationError. Adapters that
    talk to a remote service may also report RemoteServiceError when the
    service cannot give a verdict; the workflow passes that through as-is.

    Example Implementation:
        >>> async def check_address(address: UnvalidatedAddress):
        ...     return Success(value=CheckedAddress(address))
    """

    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError | RemoteServiceError]:
        """Verify an address.

        Args:
            address: Raw address to verify.

        Returns:
            Success(CheckedAddress) if the address exists,
            Failure(AddressValidationError) if the service rejected it,
            Failure(RemoteServiceError) if the service could not answer.
        """
        ...
