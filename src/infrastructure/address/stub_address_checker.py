"""Stub address verification service.

Accepts every address except those whose zip code was configured as unknown
or malformed. Used in development and tests when no address service URL is
configured.
"""

from collections.abc import Iterable

from src.core.result import Failure, Result, Success
from src.domain.entities import CheckedAddress, UnvalidatedAddress
from src.domain.enums import AddressValidationError
from src.domain.errors import RemoteServiceError


class StubAddressChecker:
    """In-process CheckAddressExists implementation.

    Attributes:
        calls: Addresses checked so far, in call order.
    """

    def __init__(
        self,
        *,
        unknown_zipcodes: Iterable[str] = (),
        malformed_zipcodes: Iterable[str] = (),
    ) -> None:
        """Initialize the stub.

        Args:
            unknown_zipcodes: Zip codes answered with ADDRESS_NOT_FOUND.
            malformed_zipcodes: Zip codes answered with INVALID_FORMAT.
        """
        self._unknown_zipcodes = frozenset(unknown_zipcodes)
        self._malformed_zipcodes = frozenset(malformed_zipcodes)
        self.calls: list[UnvalidatedAddress] = []

    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError | RemoteServiceError]:
        self.calls.append(address)
        if address.zipcode in self._malformed_zipcodes:
            return Failure(error=AddressValidationError.INVALID_FORMAT)
        if address.zipcode in self._unknown_zipcodes:
            return Failure(error=AddressValidationError.ADDRESS_NOT_FOUND)
        return Success(value=CheckedAddress(address=address))
