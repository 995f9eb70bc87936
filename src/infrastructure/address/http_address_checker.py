"""HTTP client for the address verification service.

Sends the raw address to ``POST {base_url}/addresses/verify`` and maps the
answer onto the CheckAddressExists port:

- 200: the address exists
- 404: AddressValidationError.ADDRESS_NOT_FOUND
- 400, 422: AddressValidationError.INVALID_FORMAT
- anything else, timeouts and connection errors: RemoteServiceError

Domain verdicts and service failures stay distinct: a 503 is never reported
as "Address Not Found".

Architecture:
    - Infrastructure layer (adapter for an external API)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for business errors)
"""

from dataclasses import asdict

import httpx
import structlog

from src.core.constants import REMOTE_SERVICE_TIMEOUT_DEFAULT, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import CheckedAddress, UnvalidatedAddress
from src.domain.enums import AddressValidationError
from src.domain.errors import RemoteServiceError, ServiceInfo

VERIFY_PATH = "/addresses/verify"

_STATUS_VERDICTS: dict[int, AddressValidationError] = {
    400: AddressValidationError.INVALID_FORMAT,
    404: AddressValidationError.ADDRESS_NOT_FOUND,
    422: AddressValidationError.INVALID_FORMAT,
}


class HttpAddressChecker:
    """CheckAddressExists implementation backed by a remote service.

    Attributes:
        _base_url: Service base URL (without trailing slash).
        _service_name: Service identifier for logging and error reports.
        _timeout: HTTP request timeout in seconds.
        _client: Optional shared client. When None a client is opened per
            request.

    Example:
        >>> checker = HttpAddressChecker(base_url="https://addresses.example.com")
        >>> result = await checker(address)
    """

    def __init__(
        self,
        *,
        base_url: str,
        service_name: str = "AddressVerification",
        timeout: float = REMOTE_SERVICE_TIMEOUT_DEFAULT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the address service client.

        Args:
            base_url: Service base URL (e.g. "https://addresses.example.com").
            service_name: Name reported in RemoteServiceError.
            timeout: HTTP request timeout in seconds.
            client: Shared AsyncClient, e.g. one built on httpx.MockTransport.
        """
        self._base_url = base_url.rstrip("/")
        self._service_name = service_name
        self._timeout = timeout
        self._client = client
        self._logger = structlog.get_logger("address_service")

    @property
    def endpoint(self) -> str:
        """Full URL of the verify endpoint."""
        return f"{self._base_url}{VERIFY_PATH}"

    async def close(self) -> None:
        """Close the shared client, if one was given.

        Should be called during application shutdown.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._logger.info("address_service_client_closed", endpoint=self.endpoint)

    async def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, AddressValidationError | RemoteServiceError]:
        """Verify an address with the remote service.

        Args:
            address: Raw address to verify.

        Returns:
            Success(CheckedAddress) when the service knows the address,
            Failure(AddressValidationError) when it rejects it,
            Failure(RemoteServiceError) when it cannot answer.
        """
        response_result = await self._post(asdict(address))
        if isinstance(response_result, Failure):
            return response_result

        response = response_result.value
        status = response.status_code

        if status == 200:
            return Success(value=CheckedAddress(address=address))

        verdict = _STATUS_VERDICTS.get(status)
        if verdict is not None:
            self._logger.info(
                "address_rejected",
                zipcode=address.zipcode,
                status_code=status,
                verdict=verdict.value,
            )
            return Failure(error=verdict)

        body = response.text[:RESPONSE_BODY_MAX_LENGTH]
        self._logger.warning(
            "address_service_unexpected_status",
            status_code=status,
            response_body=body,
        )
        return Failure(
            error=self._service_error(
                code=ErrorCode.REMOTE_SERVICE_FAILED,
                message=f"{self._service_name} returned HTTP {status}",
                cause=body or f"HTTP {status}",
            )
        )

    async def _post(
        self, payload: dict[str, str]
    ) -> Result[httpx.Response, RemoteServiceError]:
        """Send the verify request, converting transport errors to Failure.

        Args:
            payload: JSON body.

        Returns:
            Success(httpx.Response) for any HTTP answer,
            Failure(RemoteServiceError) on timeout or connection error.
        """
        try:
            if self._client is not None:
                response = await self._client.post(
                    self.endpoint, json=payload, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self.endpoint, json=payload)
            return Success(value=response)

        except httpx.TimeoutException as e:
            self._logger.warning(
                "address_service_timeout",
                endpoint=self.endpoint,
                error=str(e),
            )
            return Failure(
                error=self._service_error(
                    code=ErrorCode.REMOTE_SERVICE_TIMEOUT,
                    message=f"{self._service_name} request timed out",
                    cause=str(e) or "timeout",
                )
            )

        except httpx.RequestError as e:
            self._logger.warning(
                "address_service_connection_error",
                endpoint=self.endpoint,
                error=str(e),
            )
            return Failure(
                error=self._service_error(
                    code=ErrorCode.REMOTE_SERVICE_FAILED,
                    message=f"Failed to connect to {self._service_name}",
                    cause=str(e) or type(e).__name__,
                )
            )

    def _service_error(
        self, *, code: ErrorCode, message: str, cause: str
    ) -> RemoteServiceError:
        return RemoteServiceError(
            code=code,
            message=message,
            service=ServiceInfo(name=self._service_name, endpoint=self.endpoint),
            cause=cause,
        )
