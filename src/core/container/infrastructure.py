"""Infrastructure dependency factories.

Application-scoped singletons for the workflow's collaborators:
- Settings (pydantic-settings)
- Logging (console, JSON in testing/ci)
- Product catalog (in-memory price list)
- Address verification (HTTP service or stub)
- Acknowledgement letters (HTML renderer, logging sender)

Call ``cache_clear()`` on a factory in tests that change the environment.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols import (
        CheckAddressExists,
        CreateAcknowledgementLetter,
        LoggerProtocol,
        SendAcknowledgement,
    )
    from src.infrastructure.catalog import InMemoryProductCatalog


# Sample price list served when no catalog is configured.
DEFAULT_PRODUCT_PRICES: dict[str, float] = {
    "W1001": 10.0,
    "W1002": 25.0,
    "W2040": 40.0,
    "G001": 2.5,
    "G002": 7.25,
    "G123": 19.99,
}


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.is_testing,
        level=settings.log_level,
        service=settings.app_name,
        version=settings.app_version,
    )


@lru_cache()
def get_product_catalog() -> "InMemoryProductCatalog":
    """Get product catalog singleton (app-scoped).

    Returns:
        InMemoryProductCatalog loaded with the sample price list. Its
        ``product_exists`` and ``get_product_price`` methods satisfy the
        catalog ports.
    """
    from src.infrastructure.catalog import InMemoryProductCatalog

    return InMemoryProductCatalog(DEFAULT_PRODUCT_PRICES)


@lru_cache()
def get_address_checker() -> "CheckAddressExists":
    """Get address verification singleton (app-scoped).

    Uses the remote service when ``ADDRESS_SERVICE_URL`` is set, otherwise
    the in-process stub that accepts every address. The remote checker owns
    one AsyncClient for its lifetime; release it with close_address_checker().

    Returns:
        Address checker implementing CheckAddressExists.
    """
    settings = get_settings()
    if settings.address_service_url:
        import httpx

        from src.infrastructure.address import HttpAddressChecker

        return HttpAddressChecker(
            base_url=settings.address_service_url,
            service_name=settings.address_service_name,
            timeout=settings.address_service_timeout,
            client=httpx.AsyncClient(timeout=settings.address_service_timeout),
        )

    from src.infrastructure.address import StubAddressChecker

    return StubAddressChecker()


async def close_address_checker() -> None:
    """Close the address checker's HTTP client and drop the singleton.

    Should be called during application shutdown. Does nothing if the
    checker was never created.
    """
    from src.infrastructure.address import HttpAddressChecker

    if get_address_checker.cache_info().currsize == 0:
        return

    checker = get_address_checker()
    if isinstance(checker, HttpAddressChecker):
        await checker.close()
    get_address_checker.cache_clear()


@lru_cache()
def get_letter_renderer() -> "CreateAcknowledgementLetter":
    """Get acknowledgement letter renderer singleton (app-scoped)."""
    from src.infrastructure.acknowledgement import HtmlLetterRenderer

    return HtmlLetterRenderer(get_settings().acknowledgement_company_name)


@lru_cache()
def get_acknowledgement_sender() -> "SendAcknowledgement":
    """Get acknowledgement sender singleton (app-scoped)."""
    from src.infrastructure.acknowledgement import StubAcknowledgementSender

    return StubAcknowledgementSender(get_logger())
