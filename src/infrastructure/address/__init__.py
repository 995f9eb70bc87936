"""Address verification adapters.

Architecture:
- StubAddressChecker: in-process, configurable rejections
- HttpAddressChecker: remote service over httpx
- Use src.core.container.get_address_checker() for dependency injection
"""

from src.infrastructure.address.http_address_checker import HttpAddressChecker
from src.infrastructure.address.stub_address_checker import StubAddressChecker

__all__ = [
    "HttpAddressChecker",
    "StubAddressChecker",
]
