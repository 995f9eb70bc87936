"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class for domain-level error handling
- Enums shared by every layer

The core module has NO dependencies on other application layers.
"""

from src.core.enums import Environment, ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success, traverse

__all__ = [
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "traverse",
]
