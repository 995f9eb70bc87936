"""Validators package exports.

Exports the constrained-value rule functions shared by all value objects.
"""

from src.domain.validators.functions import (
    create_decimal,
    create_int,
    create_like,
    create_string,
    create_string_opt,
    ensure_valid,
)

__all__ = [
    "create_decimal",
    "create_int",
    "create_like",
    "create_string",
    "create_string_opt",
    "ensure_valid",
]
