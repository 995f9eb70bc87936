"""Commands - Write operations that change state.

Commands represent caller intent to perform an action. They are immutable
dataclasses with imperative names (PlaceOrder).

Each command has a corresponding handler under ``handlers/``.
"""

from src.application.commands.order_commands import PlaceOrder

__all__ = [
    "PlaceOrder",
]
