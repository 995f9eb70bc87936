"""Checked address.

An address the address verification service has accepted. The fields are
still raw strings: acceptance by the service says the address exists, not
that it fits the constrained types. ``to_address`` in the validation stage
does that second check.
"""

from dataclasses import dataclass

from src.domain.entities.unvalidated_order import UnvalidatedAddress


@dataclass(frozen=True)
class CheckedAddress:
    """Address accepted by the address verification service.

    Attributes:
        address: The accepted raw address.
    """

    address: UnvalidatedAddress
