"""Address value object.

A postal address whose every field has passed the constrained-value layer.
Only the validation stage builds these, from an address the address
verification service has already accepted.
"""

from dataclasses import dataclass

from src.domain.value_objects.string50 import String50
from src.domain.value_objects.zip_code import ZipCode


@dataclass(frozen=True, kw_only=True)
class Address:
    """Validated postal address.

    Attributes:
        address_line1: First address line (required).
        address_line2: Second address line, None when absent.
        address_line3: Third address line, None when absent.
        address_line4: Fourth address line, None when absent.
        city: City name.
        zipcode: Five digit zip code.
    """

    address_line1: String50
    address_line2: String50 | None = None
    address_line3: String50 | None = None
    address_line4: String50 | None = None
    city: String50
    zipcode: ZipCode
