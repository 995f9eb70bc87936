"""Validation stage of the place order workflow.

Turns an UnvalidatedOrder into a ValidatedOrder.

Flow (fail-fast, the first failure ends the stage):
1. Order id
2. Customer info: first name, last name, email
3. Shipping address: address service check (suspends), then field validation
4. Billing address: same procedure, independent service call
5. Order lines, left to right: line id, product code + catalog check, quantity

Architecture:
- Pure apart from the awaited address checks
- Collaborators are passed in, never looked up
- Field-level failures from the value objects become ValidationError with
  the field name attached
"""

from typing import TypeVar

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success, traverse
from src.domain.entities import (
    CheckedAddress,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from src.domain.enums import AddressValidationError
from src.domain.errors import OrderError, RemoteServiceError, ValidationError
from src.domain.protocols import CheckAddressExists, CheckProductExists
from src.domain.value_objects import (
    Address,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    PersonName,
    ProductCode,
    String50,
    ZipCode,
    create_order_quantity,
    create_product_code,
    product_code_value,
)

T = TypeVar("T")


def _field_error(result: Result[T, str], field: str) -> Result[T, ValidationError]:
    """Lift a value object failure message into a ValidationError."""
    if isinstance(result, Failure):
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=result.error,
                field=field,
            )
        )
    return result


def to_order_id(order_id: str) -> Result[OrderId, ValidationError]:
    """Validate the order id."""
    return _field_error(OrderId.create("OrderId", order_id), "OrderId")


def to_order_line_id(orderline_id: str) -> Result[OrderLineId, ValidationError]:
    """Validate an order line id."""
    return _field_error(OrderLineId.create("OrderLineId", orderline_id), "OrderLineId")


def to_customer_info(
    customer: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, ValidationError]:
    """Validate first name, last name and email, in that order.

    Args:
        customer: Raw customer fields.

    Returns:
        Success(CustomerInfo) or the first Failure(ValidationError).
    """
    first_name = _field_error(String50.create("FirstName", customer.first_name), "FirstName")
    if isinstance(first_name, Failure):
        return first_name

    last_name = _field_error(String50.create("LastName", customer.last_name), "LastName")
    if isinstance(last_name, Failure):
        return last_name

    email_address = _field_error(
        EmailAddress.create("EmailAddress", customer.email_address), "EmailAddress"
    )
    if isinstance(email_address, Failure):
        return email_address

    return Success(
        value=CustomerInfo(
            name=PersonName(first_name=first_name.value, last_name=last_name.value),
            email_address=email_address.value,
        )
    )


async def check_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
) -> Result[CheckedAddress, ValidationError | RemoteServiceError]:
    """Ask the address service about an address.

    The two domain verdicts map to fixed messages. Any other failure from the
    adapter, normally a RemoteServiceError, is returned unchanged.

    Args:
        check_address_exists: Address verification collaborator.
        address: Raw address to verify.

    Returns:
        Success(CheckedAddress), Failure(ValidationError) for a rejected
        address, or Failure(RemoteServiceError).
    """
    result = await check_address_exists(address)
    match result:
        case Success():
            return result
        case Failure(error=AddressValidationError() as verdict):
            code = (
                ErrorCode.ADDRESS_NOT_FOUND
                if verdict is AddressValidationError.ADDRESS_NOT_FOUND
                else ErrorCode.ADDRESS_INVALID_FORMAT
            )
            return Failure(
                error=ValidationError(
                    code=code,
                    message=OrderError.for_address_error(verdict),
                )
            )
        case _:
            return result


def to_address(checked_address: CheckedAddress) -> Result[Address, ValidationError]:
    """Validate the fields of an address the service accepted.

    Line 1 and city are required, lines 2-4 are optional, the zip code must
    be five digits. Fields are checked in that order.

    Args:
        checked_address: Address accepted by the address service.

    Returns:
        Success(Address) or the first Failure(ValidationError).
    """
    raw = checked_address.address

    address_line1 = _field_error(
        String50.create("AddressLine1", raw.address_line1), "AddressLine1"
    )
    if isinstance(address_line1, Failure):
        return address_line1

    address_line2 = _field_error(
        String50.create_opt("AddressLine2", raw.address_line2), "AddressLine2"
    )
    if isinstance(address_line2, Failure):
        return address_line2

    address_line3 = _field_error(
        String50.create_opt("AddressLine3", raw.address_line3), "AddressLine3"
    )
    if isinstance(address_line3, Failure):
        return address_line3

    address_line4 = _field_error(
        String50.create_opt("AddressLine4", raw.address_line4), "AddressLine4"
    )
    if isinstance(address_line4, Failure):
        return address_line4

    city = _field_error(String50.create("City", raw.city), "City")
    if isinstance(city, Failure):
        return city

    zipcode = _field_error(ZipCode.create("Zipcode", raw.zipcode), "Zipcode")
    if isinstance(zipcode, Failure):
        return zipcode

    return Success(
        value=Address(
            address_line1=address_line1.value,
            address_line2=address_line2.value,
            address_line3=address_line3.value,
            address_line4=address_line4.value,
            city=city.value,
            zipcode=zipcode.value,
        )
    )


async def to_checked_and_validated_address(
    check_address_exists: CheckAddressExists,
    address: UnvalidatedAddress,
) -> Result[Address, ValidationError | RemoteServiceError]:
    """Run the address service check, then validate the accepted fields."""
    checked = await check_address(check_address_exists, address)
    if isinstance(checked, Failure):
        return checked
    return to_address(checked.value)


def to_product_code(
    check_product_exists: CheckProductExists,
    product_code: str,
) -> Result[ProductCode, ValidationError]:
    """Validate a product code and check the catalog carries it.

    Args:
        check_product_exists: Catalog membership collaborator.
        product_code: Raw product code.

    Returns:
        Success(ProductCode) or Failure(ValidationError). An unknown product
        fails with "Invalid: <code>".
    """
    code = _field_error(create_product_code("ProductCode", product_code), "ProductCode")
    if isinstance(code, Failure):
        return code
    if not check_product_exists(code.value):
        return Failure(
            error=ValidationError(
                code=ErrorCode.PRODUCT_NOT_FOUND,
                message=OrderError.unknown_product(product_code_value(code.value)),
                field="ProductCode",
            )
        )
    return code


def to_order_quantity(
    product_code: ProductCode, quantity: float
) -> Result[OrderQuantity, ValidationError]:
    """Validate a quantity against the kind of product it is for."""
    return _field_error(
        create_order_quantity("OrderQuantity", product_code, quantity), "OrderQuantity"
    )


def to_validated_order_line(
    check_product_exists: CheckProductExists,
    line: UnvalidatedOrderLine,
) -> Result[ValidatedOrderLine, ValidationError]:
    """Validate one order line: id, product code, then quantity.

    Args:
        check_product_exists: Catalog membership collaborator.
        line: Raw order line.

    Returns:
        Success(ValidatedOrderLine) or the first Failure(ValidationError).
    """
    orderline_id = to_order_line_id(line.orderline_id)
    if isinstance(orderline_id, Failure):
        return orderline_id

    product_code = to_product_code(check_product_exists, line.product_code)
    if isinstance(product_code, Failure):
        return product_code

    quantity = to_order_quantity(product_code.value, line.quantity)
    if isinstance(quantity, Failure):
        return quantity

    return Success(
        value=ValidatedOrderLine(
            orderline_id=orderline_id.value,
            product_code=product_code.value,
            quantity=quantity.value,
        )
    )


async def validate_order(
    check_product_exists: CheckProductExists,
    check_address_exists: CheckAddressExists,
    unvalidated_order: UnvalidatedOrder,
) -> Result[ValidatedOrder, ValidationError | RemoteServiceError]:
    """Validate a raw order.

    Args:
        check_product_exists: Catalog membership collaborator.
        check_address_exists: Address verification collaborator.
        unvalidated_order: Raw order.

    Returns:
        Success(ValidatedOrder) or the first failure encountered. Lines after
        a failing line are not evaluated.
    """
    order_id = to_order_id(unvalidated_order.order_id)
    if isinstance(order_id, Failure):
        return order_id

    customer_info = to_customer_info(unvalidated_order.customer_info)
    if isinstance(customer_info, Failure):
        return customer_info

    shipping_address = await to_checked_and_validated_address(
        check_address_exists, unvalidated_order.shipping_address
    )
    if isinstance(shipping_address, Failure):
        return shipping_address

    billing_address = await to_checked_and_validated_address(
        check_address_exists, unvalidated_order.billing_address
    )
    if isinstance(billing_address, Failure):
        return billing_address

    lines = traverse(
        unvalidated_order.lines,
        lambda line: to_validated_order_line(check_product_exists, line),
    )
    if isinstance(lines, Failure):
        return lines

    return Success(
        value=ValidatedOrder(
            order_id=order_id.value,
            customer_info=customer_info.value,
            shipping_address=shipping_address.value,
            billing_address=billing_address.value,
            lines=tuple(lines.value),
        )
    )
