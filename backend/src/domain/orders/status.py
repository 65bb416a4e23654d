"""Order status state machine.

State Flow:
    CREATED → SHIPPED
    CREATED → CANCELLED

SHIPPED orders are frozen: they cannot be updated, deleted or cancelled.
Status changes requested through a partial update are otherwise applied
as given (see ``FORBIDDEN_TRANSITIONS``).
"""

from enum import Enum

from domain.errors import BusinessRuleError, ConflictError, ValidationError


class OrderStatus(str, Enum):
    """Order lifecycle status."""
    CREATED = "CREATED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


class PaymentType(str, Enum):
    """Supported payment methods."""
    CREDIT_CARD = "CREDIT_CARD"
    UPI = "UPI"
    CASH = "CASH"


INITIAL_STATUS = OrderStatus.CREATED

# Statuses in which the order content can no longer change
FROZEN_STATUSES = frozenset({OrderStatus.SHIPPED})

# (from, to) pairs rejected on a status change
FORBIDDEN_TRANSITIONS = {
    (OrderStatus.SHIPPED, OrderStatus.CANCELLED): "Cannot cancel after shipment",
}


def parse_status(value) -> OrderStatus:
    """Parse a loosely-typed status value (enum member or string).

    Raises:
        ValidationError: If the value does not name a known status
    """
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(str(value).strip().upper())
    except ValueError:
        raise ValidationError(
            f"Invalid order status: {value}",
            field="status",
            details={"allowed": [s.value for s in OrderStatus]},
        )


def can_transition(current_status: OrderStatus, new_status: OrderStatus) -> bool:
    """Check if a status change is allowed without raising.

    Example:
        >>> can_transition(OrderStatus.CREATED, OrderStatus.SHIPPED)
        True
        >>> can_transition(OrderStatus.SHIPPED, OrderStatus.CANCELLED)
        False
    """
    return (current_status, new_status) not in FORBIDDEN_TRANSITIONS


def validate_transition(current_status: OrderStatus, new_status: OrderStatus) -> None:
    """Validate that a status change is allowed.

    Args:
        current_status: Current order status
        new_status: Requested status

    Raises:
        BusinessRuleError: If the transition is forbidden
    """
    message = FORBIDDEN_TRANSITIONS.get((current_status, new_status))
    if message:
        raise BusinessRuleError(
            message,
            field="status",
            details={"from": current_status.value, "to": new_status.value},
        )


def ensure_updatable(current_status: OrderStatus) -> None:
    """Raise ConflictError if the order can no longer be replaced."""
    if current_status in FROZEN_STATUSES:
        raise ConflictError("Cannot update shipped order")


def ensure_deletable(current_status: OrderStatus) -> None:
    """Raise ConflictError if the order can no longer be deleted."""
    if current_status in FROZEN_STATUSES:
        raise ConflictError("Cannot delete shipped order")
