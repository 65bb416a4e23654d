"""Order service - business logic for order operations.

Every mutation follows the same shape: resolve the order (404), check the
state machine guards, run the validation pipeline where required, then
write. Nothing is persisted when any step fails.
"""

import logging
import math
from typing import Any, Mapping

from sqlalchemy.orm import Session

from domain.errors import ForbiddenError, NotFoundError, ValidationError
from domain.orders.ports import OrderRepositoryPort, UserLookupPort
from domain.orders.status import (
    INITIAL_STATUS,
    PaymentType,
    ensure_deletable,
    ensure_updatable,
    parse_status,
    validate_transition,
)
from domain.validation import (
    BusinessRuleValidator,
    OrderValidationEngine,
    OrderValidatorPort,
    PaymentConditionalValidator,
)
from infrastructure.repositories import SqlOrderRepository, SqlUserRepository
from models.order import Order
from observability.metrics import order_operations_total


logger = logging.getLogger(__name__)

# Keys honoured by patch_order; anything else is ignored
PATCHABLE_FIELDS = ("status", "amount")


class OrderService:
    """Service for order operations."""

    def __init__(
        self,
        orders: OrderRepositoryPort,
        users: UserLookupPort,
        validation_engine: OrderValidatorPort,
    ):
        self.orders = orders
        self.users = users
        self.validation_engine = validation_engine

    @classmethod
    def from_session(cls, db: Session) -> "OrderService":
        """Wire the service with SQLAlchemy repositories bound to ``db``."""
        users = SqlUserRepository(db)
        engine = OrderValidationEngine(
            BusinessRuleValidator(users),
            PaymentConditionalValidator(),
        )
        return cls(orders=SqlOrderRepository(db), users=users, validation_engine=engine)

    def create_order(self, request: Any) -> Order:
        """Create a new order in CREATED status.

        Args:
            request: OrderRequest (user_id, product_name, amount, dates, payment)

        Returns:
            The persisted Order

        Raises:
            NotFoundError: User does not exist
            ForbiddenError: User is blocked
            BusinessRuleError: Credit limit exceeded
            ValidationError: Card number missing for CREDIT_CARD
        """
        self.validation_engine.validate_order(request)

        user = self.users.find_user_by_id(request.user_id)
        if user is None:
            raise NotFoundError("User not found", field="user_id")
        if user.blocked:
            logger.warning(f"Blocked user {user.id} attempted to place an order")
            raise ForbiddenError("Blocked users cannot place orders")

        payment = request.payment
        order = Order(
            product_name=request.product_name,
            amount=request.amount,
            start_date=request.start_date,
            end_date=request.end_date,
            status=INITIAL_STATUS,
            payment_type=PaymentType(payment.payment_type),
            card_number=payment.card_number,
            upi_id=payment.upi_id,
            user=user,
        )
        order = self.orders.save_order(order)

        order_operations_total.labels(operation="create").inc()
        logger.info(f"Order {order.id} created for user {user.id}", extra={"order_id": order.id})
        return order

    def get_order(self, order_id: int, for_update: bool = False) -> Order:
        """Fetch an order by ID.

        Raises:
            NotFoundError: Order does not exist
        """
        order = self.orders.find_order_by_id(order_id, for_update=for_update)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    def update_order(self, order_id: int, request: Any) -> Order:
        """Replace the product and period fields of an order.

        Status and payment fields are left untouched.

        Raises:
            NotFoundError: Order or user does not exist
            ConflictError: Order is SHIPPED
            BusinessRuleError: Credit limit exceeded
            ValidationError: Card number missing for CREDIT_CARD
        """
        order = self.get_order(order_id, for_update=True)
        ensure_updatable(order.status)

        self.validation_engine.validate_order(request)

        order.product_name = request.product_name
        order.amount = request.amount
        order.start_date = request.start_date
        order.end_date = request.end_date
        order = self.orders.save_order(order)

        order_operations_total.labels(operation="update").inc()
        logger.info(f"Order {order.id} updated", extra={"order_id": order.id})
        return order

    def patch_order(self, order_id: int, updates: Mapping[str, Any]) -> Order:
        """Apply a partial update.

        Only ``status`` and ``amount`` are honoured. Both values are parsed
        and checked before either is written, so the patch applies as a
        whole or not at all. The amount is not re-checked against the
        credit limit.

        Raises:
            NotFoundError: Order does not exist
            BusinessRuleError: SHIPPED → CANCELLED requested
            ValidationError: Unparseable status or amount
        """
        order = self.get_order(order_id, for_update=True)

        changes: dict[str, Any] = {}
        if "status" in updates:
            new_status = parse_status(updates["status"])
            validate_transition(order.status, new_status)
            changes["status"] = new_status
        if "amount" in updates:
            changes["amount"] = _parse_amount(updates["amount"])

        ignored = sorted(set(updates) - set(PATCHABLE_FIELDS))
        if ignored:
            logger.debug(f"Ignoring non-patchable fields on order {order_id}: {ignored}")

        for field, value in changes.items():
            setattr(order, field, value)
        order = self.orders.save_order(order)

        order_operations_total.labels(operation="patch").inc()
        logger.info(
            f"Order {order.id} patched: {sorted(changes)}",
            extra={"order_id": order.id}
        )
        return order

    def delete_order(self, order_id: int) -> None:
        """Delete an order.

        Raises:
            NotFoundError: Order does not exist
            ConflictError: Order is SHIPPED
        """
        order = self.get_order(order_id, for_update=True)
        ensure_deletable(order.status)

        self.orders.delete_order(order)

        order_operations_total.labels(operation="delete").inc()
        logger.info(f"Order {order_id} deleted", extra={"order_id": order_id})


def _parse_amount(value: Any) -> float:
    """Parse a loosely-typed amount (number or numeric string)."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid amount: {value}", field="amount")
    try:
        amount = float(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid amount: {value}", field="amount")
    if not math.isfinite(amount):
        raise ValidationError(f"Invalid amount: {value}", field="amount")
    return amount
