"""Order model

Represents a purchase order placed by a user, with product details, the
validity period, payment information and lifecycle status.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    Enum as SQLEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import relationship

from domain.orders.status import OrderStatus, PaymentType
from .base import Base


class Order(Base):
    """Order placed by a user.

    Lifecycle:
    1. Created by the order service (status=CREATED)
    2. Updated / patched while not SHIPPED
    3. SHIPPED orders are immutable and cannot be deleted
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_name = Column(String(255), nullable=False)
    amount = Column(Float, nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    status = Column(
        SQLEnum(OrderStatus, name="order_status", native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.CREATED,
    )
    payment_type = Column(
        SQLEnum(PaymentType, name="payment_type", native_enum=False, length=20),
        nullable=False,
    )
    card_number = Column(String(16), nullable=True)
    upi_id = Column(String(100), nullable=True)

    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False)
    user = relationship("User", back_populates="orders")

    __table_args__ = (
        Index("idx_order_user", "user_id"),
        CheckConstraint("status IN ('CREATED', 'SHIPPED', 'CANCELLED')", name="ck_orders_status"),
        CheckConstraint("payment_type IN ('CREDIT_CARD', 'UPI', 'CASH')", name="ck_orders_payment_type"),
        CheckConstraint(
            "payment_type <> 'CREDIT_CARD' OR card_number IS NOT NULL",
            name="ck_orders_card_number",
        ),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, status={self.status}, amount={self.amount})>"
