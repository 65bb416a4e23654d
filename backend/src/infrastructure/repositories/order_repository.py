"""Order repository for database operations"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from domain.orders.ports import OrderRepositoryPort
from models.order import Order


class SqlOrderRepository(OrderRepositoryPort):
    """Repository for orders table operations.

    ``find_order_by_id`` eager-loads the owning user. With ``for_update``
    the row is locked (SELECT ... FOR UPDATE) until the surrounding
    transaction ends, which gives update/patch/delete a consistent view of
    the order. SQLite ignores the lock clause.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    def find_order_by_id(self, order_id: int, for_update: bool = False) -> Optional[Order]:
        stmt = (
            select(Order)
            .options(joinedload(Order.user, innerjoin=True))
            .where(Order.id == order_id)
        )
        if for_update:
            stmt = stmt.with_for_update(of=Order)
        return self.db.execute(stmt).scalars().first()

    def save_order(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()
        return order

    def delete_order(self, order: Order) -> None:
        self.db.delete(order)
        self.db.flush()
