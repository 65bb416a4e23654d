"""Port interfaces consumed by the order core.

The core never talks to the database directly. Adapters in
``infrastructure.repositories`` implement these ports on top of SQLAlchemy.

Consistency requirement on implementations: for the duration of one
operation (one request), ``find_order_by_id`` followed by ``save_order`` /
``delete_order`` must observe a consistent snapshot of the row, e.g. via
row-level locking (SELECT ... FOR UPDATE) inside a single transaction.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class UserLookupPort(ABC):
    """Read-only user lookup used by business-rule validation."""

    @abstractmethod
    def find_user_by_id(self, user_id: int) -> Optional[Any]:
        """Return the user with the given id, or None.

        The returned object exposes at least ``id``, ``credit_limit``,
        ``blocked``, ``country`` and ``aadhaar_number``.
        """
        pass


class OrderRepositoryPort(ABC):
    """Order persistence used by the order service."""

    @abstractmethod
    def find_order_by_id(self, order_id: int, for_update: bool = False) -> Optional[Any]:
        """Return the order (with its owning user loaded), or None.

        With ``for_update`` the row stays locked until the transaction ends.
        """
        pass

    @abstractmethod
    def save_order(self, order: Any) -> Any:
        """Persist a new or modified order and return it."""
        pass

    @abstractmethod
    def delete_order(self, order: Any) -> None:
        """Remove an order."""
        pass
