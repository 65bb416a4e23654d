"""Business-rule validation against the ordering user."""

import logging
from typing import Any

from domain.errors import BusinessRuleError, NotFoundError
from domain.orders.ports import UserLookupPort


logger = logging.getLogger(__name__)


class BusinessRuleValidator:
    """Validates domain rules that depend on the user placing the order.

    Rules:
    - User must exist (NotFoundError)
    - Order amount must not exceed the user's credit limit (BusinessRuleError)
    """

    def __init__(self, users: UserLookupPort):
        self.users = users

    def validate_credit_limit(self, user_id: Any, amount: Any) -> None:
        """Validate that the user can afford an order of the given amount.

        Args:
            user_id: ID of the user placing the order
            amount: Requested order amount

        Raises:
            NotFoundError: If the user does not exist
            BusinessRuleError: If amount exceeds the user's credit limit
        """
        user = self.users.find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", field="user_id")

        if float(amount) > float(user.credit_limit):
            logger.warning(
                f"Credit limit exceeded for user {user_id}: "
                f"amount={amount} credit_limit={user.credit_limit}"
            )
            raise BusinessRuleError(
                "Credit limit exceeded",
                field="amount",
                details={"credit_limit": float(user.credit_limit), "amount": float(amount)},
            )
