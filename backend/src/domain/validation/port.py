"""OrderValidatorPort interface"""

from abc import ABC, abstractmethod
from typing import Any


class OrderValidatorPort(ABC):
    """Port interface for order request validation.

    Implementations raise a classified ``OrderAppError`` on the first
    failing rule and return None when the request is acceptable.
    """

    @abstractmethod
    def validate_order(self, order_request: Any) -> None:
        """Validate an incoming order request.

        Args:
            order_request: Object exposing ``user_id``, ``amount`` and ``payment``

        Raises:
            NotFoundError: If the referenced user does not exist
            BusinessRuleError: If a business rule is violated
            ValidationError: If a conditional field requirement is violated
        """
        pass
