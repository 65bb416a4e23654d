"""OrderValidationEngine - orchestrates order request validation"""

import logging
from typing import Any

from .business_rules import BusinessRuleValidator
from .payment import PaymentConditionalValidator
from .port import OrderValidatorPort


logger = logging.getLogger(__name__)


class OrderValidationEngine(OrderValidatorPort):
    """Concrete implementation of OrderValidatorPort.

    Runs the validators in a fixed order and stops at the first failure:

    1. Credit limit (user existence, then amount against credit limit)
    2. Payment conditional fields

    A request with both an unknown user and a missing card number therefore
    always reports the unknown user. Failures propagate unchanged; nothing
    is aggregated or retried.
    """

    def __init__(
        self,
        business_rule_validator: BusinessRuleValidator,
        payment_validator: PaymentConditionalValidator,
    ):
        self.business_rule_validator = business_rule_validator
        self.payment_validator = payment_validator

    def validate_order(self, order_request: Any) -> None:
        """Run all order validations in sequence.

        Args:
            order_request: Object exposing ``user_id``, ``amount`` and ``payment``

        Raises:
            NotFoundError: User does not exist
            BusinessRuleError: Credit limit exceeded
            ValidationError: Card number missing for CREDIT_CARD
        """
        logger.debug(f"Starting order validation for user_id={order_request.user_id}")

        self.business_rule_validator.validate_credit_limit(
            order_request.user_id, order_request.amount
        )
        self.payment_validator.validate(order_request.payment)

        logger.debug(f"Order validation completed for user_id={order_request.user_id}")
