"""Payment-method conditional validation."""

import logging
from typing import Any, Optional

from domain.errors import ValidationError
from domain.orders.status import PaymentType


logger = logging.getLogger(__name__)


class PaymentConditionalValidator:
    """Validates payment fields whose presence depends on the payment type.

    Only conditional relationships are checked here. A missing payment
    object is accepted; presence is enforced by the request schema.
    """

    def validate(self, payment: Optional[Any]) -> None:
        """Validate a payment request.

        Args:
            payment: Object exposing ``payment_type`` and ``card_number``, or None

        Raises:
            ValidationError: If payment_type is CREDIT_CARD and card_number is absent
        """
        if payment is None:
            return

        card_number = getattr(payment, "card_number", None)
        if payment.payment_type == PaymentType.CREDIT_CARD and not _has_text(card_number):
            logger.warning("Payment validation failed: card number required for CREDIT_CARD")
            raise ValidationError("Card number required", field="card_number")

        logger.debug("Payment validation passed")


def _has_text(value: Optional[str]) -> bool:
    return value is not None and str(value).strip() != ""
