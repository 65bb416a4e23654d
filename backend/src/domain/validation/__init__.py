"""Validation domain module.

Implements the order validation pipeline (credit limit, then payment
conditions) and the generic cross-field check used at the API boundary.
"""

from .models import FieldViolation
from .port import OrderValidatorPort
from .payment import PaymentConditionalValidator
from .business_rules import BusinessRuleValidator
from .engine import OrderValidationEngine
from .cross_field import CrossFieldValidator, password_match
from .boundary import run_validators

__all__ = [
    "FieldViolation",
    "OrderValidatorPort",
    "PaymentConditionalValidator",
    "BusinessRuleValidator",
    "OrderValidationEngine",
    "CrossFieldValidator",
    "password_match",
    "run_validators",
]
