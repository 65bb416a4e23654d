"""Order domain module - status state machine and persistence ports."""

from .status import (
    OrderStatus,
    PaymentType,
    INITIAL_STATUS,
    FORBIDDEN_TRANSITIONS,
    can_transition,
    validate_transition,
    ensure_updatable,
    ensure_deletable,
    parse_status,
)
from .ports import UserLookupPort, OrderRepositoryPort

__all__ = [
    "OrderStatus",
    "PaymentType",
    "INITIAL_STATUS",
    "FORBIDDEN_TRANSITIONS",
    "can_transition",
    "validate_transition",
    "ensure_updatable",
    "ensure_deletable",
    "parse_status",
    "UserLookupPort",
    "OrderRepositoryPort",
]
