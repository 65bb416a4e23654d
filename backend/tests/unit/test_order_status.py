"""Unit tests for the order status state machine

Tests cover:
- Status parsing from loosely-typed input
- Forbidden transition (SHIPPED → CANCELLED)
- Update/delete guards on SHIPPED orders
"""

import pytest

from domain.errors import BusinessRuleError, ConflictError, ErrorKind, ValidationError
from domain.orders.status import (
    INITIAL_STATUS,
    OrderStatus,
    can_transition,
    ensure_deletable,
    ensure_updatable,
    parse_status,
    validate_transition,
)


class TestParseStatus:
    """Test parse_status"""

    def test_parses_exact_name(self):
        assert parse_status("SHIPPED") == OrderStatus.SHIPPED

    def test_parses_case_insensitively(self):
        assert parse_status(" cancelled ") == OrderStatus.CANCELLED

    def test_accepts_enum_member(self):
        assert parse_status(OrderStatus.CREATED) is OrderStatus.CREATED

    @pytest.mark.parametrize("value", ["DELIVERED", "", None, 42])
    def test_rejects_unknown_values(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_status(value)

        assert exc_info.value.field == "status"
        assert exc_info.value.kind == ErrorKind.VALIDATION


class TestTransitions:
    """Test status transition rules"""

    def test_initial_status_is_created(self):
        assert INITIAL_STATUS == OrderStatus.CREATED

    def test_shipped_to_cancelled_is_rejected(self):
        assert not can_transition(OrderStatus.SHIPPED, OrderStatus.CANCELLED)

        with pytest.raises(BusinessRuleError) as exc_info:
            validate_transition(OrderStatus.SHIPPED, OrderStatus.CANCELLED)

        assert exc_info.value.message == "Cannot cancel after shipment"

    @pytest.mark.parametrize("current,new", [
        (OrderStatus.CREATED, OrderStatus.SHIPPED),
        (OrderStatus.CREATED, OrderStatus.CANCELLED),
        (OrderStatus.CREATED, OrderStatus.CREATED),
        (OrderStatus.SHIPPED, OrderStatus.SHIPPED),
        (OrderStatus.CANCELLED, OrderStatus.SHIPPED),
    ])
    def test_other_transitions_are_applied_as_given(self, current, new):
        assert can_transition(current, new)
        validate_transition(current, new)


class TestShippedGuards:
    """SHIPPED orders cannot be replaced or deleted"""

    def test_shipped_order_not_updatable(self):
        with pytest.raises(ConflictError, match="Cannot update shipped order"):
            ensure_updatable(OrderStatus.SHIPPED)

    def test_shipped_order_not_deletable(self):
        with pytest.raises(ConflictError, match="Cannot delete shipped order"):
            ensure_deletable(OrderStatus.SHIPPED)

    @pytest.mark.parametrize("status", [OrderStatus.CREATED, OrderStatus.CANCELLED])
    def test_other_statuses_pass_guards(self, status):
        ensure_updatable(status)
        ensure_deletable(status)
