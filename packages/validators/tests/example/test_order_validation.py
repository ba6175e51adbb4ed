"""End-to-end tests for a domain validator built on nested composition."""

from decimal import Decimal

import pytest

from checkknobs_validators import ConstraintViolationError
from order_validation import Order, OrderLine


def make_line(**overrides):
    values = {
        "line_id": "L-1",
        "product_id": "P-1",
        "quantity": 2,
        "unit_price": Decimal("5.00"),
        "line_amount": Decimal("10.00"),
    }
    values.update(overrides)
    return OrderLine(**values)


class TestOrderValidation:
    """Test the order validator."""

    def test_valid_order_passes(self):
        """Test a complete order is valid."""
        order = Order(order_id="O-1", amount=Decimal("10.00"), lines=[make_line()])
        assert order.validate().to_result().valid

    def test_missing_order_id_and_zero_amount(self):
        """Test both order-level failures are reported under the order key, in order."""
        order = Order(order_id=None, amount=Decimal("0"), lines=[make_line()])
        message = order.validate().to_result().error_message
        assert message == (
            "Order Id: None - Order ID must not be null, "
            "Order Id: None - Order Amount must be greater than zero"
        )

    def test_missing_line_fields_keep_line_key(self):
        """Test line failures are keyed by the line, not the order."""
        order = Order(
            order_id="O-2",
            amount=Decimal("5.00"),
            lines=[make_line(line_id="L-1"), make_line(line_id="L-2", product_id=None)],
        )
        outcome = order.validate().to_result()
        assert outcome.error_message == "Line Id: L-2 - Product ID must not be null"
        assert outcome.error.keys == ["Line Id: L-2"]

    @pytest.mark.parametrize("lines", [None, []])
    def test_empty_lines_fail(self, lines):
        """Test orders without lines fail with the reduce message."""
        order = Order(order_id="O-3", amount=Decimal("5.00"), lines=lines)
        assert "Lines cannot be empty" in order.validate().to_result().error_message

    def test_raise_on_invalid_order(self):
        """Test the raising path carries every violation."""
        order = Order(order_id=None, amount=None, lines=[make_line(quantity=None)])
        with pytest.raises(ConstraintViolationError) as exc_info:
            order.validate().raise_if_invalid()
        assert [v.message for v in exc_info.value.violations] == [
            "Order ID must not be null",
            "Order Amount must be greater than zero",
            "Quantity must not be null",
        ]
