from decimal import Decimal

import pytest

from payments_reporting.domain.entities import PaymentItem
from payments_reporting.domain.exceptions import InvalidPriceError


class TestPaymentItemCreate:
    def test_create_keeps_decimal_prices(self) -> None:
        item = PaymentItem.create("Book", Decimal("12.50"), Decimal("10.00"))

        assert item.name == "Book"
        assert item.regular_price == Decimal("12.50")
        assert item.final_price == Decimal("10.00")

    def test_create_coerces_int_and_str_prices(self) -> None:
        item = PaymentItem.create("Book", 20, "19.99")

        assert item.regular_price == Decimal("20")
        assert item.final_price == Decimal("19.99")
        assert isinstance(item.regular_price, Decimal)

    def test_create_accepts_zero_price(self) -> None:
        item = PaymentItem.create("Gift", 0, 0)

        assert item.final_price == Decimal("0")

    def test_create_raises_for_float_price(self) -> None:
        with pytest.raises(InvalidPriceError, match="must be Decimal, int or str"):
            PaymentItem.create("Book", 0.1, 0.1)  # type: ignore[arg-type]

    def test_create_raises_for_non_numeric_string(self) -> None:
        with pytest.raises(InvalidPriceError, match="is not a number"):
            PaymentItem.create("Book", "ten", "10")

    def test_create_raises_for_negative_price(self) -> None:
        with pytest.raises(InvalidPriceError, match="cannot be negative"):
            PaymentItem.create("Book", 10, -1)

    def test_create_raises_for_non_finite_price(self) -> None:
        with pytest.raises(InvalidPriceError, match="must be finite"):
            PaymentItem.create("Book", Decimal("Infinity"), 10)


class TestPaymentItemDiscount:
    def test_discount_is_regular_minus_final(self) -> None:
        item = PaymentItem.create("Book", "12.50", "10.00")

        assert item.discount == Decimal("2.50")

    def test_final_price_above_regular_is_not_rejected(self) -> None:
        item = PaymentItem.create("Book", 10, 12)

        assert item.discount == Decimal("-2")
