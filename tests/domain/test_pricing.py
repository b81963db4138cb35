"""Unit tests for GST, discounts and coupons."""

import logging
from decimal import Decimal

import pytest

from ecom.domain.model.pricing import (
    Coupon,
    Discount,
    apply_coupon,
    gst_amount,
    gst_rate,
)
from ecom.domain.model.product import Category
from ecom.domain.model.value_objects import Money
from tests.builders import laptop, rice, tshirt


class TestGst:

    @pytest.mark.parametrize(
        "category, rate",
        [
            (Category.ELECTRONICS, Decimal("0.18")),
            (Category.CLOTHING, Decimal("0.12")),
            (Category.GROCERY, Decimal("0.05")),
        ],
    )
    def test_rates(self, category, rate):
        assert gst_rate(category) == rate

    def test_every_category_has_a_rate(self):
        for category in Category:
            assert gst_rate(category) > 0

    @pytest.mark.parametrize(
        "product, quantity, expected",
        [
            (laptop(), 1, "8100"),
            (laptop("22000"), 3, "11880"),
            (tshirt(), 2, "191.76"),
            (rice(), 2, "120"),
            (rice("0"), 4, "0"),
        ],
    )
    def test_amount_is_price_times_quantity_times_rate(self, product, quantity, expected):
        assert gst_amount(product, quantity) == Money.of(expected)


class TestDiscount:

    def test_no_discount_is_identity(self):
        assert Discount.NO_DISCOUNT.apply(Money.of("53100")) == Money.of("53100")

    def test_festival_takes_ten_percent(self):
        assert Discount.FESTIVAL.apply(Money.of("53100")) == Money.of("47790")

    def test_clearance_takes_twenty_five_percent(self):
        assert Discount.CLEARANCE_SALE.apply(Money.of("2520")) == Money.of("1890")

    def test_labels(self):
        assert Discount.NO_DISCOUNT.label == "No Discount"
        assert Discount.FESTIVAL.label == "Festival Discount (10%)"
        assert Discount.CLEARANCE_SALE.label == "Clearance Sale (25%)"


class TestCoupon:

    @pytest.mark.parametrize("code", ["SAVE10", "save10", "  Save10 "])
    def test_lookup_is_case_insensitive(self, code):
        assert Coupon.lookup(code) is Coupon.SAVE10

    @pytest.mark.parametrize("code", [None, "", "   ", "BOGUS"])
    def test_lookup_of_blank_or_unknown_is_none(self, code):
        assert Coupon.lookup(code) is None

    def test_save10(self):
        assert apply_coupon(Money.of("47790"), "SAVE10") == Money.of("43011")

    def test_flat200(self):
        assert apply_coupon(Money.of("1890"), "flat200") == Money.of("1690")

    def test_flat200_floors_at_zero(self):
        assert apply_coupon(Money.of("150"), "FLAT200") == Money.zero()

    def test_absent_coupon_is_identity(self):
        assert apply_coupon(Money.of("100"), None) == Money.of("100")
        assert apply_coupon(Money.of("100"), "") == Money.of("100")

    def test_unknown_coupon_is_identity_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="ecom"):
            assert apply_coupon(Money.of("100"), "HALFOFF") == Money.of("100")
        assert "HALFOFF" in caplog.text
