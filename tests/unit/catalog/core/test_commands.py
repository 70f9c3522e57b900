"""Unit tests for command shape validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.catalog.core.models import CategoryCommand, ProductCommand


class TestCategoryCommand:
    def test_strips_whitespace(self):
        assert CategoryCommand(name="  Snacks ").name == "Snacks"

    @pytest.mark.parametrize("name", ["", "   ", "x" * 101])
    def test_rejects_bad_names(self, name):
        with pytest.raises(ValidationError):
            CategoryCommand(name=name)

    def test_rejects_long_description(self):
        with pytest.raises(ValidationError):
            CategoryCommand(name="Snacks", description="x" * 501)


class TestProductCommand:
    def _fields(self, **overrides):
        fields = {"name": "Chips", "price": Decimal("2.50"), "stock": 0, "category_id": 1}
        fields.update(overrides)
        return fields

    def test_accepts_zero_stock(self):
        assert ProductCommand(**self._fields()).stock == 0

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00"), Decimal("1.001")])
    def test_rejects_bad_prices(self, price):
        with pytest.raises(ValidationError):
            ProductCommand(**self._fields(price=price))

    def test_rejects_negative_stock(self):
        with pytest.raises(ValidationError):
            ProductCommand(**self._fields(stock=-1))

    def test_rejects_missing_category(self):
        fields = self._fields()
        del fields["category_id"]

        with pytest.raises(ValidationError):
            ProductCommand(**fields)
