"""Tests for the Product model and its builder."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from architectural_patterns.models import Product, ProductBuilder


class TestProductBuilder:
    """Builder staging and build behaviour."""

    @pytest.fixture
    def builder(self):
        return Product.builder()

    def test_empty_build(self, builder):
        product = builder.build()
        assert product.name is None
        assert product.price is None
        assert product.description is None

    def test_setters_chain(self, builder):
        assert builder.set_name("Widget") is builder
        assert builder.set_price(Decimal("9.99")) is builder
        assert builder.set_description("A widget") is builder

    def test_all_fields(self, builder):
        product = (
            builder.set_name("Widget")
            .set_price(Decimal("9.99"))
            .set_description("A widget")
            .build()
        )
        assert product == Product(
            name="Widget", price=Decimal("9.99"), description="A widget"
        )

    @pytest.mark.parametrize(
        "setter, field, first, second",
        [
            ("set_name", "name", "First", "Second"),
            ("set_price", "price", Decimal("1.00"), Decimal("2.50")),
            ("set_description", "description", "Old", "New"),
        ],
    )
    def test_last_value_wins(self, builder, setter, field, first, second):
        getattr(builder, setter)(first)
        getattr(builder, setter)(second)
        product = builder.build()
        assert getattr(product, field) == second
        for other in {"name", "price", "description"} - {field}:
            assert getattr(product, other) is None

    @pytest.mark.parametrize(
        "price",
        [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity"), float("inf")],
    )
    def test_non_finite_price(self, builder, price):
        product = builder.set_price(price).build()
        assert isinstance(product.price, Decimal)
        assert not product.price.is_finite()

    def test_nan_price_stays_nan(self, builder):
        assert builder.set_price(Decimal("NaN")).build().price.is_nan()

    def test_no_validation_of_price(self, builder):
        product = builder.set_price(Decimal("-5")).build()
        assert product.price == Decimal("-5")

    def test_float_price_keeps_its_digits(self, builder):
        assert builder.set_price(9.99).build().price == Decimal("9.99")

    def test_int_price(self, builder):
        assert builder.set_price(3).build().price == Decimal(3)

    def test_builders_are_independent(self):
        first = ProductBuilder().set_name("one")
        second = ProductBuilder()
        assert first.build().name == "one"
        assert second.build().name is None

    def test_build_returns_new_objects(self, builder):
        builder.set_name("Widget")
        assert builder.build() is not builder.build()


class TestProduct:
    def test_immutable(self):
        product = Product.builder().set_name("Widget").build()
        with pytest.raises(ValidationError):
            product.name = "Other"

    def test_equality_by_fields(self):
        assert Product(name="a") == Product.builder().set_name("a").build()
        assert Product(name="a") != Product(name="b")
