"""Product value model and its builder."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """Immutable product assembled by :class:`ProductBuilder`."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    # Non-finite Decimals (NaN, Infinity) are allowed
    price: Annotated[Decimal, Field(allow_inf_nan=True)] | None = None
    description: str | None = None

    @field_validator("price", mode="before")
    @classmethod
    def _float_price_via_str(cls, value: Any) -> Any:
        """Pass floats through ``str`` so 9.99 stays ``Decimal("9.99")``.

        Decimal(9.99) would keep the binary float error.
        """
        if isinstance(value, float):
            return str(value)
        return value

    @classmethod
    def builder(cls) -> "ProductBuilder":
        """Return a new, empty builder."""
        return ProductBuilder()


class ProductBuilder:
    """Stages optional product fields; every setter returns the builder."""

    def __init__(self) -> None:
        self.name: str | None = None
        self.price: Decimal | float | int | str | None = None
        self.description: str | None = None

    def set_name(self, name: str | None) -> "ProductBuilder":
        """Stage the product name.

        Args:
            name: Name to use, replacing any earlier value.

        Returns:
            This builder.
        """
        self.name = name
        return self

    def set_price(self, price: Decimal | float | int | str | None) -> "ProductBuilder":
        """Stage the product price.

        Args:
            price: Price to use, replacing any earlier value. Not validated.

        Returns:
            This builder.
        """
        self.price = price
        return self

    def set_description(self, description: str | None) -> "ProductBuilder":
        """Stage the product description.

        Args:
            description: Description to use, replacing any earlier value.

        Returns:
            This builder.
        """
        self.description = description
        return self

    def build(self) -> Product:
        """Create a product from the currently staged fields."""
        return Product(
            name=self.name,
            price=self.price,
            description=self.description,
        )
