# ==============================================================================
#  Copyright 2025 Matthew Pounsett <matt@conundrum.com>
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
# ==============================================================================
"""Factory example: a fixed mapping from product kind to constructor."""

import logging
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ProductKind(str, Enum):
    """Kinds of product the factory can create."""

    A = "a"
    B = "b"


class ConcreteProduct(BaseModel):
    """A product tagged with its kind."""

    model_config = ConfigDict(frozen=True)

    kind: ProductKind

    @property
    def label(self) -> str:
        """Class-style name of the product, e.g. ``ConcreteProductA``."""
        return f"ConcreteProduct{self.kind.name}"

    def use(self) -> str:
        """Use the product.

        Returns:
            A message naming the product that was used.
        """
        logger.debug("Using %s", self.label)
        return f"Using {self.label}"


def make_product_a() -> ConcreteProduct:
    """Create a kind A product."""
    return ConcreteProduct(kind=ProductKind.A)


def make_product_b() -> ConcreteProduct:
    """Create a kind B product."""
    return ConcreteProduct(kind=ProductKind.B)


PRODUCT_FACTORIES: dict[ProductKind, Callable[[], ConcreteProduct]] = {
    ProductKind.A: make_product_a,
    ProductKind.B: make_product_b,
}


def create_product(kind: ProductKind | str) -> ConcreteProduct:
    """Create a product of the requested kind.

    Args:
        kind: A ProductKind or its string value ("a"/"b", any case).

    Returns:
        A new ConcreteProduct.

    Raises:
        ValueError: If the kind is not known.
    """
    if not isinstance(kind, ProductKind):
        kind = ProductKind(str(kind).lower())
    logger.debug("Creating product of kind %s", kind.value)
    return PRODUCT_FACTORIES[kind]()
