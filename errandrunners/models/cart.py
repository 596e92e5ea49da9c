"""Cart models"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .store import Product, ProductOption


def option_line_id(product_id: str, option_name: str) -> str:
    """Line id for a product with a selected option, e.g. ``p1_Large_Combo``"""
    sanitized = re.sub(r"\s+", "_", option_name)
    return f"{product_id}_{sanitized}"


class CartLine(BaseModel):
    """One product (or product option) in the cart"""
    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    unit_price: float = Field(ge=0)
    image: Optional[str] = None
    quantity: int = Field(gt=0)
    store_id: str

    @property
    def total_price(self) -> float:
        return self.unit_price * self.quantity


class CartItemInput(BaseModel):
    """Item being added to the cart; quantity always starts at 1"""
    id: str = Field(min_length=1)
    name: str
    unit_price: float = Field(ge=0)
    image: Optional[str] = None
    store_id: str = Field(min_length=1)

    @classmethod
    def from_product(
        cls,
        product: Product,
        store_id: str,
        option: Optional[ProductOption] = None,
    ) -> "CartItemInput":
        """Build a cart item, freezing the current catalog price"""
        if option:
            return cls(
                id=option_line_id(product.id, option.name),
                name=f"{product.name} - {option.name}",
                unit_price=option.price,
                image=product.image,
                store_id=store_id,
            )
        return cls(
            id=product.id,
            name=product.name,
            unit_price=product.price,
            image=product.image,
            store_id=store_id,
        )


class CartChange(str, Enum):
    """What an add-to-cart call did to the cart"""
    ADDED = "added"
    INCREMENTED = "incremented"
    REPLACED = "replaced"


@dataclass
class AddToCartResult:
    """Outcome of adding an item to the cart"""
    change: CartChange
    line: CartLine
    previous_store_id: Optional[str] = None
    replaced_lines: list[CartLine] = field(default_factory=list)

    @property
    def replaced(self) -> bool:
        return self.change == CartChange.REPLACED


class CartEventType(str, Enum):
    UPDATED = "updated"
    EMPTIED = "emptied"
    CLEARED = "cleared"


@dataclass(frozen=True)
class CartEvent:
    """Published by the cart when its size changes or it is cleared"""
    kind: CartEventType
    item_count: int
    store_id: Optional[str] = None


# ==================== API models ====================


class AddToCartRequest(BaseModel):
    """Request to add a catalog product to the cart"""
    store_id: str = Field(min_length=1)
    product_id: str = Field(min_length=1)
    option_name: Optional[str] = None


class UpdateCartItemRequest(BaseModel):
    """Request to set a line quantity; zero or less removes the line"""
    quantity: int


class CartView(BaseModel):
    """Snapshot of a cart"""
    session_id: str
    store_id: Optional[str] = None
    items: list[CartLine] = []
    item_count: int = 0
    subtotal: float = 0.0
    formatted_subtotal: str = ""


class CartResponse(BaseModel):
    """Cart API response"""
    cart: CartView
    change: Optional[CartChange] = None
    replaced_items: list[CartLine] = []
    message: Optional[str] = None
