"""Store and product models"""

from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum

from .pricing import GeoPoint


class StoreCategory(str, Enum):
    RESTAURANT = "restaurant"
    FAST_FOOD = "fast_food"
    GROCERY = "grocery"
    PHARMACY = "pharmacy"


class ProductOption(BaseModel):
    """Selectable variant of a product, priced on its own"""
    name: str = Field(min_length=1)
    price: float = Field(ge=0)


class Product(BaseModel):
    """Item sold by a store"""
    id: str
    name: str
    description: str = ""
    price: float = Field(ge=0)
    image: Optional[str] = None
    in_stock: bool = True
    options: list[ProductOption] = []

    def get_option(self, name: str) -> Optional[ProductOption]:
        return next((o for o in self.options if o.name == name), None)


class Store(BaseModel):
    """Store in the directory"""
    id: str
    name: str
    category: StoreCategory
    address: str
    latitude: float
    longitude: float
    is_open: bool = True
    products: list[Product] = []

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    class Config:
        from_attributes = True


class StoreSummary(BaseModel):
    """Store listing entry without the product catalog"""
    id: str
    name: str
    category: StoreCategory
    address: str
    latitude: float
    longitude: float
    is_open: bool
