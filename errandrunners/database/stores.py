"""Store directory"""

from typing import Optional

from ..models.pricing import GeoPoint
from ..models.store import Product, ProductOption, Store, StoreCategory

# Seed directory, all inside the Georgetown delivery area
STORES: dict[str, Store] = {
    "store-001": Store(
        id="store-001",
        name="Demerara Curry House",
        category=StoreCategory.RESTAURANT,
        address="Main Street, Georgetown",
        latitude=6.8013,
        longitude=-58.1551,
        products=[
            Product(
                id="curry-chicken",
                name="Chicken Curry",
                description="Served with roti or rice.",
                price=1500,
                options=[
                    ProductOption(name="With Roti", price=1500),
                    ProductOption(name="With Rice", price=1400),
                ],
            ),
            Product(
                id="pepperpot",
                name="Pepperpot",
                description="Slow-cooked beef in cassareep with plait bread.",
                price=2500,
            ),
            Product(
                id="mauby",
                name="Mauby",
                description="Chilled mauby bark drink.",
                price=500,
            ),
        ],
    ),
    "store-002": Store(
        id="store-002",
        name="Stabroek Burgers",
        category=StoreCategory.FAST_FOOD,
        address="Water Street, Georgetown",
        latitude=6.8065,
        longitude=-58.1610,
        products=[
            Product(
                id="burger-classic",
                name="Classic Burger",
                price=1200,
                options=[
                    ProductOption(name="Large Combo", price=1900),
                ],
            ),
            Product(
                id="fries",
                name="Fries",
                price=600,
            ),
            Product(
                id="milkshake",
                name="Milkshake",
                price=900,
                in_stock=False,
            ),
        ],
    ),
    "store-003": Store(
        id="store-003",
        name="Kitty Market Grocery",
        category=StoreCategory.GROCERY,
        address="Vlissengen Road, Kitty",
        latitude=6.8240,
        longitude=-58.1440,
        products=[
            Product(id="rice-5kg", name="White Rice 5kg", price=1800),
            Product(id="plantain", name="Plantain (bunch)", price=700),
        ],
    ),
}


class StoreDatabase:
    """In-memory store directory"""

    def __init__(self):
        self.stores = {store_id: store.model_copy(deep=True) for store_id, store in STORES.items()}

    def get_store(self, store_id: str) -> Optional[Store]:
        """Get a store by ID"""
        return self.stores.get(store_id)

    def get_location(self, store_id: str) -> Optional[GeoPoint]:
        """Coordinates used for delivery pricing"""
        store = self.get_store(store_id)
        return store.location if store else None

    def get_product(self, store_id: str, product_id: str) -> Optional[Product]:
        """Get a product sold by a store"""
        store = self.get_store(store_id)
        if not store:
            return None
        return next((p for p in store.products if p.id == product_id), None)

    def list_stores(self, open_only: bool = False) -> list[Store]:
        """List stores"""
        stores = list(self.stores.values())
        if open_only:
            stores = [s for s in stores if s.is_open]
        return stores


# Singleton instance
store_db = StoreDatabase()
