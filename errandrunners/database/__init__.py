# Database modules

from .stores import store_db, StoreDatabase
from .orders import order_db, OrderDatabase

__all__ = [
    "store_db",
    "StoreDatabase",
    "order_db",
    "OrderDatabase",
]
