# API Routes

from .stores import router as stores_router
from .cart import router as cart_router
from .pricing import router as pricing_router
from .checkout import router as checkout_router

__all__ = ["stores_router", "cart_router", "pricing_router", "checkout_router"]
