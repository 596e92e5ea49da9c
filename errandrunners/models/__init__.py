# ErrandRunners Models

from .pricing import GeoPoint, PricingRules, PricingResult, ServiceZone, ServiceZoneVerdict
from .store import Store, StoreSummary, StoreCategory, Product, ProductOption
from .cart import (
    CartLine,
    CartItemInput,
    CartChange,
    AddToCartResult,
    CartEvent,
    CartEventType,
    AddToCartRequest,
    UpdateCartItemRequest,
    CartView,
    CartResponse,
    option_line_id,
)
from .checkout import (
    Order,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    DeliveryDetails,
    CheckoutQuote,
    CheckoutRequest,
    CheckoutResponse,
    SetDeliveryRequest,
)

__all__ = [
    "GeoPoint",
    "PricingRules",
    "PricingResult",
    "ServiceZone",
    "ServiceZoneVerdict",
    "Store",
    "StoreSummary",
    "StoreCategory",
    "Product",
    "ProductOption",
    "CartLine",
    "CartItemInput",
    "CartChange",
    "AddToCartResult",
    "CartEvent",
    "CartEventType",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartView",
    "CartResponse",
    "option_line_id",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
    "DeliveryDetails",
    "CheckoutQuote",
    "CheckoutRequest",
    "CheckoutResponse",
    "SetDeliveryRequest",
]
