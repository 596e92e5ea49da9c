# Services

from .cart_store import CartStore
from .pricing import (
    PRICING_CONFIG,
    calculate_distance,
    calculate_delivery_price,
    calculate_price_breakdown,
    calculate_delivery_fee,
    round_distance,
)
from .service_area import ServiceAreaGate, is_within_service_area, OUT_OF_AREA_MESSAGE
from .reminders import CartReminderScheduler, ScheduledReminder
from .pricing_rules import PricingRulesClient
from .checkout import CheckoutError, build_quote, create_order

__all__ = [
    "CartStore",
    "PRICING_CONFIG",
    "calculate_distance",
    "calculate_delivery_price",
    "calculate_price_breakdown",
    "calculate_delivery_fee",
    "round_distance",
    "ServiceAreaGate",
    "is_within_service_area",
    "OUT_OF_AREA_MESSAGE",
    "CartReminderScheduler",
    "ScheduledReminder",
    "PricingRulesClient",
    "CheckoutError",
    "build_quote",
    "create_order",
]
