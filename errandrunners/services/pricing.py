"""
Geo-Pricing Engine

Haversine distance between two coordinates and a linear, floored delivery
price derived from it.
"""

import logging
import math
from typing import Optional

from ..models.pricing import GeoPoint, PricingResult, PricingRules

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371

PRICING_CONFIG = {
    "BASE_PRICE": 800,
    "PRICE_PER_KM": 150,
    "MINIMUM_TOTAL": 800,
}

DEFAULT_RULES = PricingRules(
    base_price=PRICING_CONFIG["BASE_PRICE"],
    price_per_km=PRICING_CONFIG["PRICE_PER_KM"],
    minimum_price=PRICING_CONFIG["MINIMUM_TOTAL"],
)


def round_distance(distance_km: float) -> float:
    """
    Round a distance to 2 decimal places.

    Uses the built-in round(): ties go to the even digit, and a literal
    such as 2.675 rounds down because its float value sits just below the half.
    """
    return round(distance_km, 2)


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometers, rounded with round_distance()"""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # Float error can push a a hair past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_distance(EARTH_RADIUS_KM * c)


def calculate_price_breakdown(
    distance_km: float,
    rules: Optional[PricingRules] = None,
) -> PricingResult:
    """Delivery price for a distance, reporting whether the floor kicked in"""
    rules = rules or DEFAULT_RULES
    distance_fee = distance_km * rules.price_per_km
    subtotal = rules.base_price + distance_fee
    total = max(subtotal, rules.minimum_price)

    return PricingResult(
        distance_km=distance_km,
        base_price=rules.base_price,
        distance_fee=distance_fee,
        subtotal=subtotal,
        total=total,
        minimum_applied=total > subtotal,
    )


def calculate_delivery_price(
    distance_km: float,
    rules: Optional[PricingRules] = None,
) -> float:
    """max(base_price + distance_km * price_per_km, minimum_price)"""
    return calculate_price_breakdown(distance_km, rules).total


def calculate_delivery_fee(
    store: Optional[GeoPoint],
    delivery: Optional[GeoPoint],
    rules: Optional[PricingRules] = None,
) -> PricingResult:
    """
    Delivery price from a store location to a delivery location.

    Both coordinates must be known; callers hold off until they are.
    """
    if store is None or delivery is None:
        raise ValueError("Both store and delivery coordinates are required")

    distance = calculate_distance(
        store.latitude,
        store.longitude,
        delivery.latitude,
        delivery.longitude,
    )
    result = calculate_price_breakdown(distance, rules)
    logger.debug(f"Distance: {distance:.2f} km, delivery fee: {result.total}")
    return result
