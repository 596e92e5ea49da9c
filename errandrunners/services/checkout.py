"""Checkout: price quote and order creation for a cart"""

import logging
from typing import Optional

from ..models.checkout import CheckoutQuote, DeliveryDetails, Order
from ..models.pricing import GeoPoint, PricingRules
from ..database.orders import OrderDatabase
from .cart_store import CartStore
from .currency import CURRENCY_SYMBOL, format_currency, freeze_price
from .pricing import calculate_delivery_fee
from .service_area import ServiceAreaGate, is_within_service_area

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """The cart cannot be checked out as it stands"""


def build_quote(
    cart: CartStore,
    store_location: Optional[GeoPoint],
    delivery: Optional[DeliveryDetails],
    rules: PricingRules,
    service_fee: float,
    gate: Optional[ServiceAreaGate] = None,
    currency_symbol: str = CURRENCY_SYMBOL,
) -> CheckoutQuote:
    """
    Price the cart for delivery.

    Raises:
        CheckoutError: empty cart, unknown store, missing address or
            coordinates, or a delivery point outside the service area
    """
    if cart.is_empty:
        raise CheckoutError("Your cart is empty")

    if not cart.store_id:
        raise CheckoutError(
            "Unable to identify the store. Please try adding items to your cart again."
        )

    if store_location is None:
        raise CheckoutError(f"No location on file for store {cart.store_id}")

    if delivery is None or not delivery.address.strip():
        raise CheckoutError("Please enter your delivery address before placing the order.")

    if not delivery.has_coordinates:
        raise CheckoutError("Please pin your exact location for accurate delivery.")

    if gate:
        verdict = gate.check(delivery.latitude, delivery.longitude)
    else:
        verdict = is_within_service_area(delivery.latitude, delivery.longitude)
    if not verdict.allowed:
        raise CheckoutError(verdict.message)

    delivery_point = GeoPoint(latitude=delivery.latitude, longitude=delivery.longitude)
    pricing = calculate_delivery_fee(store_location, delivery_point, rules)

    subtotal = cart.get_total()
    total = subtotal + service_fee + pricing.total

    return CheckoutQuote(
        store_id=cart.store_id,
        subtotal=subtotal,
        service_fee=service_fee,
        delivery=pricing,
        total=total,
        service_area=verdict,
        formatted_total=format_currency(total, currency_symbol),
    )


def create_order(
    session_id: str,
    cart: CartStore,
    quote: CheckoutQuote,
    delivery: DeliveryDetails,
    order_db: OrderDatabase,
    customer_phone: Optional[str] = None,
) -> Order:
    """Persist an order for the quoted cart and clear the cart"""
    order = order_db.create_order(
        session_id=session_id,
        store_id=quote.store_id,
        lines=cart.lines,
        subtotal=freeze_price(quote.subtotal),
        service_fee=freeze_price(quote.service_fee),
        delivery_fee=freeze_price(quote.delivery_fee),
        total=freeze_price(quote.total),
        distance_km=quote.delivery.distance_km,
        delivery=delivery,
        zone=quote.service_area.zone,
        customer_phone=customer_phone,
    )

    cart.clear_cart()

    logger.info(
        f"Order {order.order_id} created: {quote.formatted_total} "
        f"from store {order.store_id} ({order.zone})"
    )
    return order
