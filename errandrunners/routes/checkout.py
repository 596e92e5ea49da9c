"""Checkout API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..models.checkout import (
    CheckoutQuote,
    CheckoutRequest,
    CheckoutResponse,
    DeliveryDetails,
    Order,
    SetDeliveryRequest,
)
from ..models.pricing import PricingRules
from ..core.config import settings
from ..core.dependencies import (
    get_order_db,
    get_pricing_rules,
    get_service_area_gate,
    get_session,
    get_store_db,
)
from ..core.session import CustomerSession
from ..database.orders import OrderDatabase
from ..database.stores import StoreDatabase
from ..services.checkout import CheckoutError, build_quote, create_order
from ..services.service_area import ServiceAreaGate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def quote_for_session(
    session: CustomerSession,
    stores: StoreDatabase,
    rules: PricingRules,
    gate: ServiceAreaGate,
) -> CheckoutQuote:
    store_location = stores.get_location(session.cart.store_id) if session.cart.store_id else None
    try:
        return build_quote(
            cart=session.cart,
            store_location=store_location,
            delivery=session.delivery,
            rules=rules,
            service_fee=settings.service_fee,
            gate=gate,
            currency_symbol=settings.currency_symbol,
        )
    except CheckoutError as e:
        logger.info(f"Checkout refused for session {session.session_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/delivery", response_model=DeliveryDetails)
async def set_delivery(
    request: SetDeliveryRequest,
    session: CustomerSession = Depends(get_session),
):
    """Set the delivery address for the session"""
    delivery = DeliveryDetails(
        address=request.address,
        latitude=request.latitude,
        longitude=request.longitude,
    )
    session.set_delivery(delivery)
    return delivery


@router.get("/quote", response_model=CheckoutQuote)
async def get_quote(
    session: CustomerSession = Depends(get_session),
    stores: StoreDatabase = Depends(get_store_db),
    rules: PricingRules = Depends(get_pricing_rules),
    gate: ServiceAreaGate = Depends(get_service_area_gate),
):
    """Subtotal, service fee, delivery fee and total for the cart"""
    return quote_for_session(session, stores, rules, gate)


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    session: CustomerSession = Depends(get_session),
    stores: StoreDatabase = Depends(get_store_db),
    orders: OrderDatabase = Depends(get_order_db),
    rules: PricingRules = Depends(get_pricing_rules),
    gate: ServiceAreaGate = Depends(get_service_area_gate),
):
    """
    Place a cash order for the current cart.

    The cart is cleared once the order is created, which also cancels
    any pending cart reminders.
    """
    quote = quote_for_session(session, stores, rules, gate)

    delivery = session.delivery.model_copy(update={"notes": request.delivery_notes})
    order = create_order(
        session_id=session.session_id,
        cart=session.cart,
        quote=quote,
        delivery=delivery,
        order_db=orders,
        customer_phone=request.customer_phone,
    )

    return CheckoutResponse(success=True, order=order)


@router.get("/orders", response_model=list[Order])
async def list_orders(
    limit: int = 50,
    session: CustomerSession = Depends(get_session),
    orders: OrderDatabase = Depends(get_order_db),
):
    """List the session's recent orders"""
    return orders.list_orders(session_id=session.session_id, limit=limit)


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    session: CustomerSession = Depends(get_session),
    orders: OrderDatabase = Depends(get_order_db),
):
    """Get order details"""
    order = orders.get_order(order_id)
    if not order or order.session_id != session.session_id:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
