"""Order storage"""

import uuid
from datetime import datetime
from typing import Optional

from ..models.cart import CartLine
from ..models.checkout import DeliveryDetails, Order, OrderItem, OrderStatus


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        session_id: str,
        store_id: str,
        lines: list[CartLine],
        subtotal: float,
        service_fee: float,
        delivery_fee: float,
        total: float,
        distance_km: float,
        delivery: DeliveryDetails,
        zone: Optional[str] = None,
        customer_phone: Optional[str] = None,
    ) -> Order:
        """Create an order from cart lines"""
        now = datetime.utcnow()

        order_items = [
            OrderItem(
                item_id=line.id,
                name=line.name,
                quantity=line.quantity,
                unit_price=line.unit_price,
                total_price=line.total_price,
            )
            for line in lines
        ]

        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            session_id=session_id,
            store_id=store_id,
            status=OrderStatus.PENDING,
            items=order_items,
            subtotal=subtotal,
            service_fee=service_fee,
            delivery_fee=delivery_fee,
            total=total,
            distance_km=distance_km,
            delivery=delivery,
            zone=zone,
            customer_phone=customer_phone,
            created_at=now,
            updated_at=now,
        )

        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, session_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders, optionally for one session"""
        orders = list(self.orders.values())
        if session_id:
            orders = [o for o in orders if o.session_id == session_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


# Singleton instance
order_db = OrderDatabase()
