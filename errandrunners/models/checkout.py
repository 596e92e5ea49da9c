"""Checkout models"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

from .pricing import PricingResult, ServiceZoneVerdict


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    CASH = "cash"


class DeliveryDetails(BaseModel):
    """Where the order is delivered"""
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    notes: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class CheckoutQuote(BaseModel):
    """Price summary shown before placing an order"""
    store_id: str
    subtotal: float
    service_fee: float
    delivery: PricingResult
    total: float
    service_area: ServiceZoneVerdict
    formatted_total: str = ""

    @property
    def delivery_fee(self) -> float:
        return self.delivery.total


class OrderItem(BaseModel):
    """Item in an order"""
    item_id: str
    name: str
    quantity: int
    unit_price: float
    total_price: float


class Order(BaseModel):
    """Submitted order"""
    order_id: str
    session_id: str
    store_id: str
    status: OrderStatus
    items: list[OrderItem]
    subtotal: float
    service_fee: float
    delivery_fee: float
    tax: float = 0.0
    total: float
    distance_km: float
    payment_method: PaymentMethod = PaymentMethod.CASH
    delivery: DeliveryDetails
    zone: Optional[str] = None
    customer_phone: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CheckoutRequest(BaseModel):
    """Request to place the order for the current cart"""
    customer_phone: Optional[str] = None
    delivery_notes: Optional[str] = None


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None


class SetDeliveryRequest(BaseModel):
    """Delivery address chosen by the customer"""
    address: str = Field(min_length=1)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
