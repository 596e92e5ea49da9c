"""FastAPI dependencies shared by the routers"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from .config import settings
from .session import SessionManager, CustomerSession
from ..database.stores import store_db, StoreDatabase
from ..database.orders import order_db, OrderDatabase
from ..models.pricing import PricingRules
from ..services.pricing_rules import PricingRulesClient
from ..services.service_area import ServiceAreaGate

session_manager = SessionManager(
    reminders_enabled=settings.cart_reminders_enabled,
    max_age_hours=settings.session_max_age_hours,
)
service_area_gate = ServiceAreaGate()

# Created lazily so the HTTP client binds to the running event loop
rules_client: Optional[PricingRulesClient] = None


def get_session_manager() -> SessionManager:
    return session_manager


def get_session(
    x_session_id: Optional[str] = Header(None),
    manager: SessionManager = Depends(get_session_manager),
) -> CustomerSession:
    """Resolve the caller's session from the X-Session-Id header"""
    if not x_session_id:
        raise HTTPException(status_code=400, detail="Missing X-Session-Id header")

    session = manager.get_session(x_session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")

    session.touch()
    return session


def get_store_db() -> StoreDatabase:
    return store_db


def get_order_db() -> OrderDatabase:
    return order_db


def get_service_area_gate() -> ServiceAreaGate:
    return service_area_gate


def get_rules_client() -> PricingRulesClient:
    """Get or create the pricing rules client"""
    global rules_client
    if rules_client is None:
        rules_client = PricingRulesClient(
            base_url=settings.backend_url,
            default_rules=PricingRules(
                base_price=settings.base_price,
                price_per_km=settings.price_per_km,
                minimum_price=settings.minimum_total,
            ),
            api_key=settings.backend_api_key,
            timeout=settings.backend_timeout_seconds,
        )
    return rules_client


async def get_pricing_rules() -> PricingRules:
    return await get_rules_client().get_pricing_rules()


async def close_rules_client() -> None:
    global rules_client
    if rules_client is not None:
        await rules_client.close()
        rules_client = None


async def sync_service_zones() -> None:
    """Apply zone active flags from the backend to the service area gate"""
    zones = await get_rules_client().get_service_zones()
    known = {z.name for z in service_area_gate.zones}
    for zone_name, active in zones.items():
        if zone_name in known:
            service_area_gate.set_zone_active(zone_name, active)
