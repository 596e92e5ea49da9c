"""Delivery pricing and service area API routes"""

from fastapi import APIRouter, Query, Depends

from ..models.pricing import PricingResult, PricingRules, ServiceZoneVerdict
from ..core.dependencies import (
    get_pricing_rules,
    get_rules_client,
    get_service_area_gate,
)
from ..services.pricing import calculate_distance, calculate_price_breakdown
from ..services.pricing_rules import PricingRulesClient
from ..services.service_area import ServiceAreaGate

router = APIRouter(prefix="/api/pricing", tags=["Pricing"])


@router.get("/distance")
async def get_distance(
    lat1: float = Query(..., ge=-90, le=90),
    lon1: float = Query(..., ge=-180, le=180),
    lat2: float = Query(..., ge=-90, le=90),
    lon2: float = Query(..., ge=-180, le=180),
):
    """Great-circle distance between two points, in km"""
    return {"distance_km": calculate_distance(lat1, lon1, lat2, lon2)}


@router.get("/delivery-price", response_model=PricingResult)
async def get_delivery_price(
    distance_km: float = Query(..., ge=0, description="Delivery distance in km"),
    rules: PricingRules = Depends(get_pricing_rules),
):
    """Delivery price breakdown for a distance"""
    return calculate_price_breakdown(distance_km, rules)


@router.get("/rules", response_model=PricingRules)
async def get_rules(rules: PricingRules = Depends(get_pricing_rules)):
    """Pricing rules currently in effect"""
    return rules


@router.post("/rules/refresh", response_model=PricingRules)
async def refresh_rules(client: PricingRulesClient = Depends(get_rules_client)):
    """Drop cached rules and load them again"""
    client.clear_cache()
    return await client.get_pricing_rules()


@router.get("/service-area", response_model=ServiceZoneVerdict)
async def check_service_area(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    gate: ServiceAreaGate = Depends(get_service_area_gate),
):
    """Whether a delivery point is inside an active service zone"""
    return gate.check(lat, lon)
