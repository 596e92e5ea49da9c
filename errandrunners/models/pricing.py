"""Geo and delivery pricing models"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


class GeoPoint(BaseModel):
    """A WGS84 coordinate in decimal degrees"""
    latitude: float
    longitude: float


class PricingRules(BaseModel):
    """Linear delivery pricing with a minimum floor"""
    base_price: float = Field(default=800, ge=0)
    price_per_km: float = Field(default=150, ge=0)
    minimum_price: float = Field(default=800, ge=0)


class PricingResult(BaseModel):
    """Breakdown of a delivery price for a given distance"""
    distance_km: float
    base_price: float
    distance_fee: float
    subtotal: float
    total: float
    minimum_applied: bool


@dataclass(frozen=True)
class ServiceZone:
    """Named rectangular delivery zone (bounds inclusive)"""
    name: str
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, lat: float, lon: float) -> bool:
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lon <= lon <= self.max_lon
        )


class ServiceZoneVerdict(BaseModel):
    """Result of checking a coordinate against the service zones"""
    allowed: bool
    zone: Optional[str] = None
    message: Optional[str] = None
