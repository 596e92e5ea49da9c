"""Service-area check for delivery coordinates"""

import logging
from typing import Iterable, Optional

from ..models.pricing import ServiceZone, ServiceZoneVerdict

logger = logging.getLogger(__name__)

# Checked in order; Georgetown and East Bank Demerara overlap and the first
# match wins.
SERVICE_ZONES: tuple[ServiceZone, ...] = (
    ServiceZone("Georgetown", 6.78, 6.85, -58.20, -58.12),
    ServiceZone("East Bank Demerara", 6.70, 6.85, -58.25, -58.15),
    ServiceZone("East Coast Demerara", 6.75, 6.90, -58.10, -57.95),
)

OUT_OF_AREA_MESSAGE = (
    "Sorry, we currently only deliver to Georgetown, East Bank Demerara "
    "and East Coast Demerara."
)


class ServiceAreaGate:
    """Classifies coordinates into the first active zone containing them"""

    def __init__(
        self,
        zones: Iterable[ServiceZone] = SERVICE_ZONES,
        inactive_zones: Optional[Iterable[str]] = None,
    ):
        self.zones = tuple(zones)
        self._inactive: set[str] = set(inactive_zones or ())

    def set_zone_active(self, zone_name: str, active: bool) -> None:
        """Enable or disable a zone by name"""
        if zone_name not in {z.name for z in self.zones}:
            raise ValueError(f"Unknown service zone: {zone_name}")
        if active:
            self._inactive.discard(zone_name)
        else:
            self._inactive.add(zone_name)
        logger.info(f"Service zone {zone_name} {'enabled' if active else 'disabled'}")

    def is_zone_active(self, zone_name: str) -> bool:
        return zone_name not in self._inactive

    def active_zones(self) -> list[str]:
        return [z.name for z in self.zones if z.name not in self._inactive]

    def check(self, lat: float, lon: float) -> ServiceZoneVerdict:
        for zone in self.zones:
            if zone.name in self._inactive:
                continue
            if zone.contains(lat, lon):
                return ServiceZoneVerdict(allowed=True, zone=zone.name)

        return ServiceZoneVerdict(allowed=False, message=OUT_OF_AREA_MESSAGE)


_default_gate = ServiceAreaGate()


def is_within_service_area(lat: float, lon: float) -> ServiceZoneVerdict:
    """Check a coordinate against the standard delivery zones"""
    return _default_gate.check(lat, lon)
