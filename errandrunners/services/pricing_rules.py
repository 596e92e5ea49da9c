"""
Pricing Rules Client

Reads delivery pricing rules and service zone status from the hosted
backend's REST API. Rules are cached after the first successful fetch;
any failure falls back to the configured defaults.
"""

import logging
from typing import Optional, Any

import httpx

from ..models.pricing import PricingRules

logger = logging.getLogger(__name__)


class PricingRulesClient:
    """
    Client for the backend's pricing_rules and service_zones tables.

    Without a base URL it never touches the network and always serves
    the default rules.
    """

    def __init__(
        self,
        base_url: Optional[str],
        default_rules: PricingRules,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend project URL, e.g. https://xyz.supabase.co
            default_rules: Rules served when the backend is unavailable
            api_key: Backend anon key sent as apikey and bearer token
            timeout: HTTP timeout in seconds
            http_client: Pre-built client (tests pass one with a mock transport)
        """
        self.base_url = base_url.rstrip("/") if base_url else None
        self.default_rules = default_rules
        self.api_key = api_key
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self._cached_rules: Optional[PricingRules] = None

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _select(self, table: str, params: dict[str, str]) -> list[dict[str, Any]]:
        """Run a REST select against a backend table"""
        url = f"{self.base_url}/rest/v1/{table}"
        response = await self._http_client.get(url, params=params, headers=self._headers())

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    async def get_pricing_rules(self) -> PricingRules:
        """Current pricing rules, cached after the first successful fetch"""
        if self._cached_rules:
            return self._cached_rules
        if not self.base_url:
            return self.default_rules

        try:
            rows = await self._select("pricing_rules", {"select": "*", "limit": "1"})
        except httpx.HTTPError as e:
            logger.error(f"Error fetching pricing rules, using defaults: {e}")
            return self.default_rules

        if not rows:
            logger.warning("No pricing rules configured on backend, using defaults")
            return self.default_rules

        row = rows[0]
        try:
            self._cached_rules = PricingRules(
                base_price=float(row["base_price"]),
                price_per_km=float(row["price_per_km"]),
                minimum_price=float(row["minimum_price"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed pricing rules row, using defaults: {e}")
            return self.default_rules

        logger.info(
            f"Loaded pricing rules: base={self._cached_rules.base_price}, "
            f"per_km={self._cached_rules.price_per_km}, "
            f"minimum={self._cached_rules.minimum_price}"
        )
        return self._cached_rules

    def clear_cache(self) -> None:
        """Forget cached rules (call when rules are updated)"""
        self._cached_rules = None

    async def get_service_zones(self) -> dict[str, bool]:
        """All zones with their active flag; empty on failure"""
        if not self.base_url:
            return {}

        try:
            rows = await self._select(
                "service_zones",
                {"select": "zone_name,is_active", "order": "zone_name"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Error fetching service zones: {e}")
            return {}

        return {row["zone_name"]: bool(row.get("is_active")) for row in rows}
