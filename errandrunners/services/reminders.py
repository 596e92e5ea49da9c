"""
Abandoned cart reminders

Books a fixed series of reminders while a cart holds items and drops them
when the cart empties. Delivering the notifications is left to the push
provider; this only keeps the schedule.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..models.cart import CartEvent, CartEventType
from .cart_store import CartStore

logger = logging.getLogger(__name__)

REMINDER_TITLE = "Complete Your Order"

# (hours after the cart last changed, message)
REMINDER_SCHEDULE: tuple[tuple[int, str], ...] = (
    (2, "You have items waiting in your cart!"),
    (4, "Don't forget your cart! Complete your order now"),
    (8, "Your cart is still waiting! Order now and get it delivered"),
    (12, "Still thinking about it? Your cart items are ready to order!"),
    (24, "Last reminder! Your cart expires soon. Order now!"),
)


@dataclass
class ScheduledReminder:
    """A pending cart reminder"""
    reminder_id: str
    title: str
    message: str
    hours: int
    due_at: datetime
    item_count: int


class CartReminderScheduler:
    """Keeps the pending reminder series for one cart"""

    def __init__(
        self,
        schedule: tuple[tuple[int, str], ...] = REMINDER_SCHEDULE,
        clock: Callable[[], datetime] = datetime.utcnow,
        enabled: bool = True,
    ):
        self.schedule_table = schedule
        self.enabled = enabled
        self._clock = clock
        self._pending: list[ScheduledReminder] = []
        self.last_updated: Optional[datetime] = None
        self._detach: Optional[Callable[[], None]] = None

    def schedule(self, item_count: int) -> list[ScheduledReminder]:
        """Replace any pending reminders with a fresh series"""
        self.cancel()

        if item_count <= 0:
            logger.debug("No items in cart, skipping reminders")
            return []
        if not self.enabled:
            return []

        now = self._clock()
        self.last_updated = now
        self._pending = [
            ScheduledReminder(
                reminder_id=str(uuid.uuid4()),
                title=REMINDER_TITLE,
                message=message,
                hours=hours,
                due_at=now + timedelta(hours=hours),
                item_count=item_count,
            )
            for hours, message in self.schedule_table
        ]
        logger.info(f"Scheduled {len(self._pending)} cart reminders for {item_count} items")
        return list(self._pending)

    def cancel(self) -> int:
        """Drop all pending reminders; returns how many were dropped"""
        cancelled = len(self._pending)
        self._pending = []
        self.last_updated = None
        if cancelled:
            logger.info(f"Cancelled {cancelled} cart reminders")
        return cancelled

    @property
    def is_scheduled(self) -> bool:
        return bool(self._pending)

    def pending(self) -> list[ScheduledReminder]:
        return list(self._pending)

    def due(self, at: Optional[datetime] = None) -> list[ScheduledReminder]:
        """Reminders whose time has come"""
        at = at or self._clock()
        return [r for r in self._pending if r.due_at <= at]

    def handle_event(self, event: CartEvent) -> None:
        if event.kind == CartEventType.UPDATED:
            self.schedule(event.item_count)
        else:
            self.cancel()

    def attach(self, cart: CartStore) -> None:
        """Follow a cart's events"""
        self.detach()
        self._detach = cart.subscribe(self.handle_event)

    def detach(self) -> None:
        if self._detach:
            self._detach()
            self._detach = None
