"""
Cart Store

Single-owner, in-memory cart. A cart only ever holds items from one store:
adding an item from another store replaces the whole cart, and the caller
is told so through the returned AddToCartResult.
"""

import logging
from typing import Callable, Optional

from ..models.cart import (
    AddToCartResult,
    CartChange,
    CartEvent,
    CartEventType,
    CartItemInput,
    CartLine,
)

logger = logging.getLogger(__name__)

CartListener = Callable[[CartEvent], None]


class CartStore:
    """
    In-memory cart for one customer session.

    Usage:
        cart = CartStore()
        result = cart.add_to_cart(CartItemInput(
            id="prod-1", name="Chicken Curry", unit_price=1500, store_id="store-1"
        ))
        if result.replaced:
            print(f"Dropped {len(result.replaced_lines)} items from {result.previous_store_id}")

        subtotal = cart.get_total()
    """

    def __init__(self):
        self._lines: list[CartLine] = []
        self._store_id: Optional[str] = None
        self._listeners: list[CartListener] = []

    @property
    def store_id(self) -> Optional[str]:
        """Store whose items the cart may currently hold"""
        return self._store_id

    def set_store_id(self, store_id: Optional[str]) -> None:
        """
        Seed the active store before any line exists.

        Ignored while the cart holds lines from a different store, since the
        lines define the active store.
        """
        if self._lines and store_id != self._lines[0].store_id:
            logger.warning(
                f"Refusing to set store {store_id} on a cart holding items "
                f"from {self._lines[0].store_id}"
            )
            return
        self._store_id = store_id

    @property
    def lines(self) -> list[CartLine]:
        """Copies of the cart lines"""
        return [line.model_copy() for line in self._lines]

    @property
    def item_count(self) -> int:
        """Number of distinct lines"""
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get_line(self, item_id: str) -> Optional[CartLine]:
        line = self._find_line(item_id)
        return line.model_copy() if line else None

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a cart event listener; returns a function that removes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_to_cart(self, item: CartItemInput) -> AddToCartResult:
        """Add one unit of an item to the cart"""
        if not item.id or not item.store_id:
            raise ValueError("Cart items need both an id and a store_id")
        if item.unit_price < 0:
            raise ValueError(f"Negative price for cart item {item.id}")

        count_before = len(self._lines)
        logger.debug(
            f"Adding {item.id} ({item.name}) from store {item.store_id}; "
            f"active store={self._store_id}, lines={count_before}"
        )

        if self._lines and self._store_id != item.store_id:
            previous_store_id = self._store_id
            replaced_lines = self._lines
            line = self._new_line(item)
            self._lines = [line]
            self._store_id = item.store_id
            logger.info(
                f"Cart replaced: {len(replaced_lines)} lines from store "
                f"{previous_store_id} dropped for store {item.store_id}"
            )
            self._notify_size_change(count_before)
            return AddToCartResult(
                change=CartChange.REPLACED,
                line=line.model_copy(),
                previous_store_id=previous_store_id,
                replaced_lines=replaced_lines,
            )

        self._store_id = item.store_id

        existing = self._find_line(item.id)
        if existing:
            existing.quantity += 1
            return AddToCartResult(change=CartChange.INCREMENTED, line=existing.model_copy())

        line = self._new_line(item)
        self._lines.append(line)
        self._notify_size_change(count_before)
        return AddToCartResult(change=CartChange.ADDED, line=line.model_copy())

    def remove_from_cart(self, item_id: str) -> None:
        """Remove a line; no-op if the cart has no such line"""
        count_before = len(self._lines)
        self._lines = [line for line in self._lines if line.id != item_id]
        if len(self._lines) == count_before:
            return

        logger.debug(f"Removed {item_id} from cart")
        if not self._lines:
            self._store_id = None
        self._notify_size_change(count_before)

    def update_quantity(self, item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line"""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Quantity must be a whole number, got {quantity!r}")

        if quantity <= 0:
            self.remove_from_cart(item_id)
            return

        line = self._find_line(item_id)
        if line:
            line.quantity = quantity

    def clear_cart(self) -> None:
        """Empty the cart and forget the active store"""
        logger.debug(f"Clearing cart with {len(self._lines)} lines")
        self._lines = []
        self._store_id = None
        self._publish(CartEvent(kind=CartEventType.CLEARED, item_count=0))

    def get_total(self) -> float:
        """Merchandise subtotal, excluding service and delivery fees"""
        return sum(line.unit_price * line.quantity for line in self._lines)

    def _find_line(self, item_id: str) -> Optional[CartLine]:
        return next((line for line in self._lines if line.id == item_id), None)

    def _new_line(self, item: CartItemInput) -> CartLine:
        return CartLine(
            id=item.id,
            name=item.name,
            unit_price=item.unit_price,
            image=item.image,
            quantity=1,
            store_id=item.store_id,
        )

    def _notify_size_change(self, count_before: int) -> None:
        count = len(self._lines)
        if count == count_before:
            return
        kind = CartEventType.UPDATED if count else CartEventType.EMPTIED
        self._publish(CartEvent(kind=kind, item_count=count, store_id=self._store_id))

    def _publish(self, event: CartEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
