"""In-memory cart store for one shopping session."""
import threading
import time
from collections import OrderedDict
from typing import Callable, Dict, List, Optional, Tuple

from storefront.config import CART_MAX_SESSIONS, CART_TTL_SECONDS
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.models import Product, ProductVariant
from .identity import CartItemKey
from .models import (
    CartLine,
    CartSnapshot,
    CartEvent,
    ITEM_ADDED,
    ITEM_REMOVED,
    QUANTITY_CHANGED,
    CLEARED,
)
from .pricing import resolve_price

logger = get_logger(__name__)

CartListener = Callable[[CartEvent], None]


class CartStore:
    """
    Ordered cart lines keyed by CartItemKey.

    Features:
    - One line per (product, variant); re-adding increments quantity
    - Quantity never drops below 1; underflow removes the line
    - Totals are derived from the lines on every snapshot
    - Subscribers receive a CartEvent after each state change

    Every lookup-then-mutate runs under one lock so a host serving the same
    session from several threads cannot lose increments or duplicate lines.
    """

    def __init__(self) -> None:
        # dicts keep insertion order, which is the display order
        self._lines: Dict[CartItemKey, CartLine] = {}
        self._listeners: List[CartListener] = []
        self._lock = threading.RLock()

    def add_item(self, product: Product, variant: Optional[ProductVariant] = None) -> CartEvent:
        """
        Add one unit of a product (and selected variant).

        Raises:
            VariantRequired: product has variants and none was given; cart unchanged
        """
        resolve_price(product, variant)

        with self._lock:
            line = CartLine(product=product, quantity=1, variant=variant)
            existing = self._lines.get(line.key)
            if existing:
                existing.quantity += 1
                line = existing
            else:
                self._lines[line.key] = line
            event = CartEvent(kind=ITEM_ADDED, key=line.key, quantity=line.quantity)

        logger.debug(
            f"Cart add: product={sanitize_id_for_logging(product.id)} qty={event.quantity}"
        )
        self._publish(event)
        return event

    def remove_item(self, key: CartItemKey) -> None:
        """Remove a line. Absent keys are ignored."""
        with self._lock:
            removed = self._lines.pop(key, None)
        if removed is not None:
            self._publish(CartEvent(kind=ITEM_REMOVED, key=key))

    def adjust_quantity(self, key: CartItemKey, delta: int) -> None:
        """
        Change a line's quantity by delta.

        A result below 1 removes the line. Absent keys are ignored.
        """
        with self._lock:
            line = self._lines.get(key)
            if line is None:
                return
            new_quantity = line.quantity + delta
            if new_quantity < 1:
                del self._lines[key]
                event = CartEvent(kind=ITEM_REMOVED, key=key)
            elif new_quantity == line.quantity:
                return
            else:
                line.quantity = new_quantity
                event = CartEvent(kind=QUANTITY_CHANGED, key=key, quantity=new_quantity)
        self._publish(event)

    def clear(self) -> None:
        with self._lock:
            had_lines = bool(self._lines)
            self._lines.clear()
        if had_lines:
            self._publish(CartEvent(kind=CLEARED))

    def snapshot(self) -> CartSnapshot:
        """Current lines and totals, taken under the lock."""
        with self._lock:
            return CartSnapshot.of(self._lines.values())

    def get_line(self, key: CartItemKey) -> Optional[CartLine]:
        with self._lock:
            return self._lines.get(key)

    def __len__(self) -> int:
        return len(self._lines)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event: CartEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                # The state change already happened; one broken view must not stop the rest
                logger.exception(f"Cart listener failed on {event.kind}")


class CartRegistry:
    """
    Cart stores per session for hosts that serve many shoppers.

    Carts are ephemeral: nothing is persisted and a restart empties them.
    A cart not touched for ttl_seconds is dropped, and at most max_sessions
    carts are held (least recently used goes first).
    """

    def __init__(
        self,
        ttl_seconds: float = CART_TTL_SECONDS,
        max_sessions: int = CART_MAX_SESSIONS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        # Ordered by last access, oldest first
        self._carts: "OrderedDict[str, Tuple[CartStore, float]]" = OrderedDict()
        self._lock = threading.Lock()
        self.ttl_seconds = ttl_seconds
        self.max_sessions = max_sessions
        self._clock = clock

    def get(self, session_id: str) -> CartStore:
        """Get the session's cart, creating an empty one on first use or after expiry."""
        with self._lock:
            now = self._clock()
            self._evict_expired(now)

            entry = self._carts.get(session_id)
            if entry is None:
                cart = CartStore()
                logger.debug(f"Created cart for session {sanitize_id_for_logging(session_id)}")
            else:
                cart = entry[0]

            self._carts[session_id] = (cart, now)
            self._carts.move_to_end(session_id)

            while len(self._carts) > self.max_sessions:
                dropped, _ = self._carts.popitem(last=False)
                logger.debug(f"Dropped cart for session {sanitize_id_for_logging(dropped)} (limit)")

            return cart

    def discard(self, session_id: str) -> None:
        """Drop a session's cart (session end)."""
        with self._lock:
            self._carts.pop(session_id, None)

    def _evict_expired(self, now: float) -> None:
        while self._carts:
            session_id, (_, last_access) = next(iter(self._carts.items()))
            if now - last_access < self.ttl_seconds:
                break
            del self._carts[session_id]
            logger.debug(f"Expired cart for session {sanitize_id_for_logging(session_id)}")

    def __len__(self) -> int:
        return len(self._carts)
