"""Guest Quota Gate

Caps how many documents an unauthenticated (guest) identity may create from
one client instance. The counter lives in a local CounterStore and is not
synchronized across instances, so this is a soft cap rather than a security
boundary. Registered identities are never limited.

The gate never raises on exhaustion: callers check can_create() before the
privileged operation and branch to a lockout response themselves.
"""

import logging
from typing import Optional
from src.app.services.counter_store import CounterStore

logger = logging.getLogger(__name__)

GUEST_INVOICE_COUNT_KEY = "kvoice_guest_invoice_count"
GUEST_EXPORT_COUNT_KEY = "kvoice_guest_export_count"
DEFAULT_GUEST_LIMIT = 7


class QuotaGate:
    """
    Counter-backed quota for guest identities

    Usage:
        gate = QuotaGate(store, GUEST_INVOICE_COUNT_KEY)
        if not gate.can_create(identity.is_guest):
            ...  # lockout
        ...      # persist
        if identity.is_guest:
            gate.increment()
    """

    def __init__(
        self,
        store: CounterStore,
        key: str = GUEST_INVOICE_COUNT_KEY,
        limit: int = DEFAULT_GUEST_LIMIT,
    ):
        self.store = store
        self.key = key
        self.limit = limit

    def count(self) -> int:
        raw: Optional[str] = self.store.get(self.key)
        if raw is None:
            return 0
        try:
            return max(0, int(raw))
        except ValueError:
            logger.warning(f"Ignoring unreadable quota counter {self.key}={raw!r}")
            return 0

    def can_create(self, is_guest: bool) -> bool:
        if not is_guest:
            return True
        return self.count() < self.limit

    def has_reached_limit(self, is_guest: bool) -> bool:
        return not self.can_create(is_guest)

    def remaining(self) -> int:
        return max(0, self.limit - self.count())

    def increment(self) -> None:
        self.store.set(self.key, str(self.count() + 1))

    def reset(self) -> None:
        """Clear the counter (administrative escape hatch)"""
        self.store.remove(self.key)
        logger.info(f"Quota counter {self.key} reset")
