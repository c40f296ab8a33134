"""
Order status lifecycle.

    pending -> processing -> completed
    pending | processing -> cancelled

The PATCH handler only consults ``can_transition`` when
``ENFORCE_STATUS_TRANSITIONS`` is enabled; otherwise any member of
``CartStatus`` is accepted regardless of the current state.
"""

from enum import Enum
from typing import List, Optional

from washlava.core.exceptions import InvalidStatusError


class CartStatus(str, Enum):
    pending = "pending"
    processing = "processing"
    completed = "completed"
    cancelled = "cancelled"


DEFAULT_STATUS = CartStatus.pending

ALLOWED_TRANSITIONS = {
    CartStatus.pending: [CartStatus.processing, CartStatus.cancelled],
    CartStatus.processing: [CartStatus.completed, CartStatus.cancelled],
    CartStatus.completed: [],
    CartStatus.cancelled: [],
}


def parse_status(value: object) -> CartStatus:
    """
    Return the CartStatus for ``value``.

    Raises:
        InvalidStatusError: If value is not one of the enumerated statuses
    """
    try:
        return CartStatus(value)
    except (ValueError, TypeError):
        raise InvalidStatusError(value)


def can_transition(current_status: str, new_status: str) -> bool:
    """
    Return True if an order may move from ``current_status`` to ``new_status``.

    Re-applying the current status is allowed. A missing current status is
    treated as ``pending``; an unknown one allows no transition.
    """
    try:
        new = CartStatus(new_status)
    except ValueError:
        return False
    if current_status is None:
        curr = DEFAULT_STATUS
    else:
        try:
            curr = CartStatus(current_status)
        except ValueError:
            return False
    if curr == new:
        return True
    return new in ALLOWED_TRANSITIONS.get(curr, [])


def allowed_predecessors(new_status: CartStatus) -> List[Optional[str]]:
    """
    Status values an order may hold when moving to ``new_status``.

    Includes None (no status yet) whenever ``pending`` is allowed. Used as
    an ``$in`` condition so the check and the write are one atomic update.
    """
    allowed: List[Optional[str]] = [
        status.value for status in CartStatus if can_transition(status.value, new_status.value)
    ]
    if DEFAULT_STATUS.value in allowed:
        allowed.append(None)
    return allowed
