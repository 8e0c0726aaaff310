"""Multi-field substring filter over the in-memory user list."""
from __future__ import annotations

import logging
from time import perf_counter
from typing import Iterable, List

from .models import User

logger = logging.getLogger(__name__)


def items_match(user: User, query: str) -> bool:
    """Return True when any of the user's items contains ``query`` (case-insensitive)."""
    if not query:
        return False
    needle = query.lower()
    return any(needle in item.lower() for item in user.items)


def user_matches(user: User, query: str) -> bool:
    # ids and pincodes are numeric, so those two compare as-is
    needle = query.lower()
    return (
        query in user.id_text
        or needle in user.name.lower()
        or items_match(user, query)
        or needle in user.address.lower()
        or query in user.pincode
    )


def filter_users(query: str, users: Iterable[User]) -> List[User]:
    """Return the users matching ``query`` in their original order.

    An empty query yields no results rather than the whole list.
    """
    if not query:
        return []
    started = perf_counter()
    results = [user for user in users if user_matches(user, query)]
    logger.info(
        "timing: filter=%.2fms q=%r hits=%s",
        (perf_counter() - started) * 1000,
        query,
        len(results),
    )
    return results
