"""What a player's resource stock can buy."""

from __future__ import annotations

import enum

from ..models.resources import ResourceCount


class PurchaseKind(enum.StrEnum):
    """Things bought with resources."""

    ROAD = 'road'
    SETTLEMENT = 'settlement'
    CITY = 'city'


# Standard build costs.
PURCHASE_COSTS: dict[PurchaseKind, ResourceCount] = {
    PurchaseKind.ROAD: ResourceCount(brick=1, lumber=1),
    PurchaseKind.SETTLEMENT: ResourceCount(grain=1, wool=1, brick=1, lumber=1),
    PurchaseKind.CITY: ResourceCount(grain=3, ore=2),
}


def affordable_purchases(stock: ResourceCount) -> frozenset[PurchaseKind]:
    """Return every kind bought at some point along any sequence of purchases.

    Walks the balances left after each affordable deduction depth-first with
    an explicit stack.  Only which kinds are reachable is reported, not how
    many of each.
    """
    # Deductions only lower balances, so nothing unaffordable up front is
    # reachable later.
    possible = {
        kind
        for kind, cost in PURCHASE_COSTS.items()
        if stock.subtract(cost).is_positive()
    }
    found: set[PurchaseKind] = set()
    seen = {stock}
    stack = [stock]
    while stack and found != possible:
        balance = stack.pop()
        for kind, cost in PURCHASE_COSTS.items():
            remaining = balance.subtract(cost)
            if not remaining.is_positive():
                continue
            found.add(kind)
            if remaining not in seen:
                seen.add(remaining)
                stack.append(remaining)
    return frozenset(found)
