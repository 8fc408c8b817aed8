"""Resource stocks held by each player.

Counts are signed so that deducting a cost and then asking
:meth:`ResourceCount.is_positive` is the whole affordability check.
"""

from __future__ import annotations

import pydantic

from .board import Player, TileKind

# Column order used by the text board's resource lines.
RESOURCE_FIELDS: tuple[str, ...] = ('grain', 'wool', 'brick', 'lumber', 'ore')


class ResourceCount(pydantic.BaseModel):
    """Five signed resource counters."""

    model_config = pydantic.ConfigDict(frozen=True)

    grain: int = 0
    wool: int = 0
    brick: int = 0
    lumber: int = 0
    ore: int = 0

    @classmethod
    def from_counts(cls, counts: list[int] | tuple[int, ...]) -> ResourceCount:
        """Build from five counts in grain, wool, brick, lumber, ore order."""
        return cls(**dict(zip(RESOURCE_FIELDS, counts, strict=True)))

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.grain, self.wool, self.brick, self.lumber, self.ore)

    def total(self) -> int:
        """Return the total number of resource cards."""
        return sum(self.as_tuple())

    def get(self, kind: TileKind) -> int:
        """Return the count produced by tiles of *kind*; the desert contributes 0."""
        if kind == TileKind.NOTHING:
            return 0
        return getattr(self, kind.value)

    def is_positive(self) -> bool:
        """Return True unless some counter is negative (zero is allowed)."""
        return all(count >= 0 for count in self.as_tuple())

    def subtract(self, cost: ResourceCount) -> ResourceCount:
        """Return new counts with *cost* removed. Does not validate sufficiency."""
        return ResourceCount(
            grain=self.grain - cost.grain,
            wool=self.wool - cost.wool,
            brick=self.brick - cost.brick,
            lumber=self.lumber - cost.lumber,
            ore=self.ore - cost.ore,
        )

    def add(self, other: ResourceCount) -> ResourceCount:
        """Return new counts with another set added."""
        return ResourceCount(
            grain=self.grain + other.grain,
            wool=self.wool + other.wool,
            brick=self.brick + other.brick,
            lumber=self.lumber + other.lumber,
            ore=self.ore + other.ore,
        )


class PlayerResourceCount(pydantic.BaseModel):
    """One ResourceCount per player."""

    red: ResourceCount = pydantic.Field(default_factory=ResourceCount)
    blue: ResourceCount = pydantic.Field(default_factory=ResourceCount)
    white: ResourceCount = pydantic.Field(default_factory=ResourceCount)

    def get(self, player: Player) -> ResourceCount:
        return getattr(self, player.value)

    def with_count(self, player: Player, count: ResourceCount) -> PlayerResourceCount:
        """Return a copy with *player*'s stock replaced."""
        return self.model_copy(update={player.value: count})
