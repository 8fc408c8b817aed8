"""Catan game state model.

Captures the mutable part of a game (pieces on the board, robber position,
resource stocks) and pairs it with the immutable Board it is played on.
"""

from __future__ import annotations

import pydantic

from .board import (
    Board,
    BuildingKind,
    IntersectionId,
    PathId,
    Player,
    RobberId,
)
from .resources import PlayerResourceCount


class Building(pydantic.BaseModel):
    """A settlement or city placed on an intersection."""

    intersection_id: IntersectionId
    kind: BuildingKind
    player: Player


class Road(pydantic.BaseModel):
    """A road placed on a path."""

    path_id: PathId
    player: Player


class State(pydantic.BaseModel):
    """Pieces, robber and economy of one game at a point in time.

    One building per intersection and one road per path are guaranteed by the
    text codec (one cell per slot), not re-checked here.
    """

    buildings: list[Building] = pydantic.Field(default_factory=list)
    roads: list[Road] = pydantic.Field(default_factory=list)
    robber: RobberId
    resources: PlayerResourceCount = pydantic.Field(
        default_factory=PlayerResourceCount
    )

    def building_at(self, intersection_id: IntersectionId) -> Building | None:
        """Return the building on *intersection_id*, or None."""
        for building in self.buildings:
            if building.intersection_id == intersection_id:
                return building
        return None

    def road_on(self, path_id: PathId) -> Road | None:
        """Return the road on *path_id*, or None."""
        for road in self.roads:
            if road.path_id == path_id:
                return road
        return None

    def buildings_of(self, player: Player) -> list[Building]:
        return [b for b in self.buildings if b.player == player]

    def roads_of(self, player: Player) -> list[Road]:
        return [r for r in self.roads if r.player == player]


class Game(pydantic.BaseModel):
    """A Board and the State being played on it; the unit of every query."""

    board: Board
    state: State
