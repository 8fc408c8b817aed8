"""Catan board data models.

Defines players, tile and building kinds, the identifiers that index into the
fixed topology, and the immutable Board built from 19 tiles.
"""

from __future__ import annotations

import enum
import typing

import pydantic

from ..errors import InvalidInputError
from . import topology

IntersectionId = typing.NewType('IntersectionId', int)
PathId = typing.NewType('PathId', int)
TileId = typing.NewType('TileId', int)
# The tile currently hosting the robber.
RobberId = typing.NewType('RobberId', int)


class _Lettered(enum.StrEnum):
    """StrEnum whose board code is the upper-cased first letter of its value."""

    @property
    def letter(self) -> str:
        """Return the single-character code used in the text board."""
        return self.value[0].upper()

    @classmethod
    def from_letter(cls, letter: str) -> typing.Self:
        """Return the member whose board code is *letter*."""
        for member in cls:
            if member.letter == letter:
                return member
        raise InvalidInputError(f'Invalid character for {cls.__name__}: {letter!r}')


class Player(_Lettered):
    """The three seats at the table."""

    RED = 'red'
    BLUE = 'blue'
    WHITE = 'white'

    @classmethod
    def from_name(cls, name: str) -> Player:
        """Map a player name such as ``'White'`` onto a Player (case-insensitive)."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidInputError(f'Invalid player: {name!r}') from None


class TileKind(_Lettered):
    """Terrain kinds; NOTHING is the desert."""

    GRAIN = 'grain'
    WOOL = 'wool'
    BRICK = 'brick'
    LUMBER = 'lumber'
    ORE = 'ore'
    NOTHING = 'nothing'


class BuildingKind(_Lettered):
    """Settlement or upgraded city."""

    SETTLEMENT = 'settlement'
    CITY = 'city'


class Tile(pydantic.BaseModel):
    """A single terrain tile: its production number and kind."""

    model_config = pydantic.ConfigDict(frozen=True)

    dice: int = pydantic.Field(ge=0, le=99)  # 0 for the desert
    kind: TileKind


class Path(pydantic.BaseModel):
    """An unordered pair of intersections where a road may be placed."""

    model_config = pydantic.ConfigDict(frozen=True)

    a: IntersectionId
    b: IntersectionId

    @property
    def endpoints(self) -> tuple[IntersectionId, IntersectionId]:
        return (self.a, self.b)

    @property
    def is_degenerate(self) -> bool:
        """True for boundary placeholders that reference one intersection twice."""
        return self.a == self.b

    def other(self, intersection_id: IntersectionId) -> IntersectionId:
        """Return the endpoint opposite *intersection_id*."""
        return self.b if intersection_id == self.a else self.a


class Intersection(pydantic.BaseModel):
    """An intersection point where settlements and cities can be placed."""

    model_config = pydantic.ConfigDict(frozen=True)

    path_ids: tuple[PathId, ...]  # 2 or 3 incident paths
    tile_ids: tuple[TileId, ...]  # 1 to 3 bordering tiles


# Shared read-only topology, built once at import.
PATHS: tuple[Path, ...] = tuple(
    Path(a=IntersectionId(a), b=IntersectionId(b)) for a, b in topology.PATH_ENDPOINTS
)
INTERSECTIONS: tuple[Intersection, ...] = tuple(
    Intersection(
        path_ids=tuple(PathId(p) for p in path_ids),
        tile_ids=tuple(TileId(t) for t in tile_ids),
    )
    for path_ids, tile_ids in topology.INTERSECTION_LINKS
)


def _index_paths_by_endpoint() -> tuple[tuple[PathId, ...], ...]:
    touching: list[list[PathId]] = [[] for _ in range(topology.INTERSECTION_COUNT)]
    for path_id, path in enumerate(PATHS):
        if path.is_degenerate:
            continue
        touching[path.a].append(PathId(path_id))
        touching[path.b].append(PathId(path_id))
    return tuple(tuple(ids) for ids in touching)


_PATHS_AT = _index_paths_by_endpoint()


class Board(pydantic.BaseModel):
    """The 19 tiles of one game laid over the fixed intersection/path graph.

    Tile order is geometrically significant: tile ``n`` is the ``n``-th tile
    reading the board row by row, the order used by the text codec.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    tiles: tuple[Tile, ...] = pydantic.Field(
        min_length=topology.TILE_COUNT, max_length=topology.TILE_COUNT
    )

    @property
    def paths(self) -> tuple[Path, ...]:
        return PATHS

    @property
    def intersections(self) -> tuple[Intersection, ...]:
        return INTERSECTIONS

    def paths_at(self, intersection_id: IntersectionId) -> tuple[PathId, ...]:
        """Return ids of every non-degenerate path with *intersection_id* as an endpoint."""
        return _PATHS_AT[intersection_id]
