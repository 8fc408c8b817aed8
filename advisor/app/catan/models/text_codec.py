"""Fixed-width text rendering of a Catan game.

The board is drawn from :data:`TEMPLATE`, in which three tokens mark slots:

* ``BB``   - an intersection: owner letter and building letter, or ``oo``
* ``TTTT`` - a tile: two-digit dice number, kind letter, ``!`` if robbed
* ``*``    - a path: owner letter, or ``.``

The ``n``-th slot of a kind met reading the template left-to-right,
top-to-bottom has id ``n``.  Decoding reads the same columns from each line
of the input, so the input must keep the template's exact alignment.

An optional economy section follows the board::

       G  W  B  L  O
    W  1  2  3  4  5
    R  6  7  8  9  10
    B  11 12 13 14 15

one line per player with counts in grain, wool, brick, lumber, ore order.
"""

from __future__ import annotations

import functools
import logging
import re

import pydantic

from ..errors import InvalidInputError
from . import topology
from .board import (
    Board,
    BuildingKind,
    IntersectionId,
    PathId,
    Player,
    RobberId,
    Tile,
    TileKind,
)
from .game_state import Building, Game, Road, State
from .resources import RESOURCE_FIELDS, PlayerResourceCount, ResourceCount

logger = logging.getLogger(__name__)

TEMPLATE = """
          BB * BB * BB * BB * BB * BB * BB
          *   TTTT  *   TTTT  *   TTTT  *
     BB * BB * BB * BB * BB * BB * BB * BB * BB
     *   TTTT  *   TTTT  *   TTTT  *   TTTT  *
BB * BB * BB * BB * BB * BB * BB * BB * BB * BB * BB
*   TTTT  *   TTTT  *   TTTT  *   TTTT  *   TTTT  *
BB * BB * BB * BB * BB * BB * BB * BB * BB * BB * BB
     *   TTTT  *   TTTT  *   TTTT  *   TTTT  *
     BB * BB * BB * BB * BB * BB * BB * BB * BB
          *   TTTT  *   TTTT  *   TTTT  *
          BB * BB * BB * BB * BB * BB * BB"""

BUILDING_SLOT = 'BB'
TILE_SLOT = 'TTTT'
PATH_SLOT = '*'

EMPTY_INTERSECTION = 'o'
EMPTY_PATH = '.'
ROBBER_MARKER = '!'

_SLOT_PATTERN = re.compile(r'BB|TTTT|\*')
# Signed, ASCII digits only.
_COUNT_PATTERN = re.compile(r'-?[0-9]+')

# Player order of the encoded economy section.
_RESOURCE_LINE_ORDER = (Player.WHITE, Player.RED, Player.BLUE)
_RESOURCE_HEADER = tuple(name[0].upper() for name in RESOURCE_FIELDS)

Slot = tuple[int, int]  # (line number, column)


class SlotLayout(pydantic.BaseModel):
    """Column offsets of every slot in a template, in id order."""

    model_config = pydantic.ConfigDict(frozen=True)

    lines: tuple[str, ...]
    buildings: tuple[Slot, ...]
    tiles: tuple[Slot, ...]
    paths: tuple[Slot, ...]

    @classmethod
    def scan(cls, template: str) -> SlotLayout:
        """Record slot positions of *template*; the counts must match the topology."""
        lines = tuple(template.splitlines())
        found: dict[str, list[Slot]] = {BUILDING_SLOT: [], TILE_SLOT: [], PATH_SLOT: []}
        for line_no, line in enumerate(lines):
            for match in _SLOT_PATTERN.finditer(line):
                found[match.group()].append((line_no, match.start()))

        expected = {
            BUILDING_SLOT: topology.INTERSECTION_COUNT,
            TILE_SLOT: topology.TILE_COUNT,
            PATH_SLOT: topology.PATH_COUNT,
        }
        for token, count in expected.items():
            if len(found[token]) != count:
                raise InvalidInputError(
                    f'Template has {len(found[token])} {token!r} slots, expected {count}'
                )

        return cls(
            lines=lines,
            buildings=tuple(found[BUILDING_SLOT]),
            tiles=tuple(found[TILE_SLOT]),
            paths=tuple(found[PATH_SLOT]),
        )

    def slot_columns(self, line_no: int) -> set[int]:
        """Return every column of *line_no* covered by some slot."""
        columns: set[int] = set()
        for slots, width in (
            (self.buildings, len(BUILDING_SLOT)),
            (self.tiles, len(TILE_SLOT)),
            (self.paths, len(PATH_SLOT)),
        ):
            for slot_line, column in slots:
                if slot_line == line_no:
                    columns.update(range(column, column + width))
        return columns


@functools.cache
def default_layout() -> SlotLayout:
    """Return the layout of :data:`TEMPLATE`, scanned once."""
    return SlotLayout.scan(TEMPLATE)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def decode_game(
    text: str, *, with_resources: bool = True, layout: SlotLayout | None = None
) -> Game:
    """Parse *text* into a Game.

    Raises :class:`InvalidInputError` on the first malformed token.  When
    *with_resources* is False the economy section is ignored and every
    player's stock is zero.
    """
    layout = layout or default_layout()
    lines = text.splitlines()
    board_line_count = len(layout.lines)
    if len(lines) < board_line_count:
        raise InvalidInputError(
            f'Board has {len(lines)} lines, expected at least {board_line_count}'
        )
    board_lines = lines[:board_line_count]
    _check_alignment(board_lines, layout)

    buildings: list[Building] = []
    for intersection_id, slot in enumerate(layout.buildings):
        cell = _read_cell(board_lines, slot, len(BUILDING_SLOT))
        if cell[0] == EMPTY_INTERSECTION:
            continue
        buildings.append(
            Building(
                intersection_id=IntersectionId(intersection_id),
                kind=BuildingKind.from_letter(cell[1]),
                player=Player.from_letter(cell[0]),
            )
        )

    roads: list[Road] = []
    for path_id, slot in enumerate(layout.paths):
        cell = _read_cell(board_lines, slot, len(PATH_SLOT))
        if cell == EMPTY_PATH:
            continue
        roads.append(Road(path_id=PathId(path_id), player=Player.from_letter(cell)))

    tiles: list[Tile] = []
    robber: RobberId | None = None
    for tile_id, slot in enumerate(layout.tiles):
        cell = _read_cell(board_lines, slot, len(TILE_SLOT))
        dice, letter, marker = cell[:2], cell[2], cell[3]
        if not (dice.isascii() and dice.isdigit()):
            raise InvalidInputError(f'Invalid tile dice number: {dice!r}')
        if marker == ROBBER_MARKER:
            if robber is not None:
                raise InvalidInputError(
                    f'Robber marked on tiles {robber} and {tile_id}'
                )
            robber = RobberId(tile_id)
        elif marker != ' ':
            raise InvalidInputError(f'Invalid robber marker: {marker!r}')
        tiles.append(Tile(dice=int(dice), kind=TileKind.from_letter(letter)))

    if robber is None:
        raise InvalidInputError('No tile carries the robber marker')

    if with_resources:
        resources = _decode_resources(lines[board_line_count:])
    else:
        resources = PlayerResourceCount()

    logger.debug(
        'Decoded board: %d buildings, %d roads, robber on tile %d',
        len(buildings),
        len(roads),
        robber,
    )
    return Game(
        board=Board(tiles=tuple(tiles)),
        state=State(
            buildings=buildings, roads=roads, robber=robber, resources=resources
        ),
    )


def _check_alignment(board_lines: list[str], layout: SlotLayout) -> None:
    """Reject text outside the template's slots, i.e. shifted or extra cells."""
    for line_no, line in enumerate(board_lines):
        slot_columns = layout.slot_columns(line_no)
        for column, char in enumerate(line):
            if column not in slot_columns and not char.isspace():
                raise InvalidInputError(
                    f'Line {line_no}: unexpected {char!r} at column {column}'
                )


def _read_cell(board_lines: list[str], slot: Slot, width: int) -> str:
    line_no, column = slot
    cell = board_lines[line_no][column : column + width]
    if len(cell) != width:
        raise InvalidInputError(f'Line {line_no}: missing slot at column {column}')
    return cell


def _decode_resources(lines: list[str]) -> PlayerResourceCount:
    counts: dict[Player, ResourceCount] = {}
    for line in lines:
        tokens = line.split()
        if not tokens or tuple(tokens) == _RESOURCE_HEADER:
            continue
        player = Player.from_letter(tokens[0])
        if player in counts:
            raise InvalidInputError(f'Duplicate resource line for {player}')
        values = tokens[1:]
        if len(values) != len(RESOURCE_FIELDS):
            raise InvalidInputError(
                f'Resource line for {player} has {len(values)} counts, '
                f'expected {len(RESOURCE_FIELDS)}'
            )
        if not all(_COUNT_PATTERN.fullmatch(v) for v in values):
            raise InvalidInputError(
                f'Non-numeric resource count for {player}: {line.strip()!r}'
            )
        counts[player] = ResourceCount.from_counts([int(v) for v in values])

    missing = [p.value for p in Player if p not in counts]
    if missing:
        raise InvalidInputError(f'Missing resource lines for {", ".join(missing)}')
    return PlayerResourceCount(
        red=counts[Player.RED], blue=counts[Player.BLUE], white=counts[Player.WHITE]
    )


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def encode_game(
    game: Game, *, with_resources: bool = True, layout: SlotLayout | None = None
) -> str:
    """Render *game* onto the template, slot by slot in id order."""
    layout = layout or default_layout()
    rows = [list(line) for line in layout.lines]

    def put(slot: Slot, cell: str) -> None:
        line_no, column = slot
        rows[line_no][column : column + len(cell)] = cell

    for tile_id, (slot, tile) in enumerate(zip(layout.tiles, game.board.tiles)):
        marker = ROBBER_MARKER if tile_id == game.state.robber else ' '
        put(slot, f'{tile.dice:02}{tile.kind.letter}{marker}')

    buildings = {b.intersection_id: b for b in game.state.buildings}
    for intersection_id, slot in enumerate(layout.buildings):
        building = buildings.get(IntersectionId(intersection_id))
        if building is None:
            put(slot, EMPTY_INTERSECTION * 2)
        else:
            put(slot, building.player.letter + building.kind.letter)

    roads = {r.path_id: r for r in game.state.roads}
    for path_id, slot in enumerate(layout.paths):
        road = roads.get(PathId(path_id))
        put(slot, EMPTY_PATH if road is None else road.player.letter)

    output = [''.join(row) for row in rows]
    if with_resources:
        output.extend(_encode_resources(game.state.resources))
    return '\n'.join(output)


def _encode_resources(resources: PlayerResourceCount) -> list[str]:
    header = '   ' + '  '.join(_RESOURCE_HEADER)
    lines = [header]
    for player in _RESOURCE_LINE_ORDER:
        counts = resources.get(player).as_tuple()
        cells = ''.join(f'{count:<2} ' for count in counts)
        lines.append(f'{player.letter}  {cells}'.rstrip())
    return lines
