"""Unit tests for catan board data models."""

from __future__ import annotations

import unittest

import pydantic

from advisor.app.catan.errors import InvalidInputError
from advisor.app.catan.models import board
from advisor.tests.catan import boards


class TestLetters(unittest.TestCase):
    """Tests for the single-letter board codes."""

    def test_player_letters(self) -> None:
        """Players are R, B and W."""
        self.assertEqual(
            [p.letter for p in board.Player], ['R', 'B', 'W']
        )

    def test_tile_kind_letters(self) -> None:
        """Tile kinds are G, W, B, L, O and N for the desert."""
        self.assertEqual(
            [k.letter for k in board.TileKind], ['G', 'W', 'B', 'L', 'O', 'N']
        )

    def test_building_kind_letters(self) -> None:
        """Settlements are S and cities C."""
        self.assertEqual(board.BuildingKind.SETTLEMENT.letter, 'S')
        self.assertEqual(board.BuildingKind.CITY.letter, 'C')

    def test_from_letter_round_trips(self) -> None:
        """from_letter inverts letter for every member."""
        for enum_cls in (board.Player, board.TileKind, board.BuildingKind):
            for member in enum_cls:
                self.assertIs(enum_cls.from_letter(member.letter), member)

    def test_from_letter_rejects_unknown(self) -> None:
        """Unknown letters raise InvalidInputError."""
        with self.assertRaises(InvalidInputError):
            board.Player.from_letter('G')
        with self.assertRaises(InvalidInputError):
            board.TileKind.from_letter('x')
        with self.assertRaises(InvalidInputError):
            board.BuildingKind.from_letter('o')


class TestPlayerFromName(unittest.TestCase):
    """Tests for Player.from_name."""

    def test_case_insensitive(self) -> None:
        """Names map regardless of case and surrounding space."""
        self.assertIs(board.Player.from_name('White'), board.Player.WHITE)
        self.assertIs(board.Player.from_name(' RED '), board.Player.RED)
        self.assertIs(board.Player.from_name('blue'), board.Player.BLUE)

    def test_unknown_name(self) -> None:
        """An unknown name raises InvalidInputError."""
        with self.assertRaises(InvalidInputError):
            board.Player.from_name('Orange')


class TestPath(unittest.TestCase):
    """Tests for Path model."""

    def test_other(self) -> None:
        """other returns the opposite endpoint."""
        path = board.Path(a=3, b=4)
        self.assertEqual(path.other(3), 4)
        self.assertEqual(path.other(4), 3)

    def test_degenerate(self) -> None:
        """A path naming one intersection twice is degenerate."""
        self.assertTrue(board.Path(a=45, b=45).is_degenerate)
        self.assertFalse(board.Path(a=44, b=45).is_degenerate)

    def test_hash_by_content(self) -> None:
        """Equal paths collapse in a set."""
        self.assertEqual(len({board.Path(a=1, b=2), board.Path(a=1, b=2)}), 1)


class TestBoard(unittest.TestCase):
    """Tests for Board model."""

    def test_requires_nineteen_tiles(self) -> None:
        """A board with any other tile count fails validation."""
        tiles = boards.sample_board().tiles
        with self.assertRaises(pydantic.ValidationError):
            board.Board(tiles=tiles[:18])
        with self.assertRaises(pydantic.ValidationError):
            board.Board(tiles=tiles + tiles[:1])

    def test_topology_shared_between_boards(self) -> None:
        """Every board exposes the same module-level topology."""
        a = boards.sample_board()
        b = boards.sample_board()
        self.assertIs(a.paths, b.paths)
        self.assertIs(a.intersections, board.INTERSECTIONS)
        self.assertEqual(len(a.paths), 72)
        self.assertEqual(len(a.intersections), 54)

    def test_path_table(self) -> None:
        """Spot-check a few path endpoints."""
        paths = boards.sample_board().paths
        self.assertEqual(paths[0], board.Path(a=0, b=1))
        self.assertEqual(paths[10], board.Path(a=8, b=7))
        self.assertEqual(paths[71], board.Path(a=52, b=53))

    def test_paths_at_skips_degenerate(self) -> None:
        """paths_at lists real paths only."""
        brd = boards.sample_board()
        self.assertEqual(brd.paths_at(46), (53,))
        self.assertEqual(brd.paths_at(45), (60, 65))
        self.assertEqual(brd.paths_at(10), (7, 12, 13))

    def test_frozen(self) -> None:
        """Board is immutable."""
        brd = boards.sample_board()
        with self.assertRaises(pydantic.ValidationError):
            brd.tiles = ()  # type: ignore[misc]

    def test_tile_dice_bounds(self) -> None:
        """Tile dice numbers must fit two digits."""
        with self.assertRaises(pydantic.ValidationError):
            board.Tile(dice=100, kind=board.TileKind.ORE)


if __name__ == '__main__':
    unittest.main()
