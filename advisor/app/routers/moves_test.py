"""Integration tests for the move advisor HTTP routes."""

from __future__ import annotations

import unittest
import unittest.mock

import fastapi.testclient

import common.settings
from advisor.app import main
from advisor.app.catan.models.board import Player
from advisor.app.catan.models.game_state import Game
from advisor.app.routers import moves
from advisor.tests.catan import boards

SAMPLE = boards.SAMPLE_BOARD + boards.ECONOMY


class TestMoveRoutes(unittest.TestCase):
    """Tests for /, /analyze and /compute_move."""

    def setUp(self) -> None:
        self.client = fastapi.testclient.TestClient(main.app)

    def test_root_banner(self) -> None:
        """GET / answers with a readiness banner."""
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertIn('Ready to process game states', resp.text)

    def test_analyze_white(self) -> None:
        """POST /analyze returns the derived facts for the player."""
        resp = self.client.post('/analyze', json={'game_state': SAMPLE, 'player': 'White'})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {
                'player': 'white',
                'longest_road': 9,
                'building_intersections': [4, 5, 6, 46],
                'road_paths': [[3, 4], [4, 12], [9, 19], [17, 18], [18, 29], [19, 20]],
                'affordable': ['road', 'settlement'],
            },
        )

    def test_analyze_red_affords_everything(self) -> None:
        """Red's stock in the sample covers every purchase."""
        resp = self.client.post('/analyze', json={'game_state': SAMPLE, 'player': 'red'})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['affordable'], ['city', 'road', 'settlement'])

    def test_analyze_without_economy(self) -> None:
        """With the economy disabled a board-only payload is accepted."""
        with unittest.mock.patch.object(common.settings, 'CATAN_ECONOMY', False):
            resp = self.client.post(
                '/analyze', json={'game_state': boards.SAMPLE_BOARD, 'player': 'Blue'}
            )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['affordable'], [])

    def test_compute_move_default_passes(self) -> None:
        """The default selector suggests passing."""
        resp = self.client.post(
            '/compute_move', json={'game_state': SAMPLE, 'player': 'White'}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'action': 'pass', 'details': ''})

    def test_compute_move_uses_selector(self) -> None:
        """The route hands the decoded game and player to the selector."""
        seen: list[tuple[Game, Player]] = []

        def selector(game: Game, player: Player) -> moves.AIMove:
            seen.append((game, player))
            return moves.AIMove(action='build_road', details='3-4')

        with unittest.mock.patch.object(moves, 'select_move', selector):
            resp = self.client.post(
                '/compute_move', json={'game_state': SAMPLE, 'player': 'white'}
            )
        self.assertEqual(resp.json(), {'action': 'build_road', 'details': '3-4'})
        self.assertEqual(len(seen), 1)
        self.assertIs(seen[0][1], Player.WHITE)
        self.assertEqual(seen[0][0].state.robber, 7)

    def test_invalid_board_is_400(self) -> None:
        """A board that fails to decode answers 400 with the reason."""
        bad = SAMPLE.replace('09G!', '09G ')
        for path in ('/analyze', '/compute_move'):
            resp = self.client.post(path, json={'game_state': bad, 'player': 'White'})
            self.assertEqual(resp.status_code, 400)
            self.assertIn('robber', resp.json()['detail'])

    def test_unknown_player_is_400(self) -> None:
        """An unknown player name answers 400."""
        resp = self.client.post(
            '/compute_move', json={'game_state': SAMPLE, 'player': 'Orange'}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn('Orange', resp.json()['detail'])

    def test_missing_field_is_422(self) -> None:
        """A payload without game_state fails request validation."""
        resp = self.client.post('/analyze', json={'player': 'White'})
        self.assertEqual(resp.status_code, 422)


if __name__ == '__main__':
    unittest.main()
