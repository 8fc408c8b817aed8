"""HTTP routes for board analysis and move suggestion.

Registers:

* ``GET  /``             - readiness banner
* ``POST /analyze``      - derived move facts for one player
* ``POST /compute_move`` - a suggested move for one player

Both POST routes take ``{"game_state": <text board>, "player": <name>}``.
A board that fails to decode, or an unknown player name, answers 400.
Choosing a move is left to :data:`select_move`, which a strategy module
replaces; the default always passes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import fastapi
import fastapi.responses
import pydantic

import common.settings

from ..catan.engine import purchases, rules
from ..catan.errors import InvalidInputError
from ..catan.models import text_codec
from ..catan.models.board import Player
from ..catan.models.game_state import Game

logger = logging.getLogger(__name__)

router = fastapi.APIRouter()


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(pydantic.BaseModel):
    """Body of POST /analyze and POST /compute_move."""

    game_state: str
    player: str


class AIMove(pydantic.BaseModel):
    """Returned by POST /compute_move."""

    action: str
    details: str


class MoveAnalysis(pydantic.BaseModel):
    """Returned by POST /analyze."""

    player: Player
    longest_road: int
    building_intersections: list[int]
    road_paths: list[tuple[int, int]]
    affordable: list[purchases.PurchaseKind]


MoveSelector = Callable[[Game, Player], AIMove]


def pass_move(game: Game, player: Player) -> AIMove:
    """Default selector: suggest ending the turn."""
    return AIMove(action='pass', details='')


select_move: MoveSelector = pass_move


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load(request: MoveRequest) -> tuple[Game, Player]:
    """Decode the board and player name, turning bad input into a 400."""
    try:
        game = text_codec.decode_game(
            request.game_state, with_resources=common.settings.CATAN_ECONOMY
        )
        player = Player.from_name(request.player)
    except InvalidInputError as exc:
        logger.warning('Rejected request for player %r: %s', request.player, exc)
        raise fastapi.HTTPException(status_code=400, detail=str(exc)) from exc
    return game, player


def analyze(game: Game, player: Player) -> MoveAnalysis:
    """Collect every derived move fact for *player*."""
    stock = game.state.resources.get(player)
    return MoveAnalysis(
        player=player,
        longest_road=rules.longest_road(game, player),
        building_intersections=sorted(
            rules.possible_building_intersections(game, player)
        ),
        road_paths=sorted(
            path.endpoints for path in rules.possible_road_paths(game, player)
        ),
        affordable=sorted(purchases.affordable_purchases(stock)),
    )


# ---------------------------------------------------------------------------
# HTTP endpoints
# ---------------------------------------------------------------------------


@router.get('/', response_class=fastapi.responses.PlainTextResponse)
async def root() -> str:
    """Readiness banner."""
    return 'Settlers of Catan AI Server: Ready to process game states!'


@router.post('/analyze', response_model=MoveAnalysis)
async def analyze_board(request: MoveRequest) -> MoveAnalysis:
    """Return longest road, build sites, road extensions and affordable buys."""
    game, player = _load(request)
    return analyze(game, player)


@router.post('/compute_move', response_model=AIMove)
async def compute_move(request: MoveRequest) -> AIMove:
    """Return the move the current selector suggests for the player."""
    game, player = _load(request)
    move = select_move(game, player)
    logger.info('Suggested %s for %s', move.action, player)
    return move
