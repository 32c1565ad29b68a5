"""
Turn and score engine.

The engine owns the board and the turn state and is the only thing that
mutates either. A turn cycle has two phases:

- AWAITING_ROLL: no edges left; ``roll_dice`` sets a budget of 1-6 edges.
- TURN_IN_PROGRESS: the current player draws edges with ``submit_move``
  until the budget runs out, then play passes to the other player.

Every triangle completed by a drawn edge is claimed on the spot and scores
2 points for player A or 1 point for player B. All expected gameplay problems
come back as result values; only API misuse (self-edges, bad indices) raises.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import structlog

from ..utils.alea_prng import AleaPRNG
from ..utils.random import RandomSource, random_int, resolve_prng
from .board import Board
from .layouts import Layout, LayoutPattern, generate_layout
from .models import (
    BoardSnapshot,
    MoveResult,
    Phase,
    Player,
    RejectionReason,
    RollResult,
    TurnSnapshot,
)

logger = structlog.get_logger()

DICE_SIDES = 6


@dataclass
class TurnState:
    """Whose turn it is, how many edges are left, and the running score."""

    current_player: Player = Player.A
    edges_remaining: int = 0
    scores: Dict[Player, int] = field(default_factory=lambda: {Player.A: 0, Player.B: 0})

    @property
    def phase(self) -> Phase:
        return Phase.TURN_IN_PROGRESS if self.edges_remaining > 0 else Phase.AWAITING_ROLL

    def snapshot(self) -> TurnSnapshot:
        return TurnSnapshot(
            current_player=self.current_player,
            edges_remaining=self.edges_remaining,
            score_a=self.scores[Player.A],
            score_b=self.scores[Player.B],
            phase=self.phase,
        )


class GameEngine:
    """Synchronous state machine for one game session."""

    def __init__(
        self,
        settings=None,
        prng: Optional[RandomSource] = None,
        pattern: Optional[LayoutPattern] = None,
    ):
        """
        Initialize the engine and deal the first board.

        Args:
            settings: GameSettings; defaults to the environment-driven singleton
            prng: Random source for dice and layout selection; defaults to a
                generator seeded from settings.seed, else the shared instance
            pattern: Pin every board to one layout instead of drawing one
        """
        if settings is None:
            from ..config import get_settings

            settings = get_settings()

        self.settings = settings

        # A pinned seed gets this engine its own generator
        if prng is None and settings.seed:
            prng = AleaPRNG(settings.seed)

        self.rules = settings.rules()
        self.layout_config = settings.layout_config()
        self.prng = resolve_prng(prng)
        self.pattern = pattern

        self.layout: Optional[Layout] = None
        self.board: Optional[Board] = None
        self.turn = TurnState()
        self.reset()

    # --------------------------
    # STATE
    # --------------------------

    @property
    def current_player(self) -> Player:
        return self.turn.current_player

    @property
    def edges_remaining(self) -> int:
        return self.turn.edges_remaining

    @property
    def phase(self) -> Phase:
        return self.turn.phase

    @property
    def scores(self) -> Dict[Player, int]:
        return dict(self.turn.scores)

    def get_board_snapshot(self) -> BoardSnapshot:
        return self.board.snapshot()

    def get_turn_snapshot(self) -> TurnSnapshot:
        return self.turn.snapshot()

    # --------------------------
    # COMMANDS
    # --------------------------

    def reset(self) -> None:
        """Deal a new layout and start over with player A."""
        self.layout = generate_layout(self.layout_config, self.prng, self.pattern)
        self.board = Board(self.layout.points, self.rules, self.layout.pattern.value)
        self.turn = TurnState()
        logger.info(
            "Game reset",
            pattern=self.layout.pattern.value,
            points=len(self.layout),
        )

    def roll_dice(self) -> RollResult:
        """
        Set the edge budget for the current player's turn.

        Ignored while a turn is still in progress.
        """
        if self.turn.edges_remaining > 0:
            logger.info(
                "Roll ignored, turn in progress",
                player=self.turn.current_player.value,
                edges_remaining=self.turn.edges_remaining,
            )
            return RollResult(accepted=False, edges_remaining=self.turn.edges_remaining)

        value = random_int(self.prng, 1, DICE_SIDES)
        self.turn.edges_remaining = value
        logger.info("Dice rolled", player=self.turn.current_player.value, value=value)
        return RollResult(accepted=True, value=value, edges_remaining=value)

    def submit_move(self, u: int, v: int) -> MoveResult:
        """
        Draw edge u-v for the current player.

        Returns:
            Accepted result with any newly claimed triangles, or a rejection
            with its reason. A rejection leaves all state unchanged.

        Raises:
            ValueError: If u == v
            IndexError: If either index is outside the board
        """
        if self.turn.edges_remaining <= 0:
            # Still validate the indices so misuse is caught in every phase
            self.board.edge_exists(u, v)
            logger.info("Move rejected, roll first", u=u, v=v)
            return MoveResult.reject(RejectionReason.NO_EDGES_REMAINING)

        reason = self.board.can_place_edge(u, v)
        if reason is not None:
            logger.info("Move rejected", u=u, v=v, reason=reason.value)
            return MoveResult.reject(reason)

        player = self.turn.current_player
        edge = self.board.place_edge(u, v, player)

        new_triangles = self.board.find_new_triangles(edge.u, edge.v)
        for triangle in new_triangles:
            self.board.claim_triangle(triangle, player)
        gained = len(new_triangles) * player.triangle_value
        self.turn.scores[player] += gained

        self.turn.edges_remaining = max(0, self.turn.edges_remaining - 1)

        logger.info(
            "Move accepted",
            player=player.value,
            edge=(edge.u, edge.v),
            triangles=[tuple(t) for t in new_triangles],
            points=gained,
            edges_remaining=self.turn.edges_remaining,
        )

        if self.turn.edges_remaining == 0:
            self.turn.current_player = player.opponent
            logger.info("Turn passed", player=self.turn.current_player.value)

        return MoveResult.accept(edge, new_triangles, gained)
