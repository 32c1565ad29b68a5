"""
Value types and result models shared by the board, the engine and adapters.

``Edge`` and ``Triangle`` are canonical value types: endpoints are sorted on
construction, so equality and set membership do not depend on the order in
which points were clicked. Snapshots and results are pydantic models and can
be dumped to plain data for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Player(str, Enum):
    """The two sides. A moves first."""

    A = "A"
    B = "B"

    @property
    def opponent(self) -> Player:
        return Player.B if self is Player.A else Player.A

    @property
    def triangle_value(self) -> int:
        """Points awarded per claimed triangle."""
        return TRIANGLE_VALUES[self]


TRIANGLE_VALUES = {Player.A: 2, Player.B: 1}


class Phase(str, Enum):
    """Turn phase, derived from the remaining edge budget."""

    AWAITING_ROLL = "awaiting_roll"
    TURN_IN_PROGRESS = "turn_in_progress"


class RejectionReason(str, Enum):
    """Why a move was refused."""

    DUPLICATE_EDGE = "duplicate_edge"
    TOO_LONG = "too_long"
    INTERSECTS = "intersects"
    PASSES_THROUGH_DOT = "passes_through_dot"
    NO_EDGES_REMAINING = "no_edges_remaining"


@dataclass(frozen=True, order=True)
class Edge:
    """Undirected edge between two distinct points, stored with u < v."""

    u: int
    v: int

    def __post_init__(self):
        if self.u == self.v:
            raise ValueError(f"self-edge on point {self.u}")
        if self.u > self.v:
            u, v = self.v, self.u
            object.__setattr__(self, "u", u)
            object.__setattr__(self, "v", v)

    def shares_endpoint(self, other: Edge) -> bool:
        return bool({self.u, self.v} & {other.u, other.v})

    def __iter__(self):
        yield self.u
        yield self.v


@dataclass(frozen=True, order=True)
class Triangle:
    """Three distinct points, stored sorted."""

    a: int
    b: int
    c: int

    def __post_init__(self):
        ordered = sorted((self.a, self.b, self.c))
        if len(set(ordered)) != 3:
            raise ValueError(f"degenerate triangle {ordered}")
        for name, value in zip("abc", ordered):
            object.__setattr__(self, name, value)

    @property
    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return Edge(self.a, self.b), Edge(self.a, self.c), Edge(self.b, self.c)

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c


class DrawnEdge(BaseModel):
    """An edge as rendered: endpoints plus the player who drew it."""

    model_config = ConfigDict(frozen=True)

    u: int
    v: int
    player: Optional[Player] = None


class ClaimedTriangle(BaseModel):
    """A scored triangle plus the player who claimed it."""

    model_config = ConfigDict(frozen=True)

    a: int
    b: int
    c: int
    player: Player


class BoardSnapshot(BaseModel):
    """Read-only view of the board for rendering."""

    model_config = ConfigDict(frozen=True)

    pattern: Optional[str] = Field(default=None, description="Layout pattern name")
    points: List[Tuple[float, float]] = Field(default_factory=list)
    edges: List[DrawnEdge] = Field(default_factory=list)
    claimed_triangles: List[ClaimedTriangle] = Field(default_factory=list)


class TurnSnapshot(BaseModel):
    """Read-only view of whose turn it is and the score."""

    model_config = ConfigDict(frozen=True)

    current_player: Player
    edges_remaining: int = Field(ge=0, le=6)
    score_a: int = Field(ge=0)
    score_b: int = Field(ge=0)
    phase: Phase


class MoveResult(BaseModel):
    """Outcome of ``GameEngine.submit_move``."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    edge: Optional[Edge] = None
    new_triangles: List[Triangle] = Field(default_factory=list)
    reason: Optional[RejectionReason] = None
    points_awarded: int = 0

    @classmethod
    def accept(cls, edge: Edge, triangles: List[Triangle], points: int) -> MoveResult:
        return cls(accepted=True, edge=edge, new_triangles=triangles, points_awarded=points)

    @classmethod
    def reject(cls, reason: RejectionReason) -> MoveResult:
        return cls(accepted=False, reason=reason)


class RollResult(BaseModel):
    """Outcome of ``GameEngine.roll_dice``."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    value: Optional[int] = Field(default=None, ge=1, le=6)
    edges_remaining: int
