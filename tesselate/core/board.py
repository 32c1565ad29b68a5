"""
Board graph: points, drawn edges and claimed triangles for one game.

The board knows the legality rules for a new edge but nothing about turns or
scoring. Legality checks run in a fixed order and report the first failure:

1. duplicate edge
2. edge longer than the maximum length
3. edge properly crossing an existing edge that shares no endpoint with it
4. edge passing within the dot radius of a third point
"""

import operator
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import numpy as np

from .geometry import distances_to_segment, segment_length, segments_properly_intersect
from .models import (
    BoardSnapshot,
    ClaimedTriangle,
    DrawnEdge,
    Edge,
    Player,
    RejectionReason,
    Triangle,
)

DOT_RADIUS = 6.0
MAX_EDGE_LENGTH = 250.0


@dataclass(frozen=True)
class BoardRules:
    """Distance thresholds used by the legality checks."""

    dot_radius: float = DOT_RADIUS
    max_edge_length: float = MAX_EDGE_LENGTH

    def scaled(self, scale: float) -> "BoardRules":
        """Rules for a board whose layout offsets were multiplied by ``scale``."""
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        return BoardRules(self.dot_radius * scale, self.max_edge_length * scale)


class Board:
    """Point set plus the edges and triangles drawn on it."""

    def __init__(
        self,
        points,
        rules: Optional[BoardRules] = None,
        pattern: Optional[str] = None,
    ):
        """
        Args:
            points: Sequence or (n, 2) array of [x, y] coordinates
            rules: Legality thresholds; defaults to the unscaled rules
            pattern: Name of the layout the points came from, for snapshots
        """
        self.points = np.array(points, dtype=np.float64).reshape(-1, 2)
        self.points.setflags(write=False)
        self.rules = rules or BoardRules()
        self.pattern = pattern

        # Insertion-ordered; values are the drawing player
        self.edges: Dict[Edge, Optional[Player]] = {}
        self.claimed_triangles: Dict[Triangle, Player] = {}
        self._neighbors: Dict[int, Set[int]] = {i: set() for i in range(len(self.points))}

    def __len__(self):
        return len(self.points)

    def _index(self, i) -> int:
        i = operator.index(i)
        if not 0 <= i < len(self.points):
            raise IndexError(f"Point index {i} out of range for {len(self.points)} points")
        return i

    def _edge(self, u, v) -> Edge:
        return Edge(self._index(u), self._index(v))

    def edge_exists(self, u: int, v: int) -> bool:
        return self._edge(u, v) in self.edges

    def can_place_edge(self, u: int, v: int) -> Optional[RejectionReason]:
        """
        Check whether edge u-v may be drawn.

        Returns:
            None if the edge is legal, otherwise the first rule it breaks

        Raises:
            ValueError: If u == v
            IndexError: If either index is outside the point set
        """
        edge = self._edge(u, v)
        if edge in self.edges:
            return RejectionReason.DUPLICATE_EDGE

        p1 = self.points[edge.u]
        p2 = self.points[edge.v]

        if segment_length(p1, p2) > self.rules.max_edge_length:
            return RejectionReason.TOO_LONG

        for existing in self.edges:
            if edge.shares_endpoint(existing):
                continue
            if segments_properly_intersect(p1, p2, self.points[existing.u], self.points[existing.v]):
                return RejectionReason.INTERSECTS

        distances = distances_to_segment(self.points, p1, p2)
        distances[[edge.u, edge.v]] = np.inf
        if np.any(distances <= self.rules.dot_radius):
            return RejectionReason.PASSES_THROUGH_DOT

        return None

    def place_edge(self, u: int, v: int, player: Optional[Player] = None) -> Edge:
        """
        Record edge u-v. The edge must pass ``can_place_edge``.

        Raises:
            ValueError: If the edge is not legal on this board
        """
        reason = self.can_place_edge(u, v)
        if reason is not None:
            raise ValueError(f"Cannot place edge {u}-{v}: {reason.value}")

        edge = Edge(u, v)
        self.edges[edge] = player
        self._neighbors[edge.u].add(edge.v)
        self._neighbors[edge.v].add(edge.u)
        return edge

    def find_new_triangles(self, u: int, v: int) -> List[Triangle]:
        """
        Unclaimed triangles that have u-v as one side and all sides drawn.

        Called right after u-v is placed: a new triangle can only appear
        through its last edge, so the whole board never needs scanning.
        """
        edge = self._edge(u, v)
        if edge not in self.edges:
            return []
        common = self._neighbors[edge.u] & self._neighbors[edge.v]
        found = (Triangle(edge.u, edge.v, k) for k in sorted(common))
        return [t for t in found if t not in self.claimed_triangles]

    def is_claimed(self, triangle: Triangle) -> bool:
        return triangle in self.claimed_triangles

    def claim_triangle(self, triangle: Triangle, player: Player) -> None:
        """
        Mark a completed triangle as scored.

        Raises:
            ValueError: If the triangle is already claimed or not complete
        """
        if triangle in self.claimed_triangles:
            raise ValueError(f"Triangle {tuple(triangle)} already claimed")
        if not all(e in self.edges for e in triangle.edges):
            raise ValueError(f"Triangle {tuple(triangle)} is not complete")
        self.claimed_triangles[triangle] = player

    def legal_edges(self) -> List[Edge]:
        """Every edge that could be drawn right now."""
        n = len(self.points)
        return [
            Edge(u, v)
            for u in range(n)
            for v in range(u + 1, n)
            if self.can_place_edge(u, v) is None
        ]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            pattern=self.pattern,
            points=[(float(x), float(y)) for x, y in self.points],
            edges=[DrawnEdge(u=e.u, v=e.v, player=p) for e, p in self.edges.items()],
            claimed_triangles=[
                ClaimedTriangle(a=t.a, b=t.b, c=t.c, player=p)
                for t, p in self.claimed_triangles.items()
            ],
        )
