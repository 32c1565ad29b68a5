"""Tests for the board graph and edge legality rules."""

import pytest

from tesselate.core.board import Board, BoardRules
from tesselate.core.models import Edge, Player, RejectionReason, Triangle

# Square grid indices used below (row * 5 + col, spacing 70):
#
#    0   1   2   3   4
#    5   6   7   8   9
#   10  11  12  13  14


class TestEdgeExists:
    """Test edge membership."""

    def test_both_orders(self, square_board):
        square_board.place_edge(0, 1)

        assert square_board.edge_exists(0, 1)
        assert square_board.edge_exists(1, 0)
        assert not square_board.edge_exists(1, 2)

    def test_self_edge_is_misuse(self, square_board):
        with pytest.raises(ValueError):
            square_board.edge_exists(3, 3)


class TestCanPlaceEdge:
    """Test each legality rule."""

    def test_legal_edge(self, square_board):
        assert square_board.can_place_edge(0, 1) is None
        assert square_board.can_place_edge(0, 6) is None

    def test_duplicate_either_order(self, square_board):
        """An edge already drawn is rejected however it is spelled."""
        square_board.place_edge(0, 1)

        assert square_board.can_place_edge(0, 1) == RejectionReason.DUPLICATE_EDGE
        assert square_board.can_place_edge(1, 0) == RejectionReason.DUPLICATE_EDGE

    def test_too_long(self, square_board):
        """Four grid spacings (280) exceed the 250 cap."""
        assert square_board.can_place_edge(0, 4) == RejectionReason.TOO_LONG

    def test_length_at_cap_allowed(self):
        board = Board([[0, 0], [250, 0]])
        assert board.can_place_edge(0, 1) is None

    def test_crossing_edge(self, square_board):
        """The two diagonals of a grid cell cross."""
        square_board.place_edge(1, 5)

        assert square_board.can_place_edge(0, 6) == RejectionReason.INTERSECTS
        assert square_board.can_place_edge(6, 0) == RejectionReason.INTERSECTS

    def test_shared_endpoint_is_not_crossing(self, square_board):
        """Edges fanning out of one vertex are all legal."""
        square_board.place_edge(0, 6)

        assert square_board.can_place_edge(0, 1) is None
        assert square_board.can_place_edge(0, 5) is None
        assert square_board.can_place_edge(6, 1) is None

    def test_passes_through_dot(self, square_board):
        """Skipping over the middle point of a row is rejected."""
        assert square_board.can_place_edge(0, 2) == RejectionReason.PASSES_THROUGH_DOT

    def test_passes_near_dot(self):
        """A point 5 units off the segment is within the 6 unit radius."""
        board = Board([[0, 0], [100, 0], [50, 5]])
        assert board.can_place_edge(0, 1) == RejectionReason.PASSES_THROUGH_DOT

    def test_dot_radius_boundary(self):
        """Touching the radius exactly counts as passing through."""
        assert Board([[0, 0], [100, 0], [50, 6]]).can_place_edge(0, 1) == (
            RejectionReason.PASSES_THROUGH_DOT
        )
        assert Board([[0, 0], [100, 0], [50, 6.5]]).can_place_edge(0, 1) is None

    def test_check_order(self, square_board):
        """Length is checked before crossing and dots."""
        square_board.place_edge(1, 5)
        # 0-4 is both too long and passes through 1, 2 and 3
        assert square_board.can_place_edge(0, 4) == RejectionReason.TOO_LONG
        # 0-12 crosses 1-5 and passes through 6
        assert square_board.can_place_edge(0, 12) == RejectionReason.INTERSECTS

    def test_scaled_rules(self):
        """Thresholds grow with the board scale."""
        rules = BoardRules().scaled(2.0)
        board = Board([[0, 0], [400, 0], [200, 11]], rules)

        assert rules.dot_radius == 12
        assert rules.max_edge_length == 500
        assert board.can_place_edge(0, 1) == RejectionReason.PASSES_THROUGH_DOT

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            BoardRules().scaled(0)

    def test_self_edge_raises(self, square_board):
        with pytest.raises(ValueError):
            square_board.can_place_edge(2, 2)

    def test_out_of_range_raises(self, square_board):
        with pytest.raises(IndexError):
            square_board.can_place_edge(0, 25)
        with pytest.raises(IndexError):
            square_board.can_place_edge(-1, 0)

    def test_symmetry(self, square_board):
        """can_place_edge(u, v) and can_place_edge(v, u) always agree."""
        for u, v in [(0, 1), (1, 5), (6, 7), (7, 13), (12, 18), (20, 21)]:
            square_board.place_edge(u, v)

        n = len(square_board)
        for u in range(n):
            for v in range(u + 1, n):
                assert square_board.can_place_edge(u, v) == square_board.can_place_edge(v, u)


class TestPlaceEdge:
    """Test recording edges."""

    def test_records_owner(self, square_board):
        edge = square_board.place_edge(6, 5, Player.B)

        assert edge == Edge(5, 6)
        assert square_board.edges[edge] is Player.B

    def test_illegal_edge_raises(self, square_board):
        square_board.place_edge(0, 1)
        with pytest.raises(ValueError):
            square_board.place_edge(1, 0)
        with pytest.raises(ValueError):
            square_board.place_edge(0, 2)


class TestTriangles:
    """Test triangle detection and claiming."""

    def test_completing_edge_finds_triangle(self, square_board):
        square_board.place_edge(0, 1)
        square_board.place_edge(0, 5)
        square_board.place_edge(1, 5)

        assert square_board.find_new_triangles(5, 1) == [Triangle(0, 1, 5)]

    def test_two_triangles_at_once(self, square_board):
        """A diagonal closing two triangles reports both."""
        for u, v in [(0, 1), (0, 5), (1, 6), (5, 6)]:
            square_board.place_edge(u, v)
        square_board.place_edge(1, 5)

        assert square_board.find_new_triangles(1, 5) == [Triangle(0, 1, 5), Triangle(1, 5, 6)]

    def test_open_path_is_not_triangle(self, square_board):
        square_board.place_edge(0, 1)
        square_board.place_edge(1, 6)

        assert square_board.find_new_triangles(1, 6) == []

    def test_claimed_triangle_not_found_again(self, square_board):
        for u, v in [(0, 1), (0, 5), (1, 5)]:
            square_board.place_edge(u, v)
        triangle = Triangle(5, 0, 1)
        square_board.claim_triangle(triangle, Player.A)

        assert square_board.is_claimed(Triangle(0, 1, 5))
        assert square_board.find_new_triangles(0, 1) == []
        assert square_board.find_new_triangles(0, 5) == []

    def test_double_claim_raises(self, square_board):
        for u, v in [(0, 1), (0, 5), (1, 5)]:
            square_board.place_edge(u, v)
        square_board.claim_triangle(Triangle(0, 1, 5), Player.A)

        with pytest.raises(ValueError):
            square_board.claim_triangle(Triangle(1, 5, 0), Player.B)

    def test_incomplete_claim_raises(self, square_board):
        square_board.place_edge(0, 1)
        with pytest.raises(ValueError):
            square_board.claim_triangle(Triangle(0, 1, 5), Player.A)

    def test_missing_edge_finds_nothing(self, square_board):
        assert square_board.find_new_triangles(0, 1) == []


class TestLegalEdges:
    """Test enumeration of placeable edges."""

    def test_all_listed_edges_are_placeable(self, square_board):
        square_board.place_edge(1, 5)
        legal = square_board.legal_edges()

        assert Edge(0, 1) in legal
        assert Edge(1, 5) not in legal
        assert Edge(0, 6) not in legal
        assert Edge(0, 2) not in legal
        assert Edge(0, 4) not in legal
        assert all(square_board.can_place_edge(e.u, e.v) is None for e in legal)

    def test_shrinks_as_edges_are_drawn(self, square_board):
        before = len(square_board.legal_edges())
        square_board.place_edge(0, 6)
        legal = square_board.legal_edges()

        assert len(legal) < before
        assert Edge(0, 6) not in legal
        # the other diagonal of the same cell now crosses
        assert Edge(1, 5) not in legal


class TestSnapshot:
    """Test the read-only board view."""

    def test_snapshot_contents(self, square_board):
        for u, v in [(0, 1), (0, 5)]:
            square_board.place_edge(u, v, Player.A)
        square_board.place_edge(1, 5, Player.B)
        square_board.claim_triangle(Triangle(0, 1, 5), Player.B)

        snapshot = square_board.snapshot()

        assert snapshot.pattern == "square_grid"
        assert len(snapshot.points) == 25
        assert snapshot.points[0] == (310.0, 120.0)
        assert [(e.u, e.v, e.player) for e in snapshot.edges] == [
            (0, 1, Player.A),
            (0, 5, Player.A),
            (1, 5, Player.B),
        ]
        assert len(snapshot.claimed_triangles) == 1
        assert snapshot.claimed_triangles[0].player is Player.B

    def test_snapshot_serialisable(self, square_board):
        square_board.place_edge(0, 1, Player.A)
        data = square_board.snapshot().model_dump(mode="json")

        assert data["edges"] == [{"u": 0, "v": 1, "player": "A"}]

    def test_points_read_only(self, square_board):
        with pytest.raises(ValueError):
            square_board.points[0, 0] = 1.0
