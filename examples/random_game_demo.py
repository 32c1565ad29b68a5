#!/usr/bin/env python3
"""
Demo script playing one game with randomly picked legal edges.
"""

import sys

from tesselate.config import get_settings
from tesselate.core import GameEngine, Player
from tesselate.utils.alea_prng import AleaPRNG
from tesselate.utils.logging_setup import configure_logging


def main(seed="demo123"):
    """Play until no legal edge is left and print the result."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    prng = AleaPRNG(seed)
    engine = GameEngine(settings, prng=prng)
    board = engine.get_board_snapshot()

    print("Tesselate Demo")
    print("=" * 40)
    print(f"Seed: {seed}")
    print(f"Layout: {board.pattern} ({len(board.points)} points)")

    turns = 0
    while True:
        legal = engine.board.legal_edges()
        if not legal:
            break
        if engine.edges_remaining == 0:
            roll = engine.roll_dice()
            turns += 1
            print(f"\nTurn {turns}: player {engine.current_player.value} rolls {roll.value}")

        edge = prng.choice(legal)
        result = engine.submit_move(edge.u, edge.v)
        line = f"  {edge.u:>2} - {edge.v:<2}"
        if result.new_triangles:
            claimed = ", ".join(str(tuple(t)) for t in result.new_triangles)
            line += f"  claims {claimed} (+{result.points_awarded})"
        print(line)

    turn = engine.get_turn_snapshot()
    board = engine.get_board_snapshot()
    print("\nFinal")
    print("-" * 30)
    print(f"  Edges drawn: {len(board.edges)}")
    print(f"  Triangles claimed: {len(board.claimed_triangles)}")
    print(f"  Player {Player.A.value}: {turn.score_a}")
    print(f"  Player {Player.B.value}: {turn.score_b}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
