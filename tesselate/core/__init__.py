"""
Core game rules: geometry, layouts, board graph and turn engine.
"""

from .board import Board, BoardRules
from .engine import GameEngine, TurnState
from .layouts import Layout, LayoutConfig, LayoutPattern, generate_layout, get_layout, list_layouts
from .models import (
    BoardSnapshot,
    Edge,
    MoveResult,
    Phase,
    Player,
    RejectionReason,
    RollResult,
    Triangle,
    TurnSnapshot,
)

__all__ = ['Board', 'BoardRules', 'GameEngine', 'TurnState',
           'Layout', 'LayoutConfig', 'LayoutPattern', 'generate_layout', 'get_layout', 'list_layouts',
           'BoardSnapshot', 'Edge', 'MoveResult', 'Phase', 'Player', 'RejectionReason',
           'RollResult', 'Triangle', 'TurnSnapshot']
