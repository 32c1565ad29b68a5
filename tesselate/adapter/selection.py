"""
Click handling between a user interface and the game engine.

The engine only accepts complete ``(u, v)`` pairs. Turning single point
clicks into pairs is a presentation concern, so the pending-selection state
lives here:

- a first click selects a point
- clicking the selected point again deselects it
- clicking a second point submits the edge; after an accepted move the
  second point stays selected while the turn has edges left, so the player
  can keep drawing from it
- a rejected move clears the selection

Renderers subscribe to be called with fresh snapshots after every change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

import structlog

from ..core.engine import GameEngine
from ..core.models import BoardSnapshot, MoveResult, Phase, RollResult, TurnSnapshot

logger = structlog.get_logger()

Listener = Callable[[BoardSnapshot, TurnSnapshot], None]


@dataclass(frozen=True)
class NoSelection:
    """No point is waiting for a partner."""


@dataclass(frozen=True)
class OnePointSelected:
    """One point clicked, waiting for the second."""

    index: int


Selection = Union[NoSelection, OnePointSelected]


class ClickAction(str, Enum):
    IGNORED = "ignored"
    SELECTED = "selected"
    DESELECTED = "deselected"
    DRAWN = "drawn"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ClickOutcome:
    """What a click did, plus the move result when an edge was submitted."""

    action: ClickAction
    move: Optional[MoveResult] = None


class SelectionController:
    """Feeds point clicks into a ``GameEngine`` and notifies renderers."""

    def __init__(self, engine: GameEngine):
        self.engine = engine
        self._selection: Selection = NoSelection()
        self._listeners: List[Listener] = []

    @property
    def selection(self) -> Selection:
        return self._selection

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a render callback.

        Returns:
            Function that removes the callback again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        board = self.engine.get_board_snapshot()
        turn = self.engine.get_turn_snapshot()
        for listener in list(self._listeners):
            listener(board, turn)

    def click(self, index: int) -> ClickOutcome:
        """Handle a click on point ``index``."""
        if not 0 <= index < len(self.engine.board):
            raise IndexError(f"Point index {index} out of range")
        if self.engine.phase is Phase.AWAITING_ROLL:
            return ClickOutcome(ClickAction.IGNORED)

        selection = self._selection
        if isinstance(selection, NoSelection):
            self._selection = OnePointSelected(index)
            self._notify()
            return ClickOutcome(ClickAction.SELECTED)

        if selection.index == index:
            self._selection = NoSelection()
            self._notify()
            return ClickOutcome(ClickAction.DESELECTED)

        result = self.engine.submit_move(selection.index, index)
        if not result.accepted:
            logger.info(
                "Edge not drawn",
                u=selection.index,
                v=index,
                reason=result.reason.value,
            )
            self._selection = NoSelection()
            self._notify()
            return ClickOutcome(ClickAction.REJECTED, result)

        if self.engine.phase is Phase.TURN_IN_PROGRESS:
            self._selection = OnePointSelected(index)
        else:
            self._selection = NoSelection()
        self._notify()
        return ClickOutcome(ClickAction.DRAWN, result)

    def roll(self) -> RollResult:
        result = self.engine.roll_dice()
        if result.accepted:
            self._selection = NoSelection()
            self._notify()
        return result

    def reset(self) -> None:
        self.engine.reset()
        self._selection = NoSelection()
        self._notify()
