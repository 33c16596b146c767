"""Game states and the escape-key driven scene switching."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any


class GameState(Enum):
    """Where the game is in its flow."""

    MAIN_MENU = auto()
    PAUSE = auto()
    GAME = auto()
    WIN = auto()
    LOSE = auto()
    RESTART = auto()
    FINISHED = auto()


_ESCAPE_TRANSITIONS = {
    GameState.MAIN_MENU: ("Game", GameState.GAME),
    GameState.GAME: ("Pause", GameState.PAUSE),
    GameState.PAUSE: ("Game", GameState.GAME),
}

END_SCENE = "WinLose"


class ScreenController:
    """Switches scenes on game end and on escape presses.

    A held escape key switches only once; it must be released before it
    switches again.
    """

    def __init__(self, scene_manager: Any) -> None:
        self._scene_manager = scene_manager
        self._changeable = True

    def _switch(self, scene: str) -> None:
        self._scene_manager.unload_scene()
        self._scene_manager.load_scene(scene)

    def handle(self, state: GameState, escape_pressed: bool, escape_released: bool) -> GameState:
        """Apply one frame of input and return the new state."""
        if state in (GameState.WIN, GameState.LOSE):
            self._switch(END_SCENE)
            state = GameState.FINISHED
        if escape_pressed and self._changeable:
            self._changeable = False
            transition = _ESCAPE_TRANSITIONS.get(state)
            if transition is not None:
                scene, new_state = transition
                self._switch(scene)
                return new_state
        if escape_released:
            self._changeable = True
        return state