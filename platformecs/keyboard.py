"""Keyboard keys and abstract player inputs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Dict


class InputType(IntEnum):
    """Abstract player actions sent over the wire."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
    SHOOT = 4


class Key(IntEnum):
    """Keyboard keys known to the engine."""

    NO_KEY = 0
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    Num0 = auto()
    Num1 = auto()
    Num2 = auto()
    Num3 = auto()
    Num4 = auto()
    Num5 = auto()
    Num6 = auto()
    Num7 = auto()
    Num8 = auto()
    Num9 = auto()
    Escape = auto()
    LControl = auto()
    LShift = auto()
    LAlt = auto()
    LSystem = auto()
    RControl = auto()
    RShift = auto()
    RAlt = auto()
    RSystem = auto()
    Menu = auto()
    LBracket = auto()
    RBracket = auto()
    Semicolon = auto()
    Comma = auto()
    Period = auto()
    Quote = auto()
    Slash = auto()
    Backslash = auto()
    Tilde = auto()
    Equal = auto()
    Dash = auto()
    Space = auto()
    Enter = auto()
    Backspace = auto()
    Tab = auto()
    Add = auto()
    Subtract = auto()
    Multiply = auto()
    Divide = auto()
    Left = auto()
    Right = auto()
    Up = auto()
    Down = auto()
    Numpad0 = auto()
    Numpad1 = auto()
    Numpad2 = auto()
    Numpad3 = auto()
    Numpad4 = auto()
    Numpad5 = auto()
    Numpad6 = auto()
    Numpad7 = auto()
    Numpad8 = auto()
    Numpad9 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    Pause = auto()


@dataclass
class InputInfo:
    """An input state change of one player."""

    id: int
    id_input: InputType
    state: bool


_KEY_NAMES: Dict[str, Key] = {key.name: key for key in Key if key is not Key.NO_KEY}
_KEY_NAMES["No_Key"] = Key.NO_KEY


def key_from_name(name: str) -> Key:
    """Return the key with the given configuration name.

    Raises KeyError for unknown names.
    """
    try:
        return _KEY_NAMES[name]
    except KeyError:
        raise KeyError(f"unknown key name {name!r}") from None