"""Input and window events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from .vector3 import _format_float


class Key(IntEnum):
    """Keyboard keys, valued by their virtual-key codes."""

    ESC = 0x1B
    A = 0x41
    B = 0x42
    C = 0x43
    D = 0x44
    E = 0x45
    F = 0x46
    G = 0x47
    H = 0x48
    I = 0x49
    J = 0x4A
    K = 0x4B
    L = 0x4C
    M = 0x4D
    N = 0x4E
    O = 0x4F
    P = 0x50
    Q = 0x51
    R = 0x52
    S = 0x53
    T = 0x54
    U = 0x55
    V = 0x56
    W = 0x57
    X = 0x58
    Y = 0x59
    Z = 0x5A

    def __str__(self) -> str:
        return self.name


class KeyState(Enum):
    """Whether a key went up or down."""

    UP = 0
    DOWN = 1

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class KeyEvent:
    """A key press or release."""

    key: Key
    state: KeyState

    def __str__(self) -> str:
        return f"KeyEvent {self.key} {self.state}"


@dataclass(frozen=True)
class MouseEvent:
    """Relative mouse motion."""

    delta_x: float
    delta_y: float

    def __str__(self) -> str:
        return f"MouseEvent {_format_float(self.delta_x)} {_format_float(self.delta_y)}"


@dataclass(frozen=True)
class StopEvent:
    """A request to close the window and stop."""


Event = Union[StopEvent, KeyEvent, MouseEvent]