"""Plain value types describing widget layout, styling and resizing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag

from abyss.resources import Resource

Vec2 = tuple[float, float]
Vec4 = tuple[float, float, float, float]


class EAnchor(IntEnum):
    """Where a widget is anchored within its parent."""

    NONE = 0
    TOP_LEFT = 0
    TOP_MIDDLE = 1
    TOP_RIGHT = 2
    MIDDLE_LEFT = 3
    MIDDLE = 4
    MIDDLE_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_MIDDLE = 7
    BOTTOM_RIGHT = 8


class EScaleMode(Enum):
    SCALE_TO_FIT = 0
    FIT_TO_SCALE = 1


class EDirection(Enum):
    """Axis along which a layout arranges its children."""

    HORIZONTAL = 0
    VERTICAL = 1


class ELayout(Enum):
    """Order in which a layout places its children.

    AUTO means left to right when horizontal and top to bottom when vertical.
    """

    AUTO = 0
    LEFT_TO_RIGHT = 1
    TOP_TO_BOTTOM = 2
    RIGHT_TO_LEFT = 3
    BOTTOM_TO_TOP = 4


class EButtonState(Enum):
    DEFAULT = 0
    HOVERED = 1
    PRESSED = 2
    RELEASED = 0


class ETextAlignment(Enum):
    CENTER = 0
    LEFT = 1
    RIGHT = 2


class EResize(IntFlag):
    """Edges of a widget that may be dragged to resize it."""

    NONE = 0
    N = 1 << 0
    E = 1 << 1
    S = 1 << 2
    W = 1 << 3


@dataclass
class Anchor:
    position: EAnchor = EAnchor.NONE
    offset: Vec2 = (0.0, 0.0)


@dataclass
class Transform:
    anchor: Anchor = field(default_factory=Anchor)
    position: Vec2 = (0.0, 0.0)
    size: Vec2 = (0.0, 0.0)


@dataclass
class Background:
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    texture: Resource = field(default_factory=Resource)


@dataclass
class Border:
    color: Vec4 = (0.0, 0.0, 0.0, 1.0)
    width: float = 0.0


@dataclass
class Style:
    """Background and border of a widget.

    A background that is not fully opaque makes the border draw as four lines.
    """

    background: Background = field(default_factory=Background)
    border: Border = field(default_factory=Border)


@dataclass
class ButtonStyle:
    """Backgrounds for each button state; released doubles as the default."""

    hovered: Background = field(default_factory=Background)
    pressed: Background = field(default_factory=Background)
    released: Background = field(default_factory=Background)
    border: Border = field(default_factory=Border)


@dataclass
class TextInfo:
    text: str = ""
    color: Vec4 = (1.0, 1.0, 1.0, 1.0)
    scale: float = 1.0
    alignment: ETextAlignment = ETextAlignment.CENTER


@dataclass
class InputTextOptions:
    """Behaviour of an input text box.

    ``prefix`` is how many leading characters cannot be deleted.
    """

    prefix: int = 0
    submit_clears_focus: bool = False
    submit_clears_text: bool = True


@dataclass
class ResizeResult:
    """Outcome of a resize step; N and E grow, S and W shrink."""

    distance: float
    direction: EResize