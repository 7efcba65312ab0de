"""Window and input events with a type-based dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar, TypeVar

Vec2 = tuple[float, float]


class EEventType(IntEnum):
    """Kinds of events."""

    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    KEY_PRESSED = 6
    KEY_RELEASED = 7
    KEY_TYPED = 8
    MOUSE_PRESSED = 9
    MOUSE_RELEASED = 10
    MOUSE_MOVE = 11
    MOUSE_SCROLLED = 12


class EEventCategory(IntFlag):
    """Bit flags grouping event kinds."""

    NONE = 0
    INPUT = 1 << 0
    KEYBOARD = 1 << 1
    MOUSE = 1 << 2
    MOUSE_BUTTON = 1 << 3
    WINDOW = 1 << 4


class Key(IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    ARROW_RIGHT = 262
    ARROW_LEFT = 263
    ARROW_DOWN = 264
    ARROW_UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    LEFT_WIN = 343
    LEFT_CMD = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    RIGHT_WIN = 347
    RIGHT_CMD = 347
    MENU = 348
    LAST = 348


class MouseButton(IntEnum):
    """Mouse button codes."""

    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Mod(IntFlag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = 1 << 0
    CTRL = 1 << 1
    ALT = 1 << 2
    SUPER = 1 << 3
    CAPS = 1 << 4
    NUML = 1 << 5


def _hit(point: Vec2, pos: Vec2, size: Vec2) -> bool:
    x, y = point
    return pos[0] <= x <= pos[0] + size[0] and pos[1] <= y <= pos[1] + size[1]


class Event:
    """Base of all events; ``handled`` is set by the dispatcher."""

    EVENT_TYPE: ClassVar[EEventType] = EEventType.NONE
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.NONE
    handled: bool = False

    @property
    def type(self) -> EEventType:
        return self.EVENT_TYPE

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def category(self) -> EEventCategory:
        return self.CATEGORY

    def is_in_category(self, category: EEventCategory) -> bool:
        return bool(self.category & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to the callback bound for its class."""

    def __init__(self, event: Event) -> None:
        self._event = event

    def bind(self, event_class: type[E], callback: Callable[[E], bool]) -> bool:
        """Call ``callback`` if the event is of ``event_class``'s type.

        The callback's result becomes the event's ``handled`` flag.
        Returns whether the callback was called.
        """
        if self._event.type != event_class.EVENT_TYPE:
            return False
        self._event.handled = bool(callback(self._event))  # type: ignore[arg-type]
        return True


@dataclass(eq=False)
class _KeyEvent(Event):
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.KEYBOARD | EEventCategory.INPUT

    key: Key

    @property
    def code(self) -> int:
        return int(self.key)


@dataclass(eq=False)
class KeyPressedEvent(_KeyEvent):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.KEY_PRESSED

    repeat_count: int = 0
    mods: Mod = Mod.NONE

    def __str__(self) -> str:
        return f"{self.name}: {self.code} (repeat: {self.repeat_count}, mods: {int(self.mods)})"


@dataclass(eq=False)
class KeyReleasedEvent(_KeyEvent):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.KEY_RELEASED

    def __str__(self) -> str:
        return f"{self.name}: {self.code}"


@dataclass(eq=False)
class KeyTypedEvent(_KeyEvent):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.KEY_TYPED

    def __str__(self) -> str:
        return f"{self.name}: {self.code}"


@dataclass(eq=False)
class MouseMovedEvent(Event):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.MOUSE_MOVE
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.MOUSE | EEventCategory.INPUT

    x: float
    y: float

    @property
    def pos(self) -> Vec2:
        return (self.x, self.y)

    def hit(self, pos: Vec2, size: Vec2) -> bool:
        """Whether the cursor lies inside the rectangle at ``pos`` of ``size``."""
        return _hit(self.pos, pos, size)

    def __str__(self) -> str:
        return f"{self.name}: ({self.x}, {self.y})"


@dataclass(eq=False)
class MouseScrolledEvent(Event):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.MOUSE_SCROLLED
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.MOUSE | EEventCategory.INPUT

    offset_x: float
    offset_y: float

    @property
    def offset(self) -> Vec2:
        return (self.offset_x, self.offset_y)

    def __str__(self) -> str:
        return f"{self.name}: ({self.offset_x}, {self.offset_y})"


@dataclass(eq=False)
class _MouseButtonEvent(Event):
    CATEGORY: ClassVar[EEventCategory] = (
        EEventCategory.MOUSE_BUTTON | EEventCategory.MOUSE | EEventCategory.INPUT
    )

    button: MouseButton
    pos: Vec2 = (0.0, 0.0)

    @property
    def code(self) -> int:
        return int(self.button)

    def hit(self, pos: Vec2, size: Vec2) -> bool:
        """Whether the click lies inside the rectangle at ``pos`` of ``size``."""
        return _hit(self.pos, pos, size)

    def __str__(self) -> str:
        return f"{self.name}: {self.code} at ({self.pos[0]}, {self.pos[1]})"


@dataclass(eq=False)
class MousePressedEvent(_MouseButtonEvent):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.MOUSE_PRESSED


@dataclass(eq=False)
class MouseReleasedEvent(_MouseButtonEvent):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.MOUSE_RELEASED


@dataclass(eq=False)
class WindowResizeEvent(Event):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.WINDOW_RESIZE
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.WINDOW

    w: int
    h: int
    old_w: int
    old_h: int

    @property
    def size(self) -> tuple[int, int]:
        return (self.w, self.h)

    @property
    def old_size(self) -> tuple[int, int]:
        return (self.old_w, self.old_h)

    def __str__(self) -> str:
        return f"{self.name}: {self.old_w}x{self.old_h} -> {self.w}x{self.h}"


@dataclass(eq=False)
class WindowCloseEvent(Event):
    EVENT_TYPE: ClassVar[EEventType] = EEventType.WINDOW_CLOSE
    CATEGORY: ClassVar[EEventCategory] = EEventCategory.WINDOW