"""Core value types shared across the engine: application info, cursors and UUIDs."""

from __future__ import annotations

import random
import threading
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_UUID_SEED = 2083231
_UUID_MAX = 1 << 64

_generator = random.Random(_UUID_SEED)
_generator_lock = threading.Lock()


@dataclass
class AppVersion:
    """Semantic version of an application."""

    major: int = 0
    minor: int = 0
    patch: int = 0


class EBackend(Enum):
    """Rendering backend."""

    VULKAN = 0
    DEFAULT = 0


@dataclass
class AppInfo:
    """Description of an application."""

    name: str = "App"
    version: AppVersion = field(default_factory=AppVersion)
    binherit: bool = True  # does the window inherit the application name
    backend: EBackend = EBackend.DEFAULT


class ECursor(Enum):
    """Mouse cursor shapes."""

    ARROW = 0
    IBEAM = 1
    CROSSHAIR = 2
    HAND = 3
    HRESIZE = 4
    VRESIZE = 5


def map_vector(items: Iterable[V], get_key: Callable[[V], K]) -> dict[K, list[V]]:
    """Group items by key.

    Keys come out in sorted order; items under one key keep their input order.
    """
    grouped: dict[K, list[V]] = {}
    for item in items:
        grouped.setdefault(get_key(item), []).append(item)
    return {key: grouped[key] for key in sorted(grouped)}


class UUID:
    """A 64-bit identifier drawn from a process-wide seeded generator."""

    __slots__ = ("_value",)

    def __init__(self, value: int | None = None) -> None:
        if value is None:
            with _generator_lock:
                value = _generator.getrandbits(64)
        elif not 0 <= value < _UUID_MAX:
            raise ValueError(f"UUID value {value} does not fit in 64 bits")
        self._value = int(value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UUID):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"UUID({self._value})"