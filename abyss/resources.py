"""Typed resource handles and per-type resource stores with handle recycling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class EResource(IntEnum):
    """Kinds of resources."""

    NONE = 0
    SHADER = 1
    TEXTURE = 2
    FONT = 3
    MAX_ENUM = 4


@dataclass(frozen=True)
class Resource:
    """A handle to a stored resource of some kind."""

    kind: EResource = EResource.NONE
    handle: int = 0

    def __bool__(self) -> bool:
        return self.kind != EResource.NONE


class ResourceHandler(ABC, Generic[T]):
    """Observer notified when resources are added to or erased from a store."""

    def __init__(self, user_data: Any = None) -> None:
        self.user_data = user_data

    @abstractmethod
    def on_add(self, handle: int, resource: T) -> None:
        """Called before ``resource`` is stored under ``handle``."""

    @abstractmethod
    def on_erase(self, handle: int, resource: T) -> None:
        """Called before the resource under ``handle`` is removed."""


class ResourceClass(Generic[T]):
    """Stores resources of one kind and hands out recycled integer handles."""

    def __init__(self, kind: EResource) -> None:
        self.kind = kind
        self._next_handle = 0
        self._resources: dict[int, T] = {}
        self._recycled: deque[int] = deque()
        self._handlers: list[ResourceHandler[T]] = []

    def _take_handle(self) -> int:
        if self._recycled:
            return self._recycled.popleft()
        handle = self._next_handle
        self._next_handle += 1
        return handle

    def _check(self, resource: Resource) -> None:
        if resource.kind != self.kind:
            raise ValueError(
                f"resource type mismatch: expected {self.kind.name}, got {resource.kind.name}"
            )
        if resource.handle not in self._resources:
            raise KeyError(
                f"Resource(Type: {int(resource.kind)}, Handle: {resource.handle}) not found"
            )

    def add(self, item: T) -> Resource:
        """Store ``item``, notifying handlers, and return its handle."""
        handle = self._take_handle()
        for handler in self._handlers:
            handler.on_add(handle, item)
        self._resources[handle] = item
        return Resource(self.kind, handle)

    def add_handler(self, handler: ResourceHandler[T]) -> None:
        self._handlers.append(handler)

    def emplace(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> Resource:
        """Build an item with ``factory`` and store it without notifying handlers."""
        handle = self._take_handle()
        self._resources[handle] = factory(*args, **kwargs)
        return Resource(self.kind, handle)

    def erase(self, resource: Resource) -> None:
        """Remove a resource, notifying handlers, and recycle its handle."""
        self._check(resource)
        handle = resource.handle
        for handler in self._handlers:
            handler.on_erase(handle, self._resources[handle])
        del self._resources[handle]
        self._recycled.append(handle)

    def at(self, resource: Resource) -> T:
        self._check(resource)
        return self._resources[resource.handle]

    def clear(self) -> None:
        """Drop all stored resources; handles already issued are not reused."""
        self._resources.clear()

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[tuple[int, T]]:
        return iter(list(self._resources.items()))

    def __contains__(self, resource: object) -> bool:
        return (
            isinstance(resource, Resource)
            and resource.kind == self.kind
            and resource.handle in self._resources
        )