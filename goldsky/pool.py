"""Reusable object storage for short-lived entities (gold pieces)."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Pool(Generic[T]):
    """
    Slot arena with a free-index stack.

    Every object the pool ever built lives in ``slots`` for the lifetime of the
    pool. A slot index is either on the free stack or in the active set, never
    both. ``acquire`` pops a free index and resets the object in place (or builds
    a new one when the stack is empty); ``release`` pushes the index back.

    Parameters
    ----------
    factory : Callable[..., T]
        Builds a brand new object from the acquire arguments.
    reset : Callable[..., None]
        Re-initializes a recycled object: ``reset(obj, *args)``.
    """

    def __init__(self, factory: Callable[..., T], reset: Callable[..., None]) -> None:
        self.factory = factory
        self.reset = reset
        self.slots: list[T] = []
        self._free: list[int] = []
        self._active: dict[int, None] = {}      # slot index -> None, kept in acquire order
        self._slot_of: dict[int, int] = {}      # id(obj) -> slot index

    def acquire(self, *args) -> T:
        if self._free:
            index = self._free.pop()
            obj = self.slots[index]
            self.reset(obj, *args)
        else:
            obj = self.factory(*args)
            index = len(self.slots)
            self.slots.append(obj)
            self._slot_of[id(obj)] = index
        self._active[index] = None
        return obj

    def release(self, obj: T) -> None:
        """Return ``obj`` to the free stack. Unknown or already free objects are ignored."""
        index = self._slot_of.get(id(obj))
        if index is None or index not in self._active:
            return
        del self._active[index]
        self._free.append(index)

    def active_items(self) -> list[T]:
        """Active objects in acquire order. The list is a copy, so releasing while iterating is safe."""
        return [self.slots[i] for i in self._active]

    def free_items(self) -> list[T]:
        return [self.slots[i] for i in self._free]

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def free_count(self) -> int:
        return len(self._free)

    def is_active(self, obj: T) -> bool:
        index = self._slot_of.get(id(obj))
        return index is not None and index in self._active

    def clear(self) -> None:
        """Drop every object, active and free."""
        self.slots.clear()
        self._free.clear()
        self._active.clear()
        self._slot_of.clear()

    def __len__(self) -> int:
        return len(self._active)
