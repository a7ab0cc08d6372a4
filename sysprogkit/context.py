"""Cancellable contexts arranged as a tree: cancellation flows down, value lookups flow up."""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass
from typing import Any, Hashable


class ContextError(enum.Enum):
    """Why a context is done."""

    CANCELED = "canceled"

    def __str__(self) -> str:
        return "Canceled"


class ContextValueError(LookupError):
    """No value is stored under the requested key."""


class _TreeContext:
    """A node of the context tree that cancellation can be passed down from."""

    def __init__(self) -> None:
        self._children: list[ContextWithCancel] = []

    def _add_child(self, child: ContextWithCancel) -> None:
        self._children.append(child)


class BackgroundContext(_TreeContext):
    """The empty root context: never canceled and holding no values."""

    def __init__(self) -> None:
        super().__init__()

    async def done(self) -> ContextError | None:
        """Wait for cancellation, which for the root never comes."""
        await asyncio.get_running_loop().create_future()
        return None

    def err(self) -> ContextError | None:
        """The root is never done, so there is no reason."""
        return None

    def value(self, key: Hashable) -> Any:
        """The root holds no values; always raises ContextValueError."""
        raise ContextValueError(f"no value for key {key!r}")


class ContextWithCancel(_TreeContext):
    """A context that can be canceled, together with all of its descendants."""

    def __init__(self, parent: _TreeContext) -> None:
        if not isinstance(parent, _TreeContext):
            raise TypeError("parent must be a BackgroundContext or ContextWithCancel")
        super().__init__()
        self._parent = parent
        self._canceled: ContextError | None = None
        self._cancel_event = asyncio.Event()
        parent._add_child(self)

    async def done(self) -> ContextError | None:
        """Wait until this context is canceled and return the reason."""
        await self._cancel_event.wait()
        return self._canceled

    def err(self) -> ContextError | None:
        """The reason this context is done, or None while it is still live."""
        return self._canceled

    def value(self, key: Hashable) -> Any:
        """Look ``key`` up in the ancestors; this context holds no values itself."""
        return self._parent.value(key)

    def _cancel_propagate(self, error: ContextError) -> None:
        for child in self._children:
            child._cancel_propagate(error)
        self._canceled = error
        self._cancel_event.set()


@dataclass(frozen=True)
class Canceler:
    """Cancels the context it was created with."""

    context: ContextWithCancel

    def cancel(self) -> None:
        """Cancel the context and every context derived from it."""
        self.context._cancel_propagate(ContextError.CANCELED)


def with_cancel(parent: _TreeContext) -> tuple[ContextWithCancel, Canceler]:
    """Derive a cancellable context from ``parent`` and return it with its canceler."""
    context = ContextWithCancel(parent)
    return context, Canceler(context)