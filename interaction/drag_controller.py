"""Pointer drag state machine for moving windows."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from world_model.window_instance import Point, Size
from world_model.window_registry import WindowRegistry

logger = logging.getLogger("desk.drag")

ClampFn = Callable[[Point, Size], Point]


class DragStateError(RuntimeError):
    """Raised when the drag lifecycle is driven out of order."""


@dataclass(frozen=True)
class Idle:
    """No drag in progress."""


@dataclass(frozen=True)
class Dragging:
    """A drag of ``window_id`` keeping ``offset`` between pointer and window origin."""

    window_id: str
    offset: Point
    origin: Point


DragState = Idle | Dragging


@dataclass(frozen=True)
class CompletedDrag:
    """Outcome of a finished drag; ``final`` is None if the window closed mid-drag."""

    window_id: str
    origin: Point
    final: Point | None

    @property
    def moved(self) -> bool:
        return self.final is not None and self.final != self.origin


def clamp_to_bounds(bounds: Size) -> ClampFn:
    """Build a clamp that keeps a window's rectangle inside ``bounds``."""

    def _clamp(position: Point, size: Size) -> Point:
        max_x = max(0, bounds.width - size.width)
        max_y = max(0, bounds.height - size.height)
        return Point(min(max(position.x, 0), max_x), min(max(position.y, 0), max_y))

    return _clamp


class DragController:
    """Turns pointer-down/move/up into ``set_position`` calls for one window at a time."""

    def __init__(self, registry: WindowRegistry, clamp: ClampFn | None = None) -> None:
        self.registry = registry
        self.clamp = clamp
        self._state: DragState = Idle()

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return isinstance(self._state, Dragging)

    @property
    def window_id(self) -> str | None:
        return self._state.window_id if isinstance(self._state, Dragging) else None

    def begin_drag(self, window_id: str, pointer: Point) -> bool:
        """Raise the window and start dragging it.

        Returns False, staying idle, when the window is not open. A drag already in
        progress is ended first.
        """
        if isinstance(self._state, Dragging):
            logger.warning(
                "begin_drag(%s) while dragging %s; ending previous drag",
                window_id,
                self._state.window_id,
            )
            self.end_drag()

        self.registry.raise_window(window_id)
        window = self.registry.get(window_id)
        if window is None:
            return False
        self._state = Dragging(
            window_id=window_id,
            offset=pointer - window.position,
            origin=window.position,
        )
        logger.debug("Drag start %s offset=%s", window_id, self._state.offset)
        return True

    def continue_drag(self, pointer: Point) -> Point:
        """Move the dragged window so the pointer offset is preserved."""
        state = self._require_dragging("continue_drag")
        position = pointer - state.offset
        if self.clamp is not None:
            window = self.registry.get(state.window_id)
            if window is not None:
                position = self.clamp(position, window.size)
        self.registry.set_position(state.window_id, position.x, position.y)
        return position

    def end_drag(self) -> CompletedDrag:
        state = self._require_dragging("end_drag")
        self._state = Idle()
        window = self.registry.get(state.window_id)
        completed = CompletedDrag(
            window_id=state.window_id,
            origin=state.origin,
            final=window.position if window is not None else None,
        )
        logger.debug("Drag end %s final=%s", completed.window_id, completed.final)
        return completed

    def _require_dragging(self, operation: str) -> Dragging:
        if not isinstance(self._state, Dragging):
            raise DragStateError(f"{operation} called with no active drag.")
        return self._state
