"""Registry of open windows and their stacking order."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from world_model.window_instance import Point, Size, WindowInstance

logger = logging.getLogger("desk.registry")


class WindowRegistry:
    """Authoritative set of open windows.

    Every open and every raise consumes one tick of the z counter, so the window
    with the highest ``z`` is always the one most recently opened or raised.
    Operations addressing an id that is not open are silent no-ops: UI events may
    arrive after the window they target has already been closed.
    """

    def __init__(
        self,
        default_position: Point | None = None,
        default_size: Size | None = None,
    ) -> None:
        self.default_position = default_position or Point(100, 80)
        self.default_size = default_size or Size(420, 300)
        self._windows: dict[str, WindowInstance] = {}
        self._z_counter = 0
        self._id_counter = 0

    def _next_z(self) -> int:
        self._z_counter += 1
        return self._z_counter

    def _next_id(self) -> str:
        self._id_counter += 1
        return f"w{self._id_counter}"

    def open(self, title: str, content: Any = None) -> str:
        """Open a new window on top of the stack and return its id."""
        window_id = self._next_id()
        self._windows[window_id] = WindowInstance(
            id=window_id,
            title=title,
            content=content,
            z=self._next_z(),
            position=self.default_position,
            size=self.default_size,
        )
        logger.debug("Opened %s (%s) at z=%s", window_id, title, self._z_counter)
        return window_id

    def close(self, window_id: str) -> None:
        if self._windows.pop(window_id, None) is not None:
            logger.debug("Closed %s", window_id)

    def raise_window(self, window_id: str) -> None:
        window = self._windows.get(window_id)
        if window is None:
            return
        window.z = self._next_z()
        logger.debug("Raised %s to z=%s", window_id, window.z)

    def set_position(self, window_id: str, x: int, y: int) -> None:
        window = self._windows.get(window_id)
        if window is None:
            return
        window.position = Point(x, y)

    def get(self, window_id: str) -> WindowInstance | None:
        window = self._windows.get(window_id)
        return replace(window) if window is not None else None

    def list(self) -> list[WindowInstance]:
        """Snapshot of open windows in the order they were opened."""
        return [replace(window) for window in self._windows.values()]

    def paint_order(self) -> list[WindowInstance]:
        return sorted(self.list(), key=lambda window: window.z)

    def topmost(self) -> WindowInstance | None:
        if not self._windows:
            return None
        return replace(max(self._windows.values(), key=lambda window: window.z))

    def window_at(self, point: Point) -> WindowInstance | None:
        """Return the highest window whose rectangle contains ``point``."""
        hits = [window for window in self._windows.values() if window.contains(point)]
        if not hits:
            return None
        return replace(max(hits, key=lambda window: window.z))

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._windows

    def __len__(self) -> int:
        return len(self._windows)
