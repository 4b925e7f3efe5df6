"""Routes desktop UI events into the window registry and drag controller."""

from __future__ import annotations

import logging
from typing import Any

from content.document_provider import DocumentProvider
from core.event_bus import (
    DRAG_COMPLETED,
    WINDOW_CLOSED,
    WINDOW_MOVED,
    WINDOW_OPENED,
    WINDOW_RAISED,
    EventBus,
)
from interaction.drag_controller import CompletedDrag, DragController
from world_model.desktop_state import DesktopState, snapshot_desktop
from world_model.window_instance import Point, WindowInstance
from world_model.window_registry import WindowRegistry

logger = logging.getLogger("desk.controller")

FILE_MANAGER_TITLE = "File Manager"


class DesktopController:
    """Thin orchestrator over one registry and the single system-wide drag."""

    def __init__(
        self,
        registry: WindowRegistry,
        documents: DocumentProvider,
        drag: DragController | None = None,
        event_bus: EventBus | None = None,
        titlebar_height: int = 28,
    ) -> None:
        self.registry = registry
        self.documents = documents
        self.drag = drag or DragController(registry)
        self.event_bus = event_bus or EventBus()
        self.titlebar_height = titlebar_height

    # Icons, menu and taskbar

    def open_document(self, document_id: str) -> str | None:
        """Open a new window for a document; repeated calls open duplicates."""
        document = self.documents.get(document_id)
        if document is None:
            logger.debug("open_document: unknown document %s", document_id)
            return None
        return self._open(document.name, document.payload, document_id=document.id)

    def open_file_manager(self) -> str:
        listing = [
            {"id": doc.id, "name": doc.name, "kind": doc.kind}
            for doc in self.documents.list_documents()
        ]
        return self._open(FILE_MANAGER_TITLE, listing)

    def taskbar_click(self, window_id: str) -> None:
        self._raise(window_id)

    def window_click(self, window_id: str) -> None:
        self._raise(window_id)

    def close_click(self, window_id: str) -> None:
        if window_id not in self.registry:
            return
        self.registry.close(window_id)
        self.event_bus.emit(WINDOW_CLOSED, {"window_id": window_id})

    # Pointer

    def pointer_down(self, point: Point) -> str | None:
        """Start a drag on a titlebar hit, raise on a body hit; return the hit id."""
        window = self.registry.window_at(point)
        if window is None:
            return None
        if window.in_titlebar(point, self.titlebar_height):
            self.begin_drag(window.id, point)
        else:
            self._raise(window.id)
        return window.id

    def pointer_move(self, point: Point) -> None:
        if self.drag.is_dragging:
            self.continue_drag(point)

    def pointer_up(self, point: Point | None = None) -> CompletedDrag | None:
        _ = point
        if not self.drag.is_dragging:
            return None
        return self.end_drag()

    # Drag lifecycle hooks

    def begin_drag(self, window_id: str, pointer: Point) -> bool:
        if self.drag.is_dragging:
            self.end_drag()
        started = self.drag.begin_drag(window_id, pointer)
        if started:
            self._emit_raised(window_id)
        return started

    def continue_drag(self, pointer: Point) -> None:
        window_id = self.drag.window_id
        position = self.drag.continue_drag(pointer)
        if window_id in self.registry:
            self.event_bus.emit(WINDOW_MOVED, {"window_id": window_id, "position": position.as_list()})

    def end_drag(self) -> CompletedDrag:
        completed = self.drag.end_drag()
        self.event_bus.emit(
            DRAG_COMPLETED,
            {
                "window_id": completed.window_id,
                "origin": completed.origin.as_list(),
                "final": completed.final.as_list() if completed.final else None,
            },
        )
        return completed

    # Views

    def windows(self) -> list[WindowInstance]:
        return self.registry.list()

    def taskbar(self) -> list[tuple[str, str]]:
        return [(window.id, window.title) for window in self.registry.list()]

    def paint_order(self) -> list[WindowInstance]:
        return self.registry.paint_order()

    def snapshot(self) -> DesktopState:
        return snapshot_desktop(self.registry, dragging=self.drag.window_id)

    def _open(self, title: str, content: Any, **extra: Any) -> str:
        window_id = self.registry.open(title, content)
        self.event_bus.emit(WINDOW_OPENED, {"window_id": window_id, "title": title, **extra})
        return window_id

    def _raise(self, window_id: str) -> None:
        if window_id not in self.registry:
            return
        self.registry.raise_window(window_id)
        self._emit_raised(window_id)

    def _emit_raised(self, window_id: str) -> None:
        window = self.registry.get(window_id)
        if window is not None:
            self.event_bus.emit(WINDOW_RAISED, {"window_id": window_id, "z": window.z})
