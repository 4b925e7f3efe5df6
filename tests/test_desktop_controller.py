"""Desktop orchestration tests."""

from __future__ import annotations

from typing import Any

import pytest

from content.document_provider import DocumentProvider
from content.types import Document
from core.desktop_controller import FILE_MANAGER_TITLE, DesktopController
from core.event_bus import EventBus
from interaction.drag_controller import DragStateError
from world_model.window_instance import Point
from world_model.window_registry import WindowRegistry


def build_controller() -> tuple[DesktopController, list[dict[str, Any]]]:
    documents = DocumentProvider(
        [
            Document(id="notes", name="Notes", kind="text", payload="c1"),
            Document(id="mail", name="Mail", kind="thread", payload="c2"),
        ]
    )
    bus = EventBus()
    events: list[dict[str, Any]] = []
    for name in ("window.opened", "window.closed", "window.raised", "window.moved", "drag.completed"):
        bus.subscribe(name, events.append)
    controller = DesktopController(registry=WindowRegistry(), documents=documents, event_bus=bus)
    return controller, events


def test_end_to_end_scenario() -> None:
    controller, _ = build_controller()
    registry = controller.registry

    w1 = controller.open_document("notes")
    assert (w1, registry.get(w1).z) == ("w1", 1)
    w2 = controller.open_document("mail")
    assert (w2, registry.get(w2).z) == ("w2", 2)

    controller.taskbar_click(w1)
    assert registry.get(w1).z == 3
    assert registry.topmost().id == w1

    controller.close_click(w2)
    assert [window.id for window in controller.windows()] == [w1]

    assert registry.get(w1).position == Point(100, 80)
    controller.begin_drag(w1, Point(50, 50))
    controller.continue_drag(Point(60, 60))
    assert registry.get(w1).position == Point(110, 90)
    controller.end_drag()
    assert controller.snapshot().dragging is None


def test_double_click_opens_duplicate_windows() -> None:
    controller, _ = build_controller()

    first = controller.open_document("notes")
    second = controller.open_document("notes")

    assert first != second
    assert [title for _, title in controller.taskbar()] == ["Notes", "Notes"]


def test_unknown_document_is_ignored() -> None:
    controller, events = build_controller()

    assert controller.open_document("missing") is None
    assert controller.windows() == []
    assert events == []


def test_file_manager_lists_documents() -> None:
    controller, _ = build_controller()

    window_id = controller.open_file_manager()
    window = controller.registry.get(window_id)

    assert window.title == FILE_MANAGER_TITLE
    assert [entry["id"] for entry in window.content] == ["notes", "mail"]


def test_pointer_down_on_titlebar_drags_and_body_only_raises() -> None:
    controller, _ = build_controller()
    a = controller.open_document("notes")
    b = controller.open_document("mail")
    controller.registry.set_position(b, 600, 500)

    assert controller.pointer_down(Point(150, 200)) == a
    assert not controller.drag.is_dragging
    assert controller.registry.topmost().id == a

    assert controller.pointer_down(Point(610, 510)) == b
    assert controller.drag.is_dragging
    assert controller.registry.topmost().id == b
    controller.pointer_move(Point(710, 610))
    completed = controller.pointer_up(Point(2000, 2000))

    assert completed is not None and completed.final == Point(700, 600)
    assert not controller.drag.is_dragging


def test_pointer_events_without_drag_are_ignored() -> None:
    controller, _ = build_controller()
    controller.open_document("notes")

    assert controller.pointer_down(Point(5, 5)) is None
    controller.pointer_move(Point(10, 10))
    assert controller.pointer_up() is None
    assert controller.registry.get("w1").position == Point(100, 80)


def test_direct_drag_hooks_are_strict() -> None:
    controller, _ = build_controller()

    with pytest.raises(DragStateError):
        controller.continue_drag(Point(0, 0))
    with pytest.raises(DragStateError):
        controller.end_drag()


def test_close_mid_drag_then_pointer_up_releases() -> None:
    controller, events = build_controller()
    window_id = controller.open_document("notes")

    controller.pointer_down(Point(110, 90))
    controller.close_click(window_id)
    controller.pointer_move(Point(500, 500))
    completed = controller.pointer_up()

    assert completed.final is None
    assert controller.windows() == []
    assert not [event for event in events if event["event"] == "window.moved"]


def test_events_emitted_for_changes_only() -> None:
    controller, events = build_controller()
    window_id = controller.open_document("notes")
    controller.window_click("missing")
    controller.close_click("missing")
    controller.window_click(window_id)
    controller.close_click(window_id)
    controller.close_click(window_id)

    assert [event["event"] for event in events] == ["window.opened", "window.raised", "window.closed"]
    assert events[0]["document_id"] == "notes"
    assert events[1]["z"] == 2


def test_snapshot_reports_active_window() -> None:
    controller, _ = build_controller()
    a = controller.open_document("notes")
    b = controller.open_document("mail")

    state = controller.snapshot()
    assert state.open_windows == [a, b]
    assert state.active_window == b
    assert [window.id for window in controller.paint_order()] == [a, b]


def test_new_drag_completes_previous_drag() -> None:
    controller, events = build_controller()
    w1 = controller.open_document("notes")
    w2 = controller.open_document("mail")

    controller.begin_drag(w1, Point(110, 90))
    controller.continue_drag(Point(120, 100))
    controller.begin_drag(w2, Point(110, 90))
    controller.end_drag()

    completed = [event for event in events if event["event"] == "drag.completed"]
    assert [event["window_id"] for event in completed] == [w1, w2]
    assert completed[0]["final"] == [110, 90]
