"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
import yaml

from core.desktop_controller import DesktopController
from core.orchestrator import DesktopBundle, Orchestrator
from world_model.window_instance import Point

_WINDOW_EVENTS = {"taskbar_click", "window_click", "close_click"}
_POINTER_EVENTS = {"pointer_down", "pointer_move"}


def _runtime(root: Path | None = None) -> DesktopBundle:
    return Orchestrator(root=root).build()


def documents_list(root: Path | None = None) -> None:
    """Print available documents."""
    bundle = _runtime(root)
    payload = [doc.model_dump() for doc in bundle.documents.list_documents()]
    typer.echo(json.dumps(payload, indent=2))


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(root)
    typer.echo(json.dumps(bundle.config, indent=2))


def replay(script: Path, root: Path | None = None) -> None:
    """Replay a YAML list of desktop events and print the resulting windows."""
    events = _load_script(script)
    bundle = _runtime(root)
    for index, event in enumerate(events):
        try:
            apply_event(bundle.controller, event)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Event #{index} {event!r}: {exc}") from exc
    snapshot = bundle.controller.snapshot()
    typer.echo(
        json.dumps(
            {
                "windows": [window.to_dict() for window in bundle.controller.windows()],
                "active_window": snapshot.active_window,
            },
            indent=2,
        )
    )


def apply_event(controller: DesktopController, event: dict[str, Any]) -> None:
    """Dispatch one scripted event to the controller."""
    name = event["event"]
    if name == "open_document":
        controller.open_document(str(event["document"]))
    elif name == "open_file_manager":
        controller.open_file_manager()
    elif name in _WINDOW_EVENTS:
        getattr(controller, name)(str(event["window"]))
    elif name in _POINTER_EVENTS:
        getattr(controller, name)(Point(int(event["x"]), int(event["y"])))
    elif name == "pointer_up":
        controller.pointer_up()
    else:
        raise ValueError(f"Unknown event: {name}")


def _load_script(script: Path) -> list[dict[str, Any]]:
    if not script.exists():
        raise ValueError(f"Script not found: {script}")
    with script.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or []
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {script}: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"Replay script must be a list of mappings: {script}")
    return data
