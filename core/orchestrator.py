"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from content.document_provider import DocumentProvider
from core.desktop_controller import DesktopController
from core.event_bus import EventBus
from core.runtime_config import load_effective_config, pair
from interaction.drag_controller import DragController, clamp_to_bounds
from world_model.window_instance import Point, Size
from world_model.window_registry import WindowRegistry


@dataclass
class DesktopBundle:
    """Holds initialized desktop components."""

    config: dict[str, Any]
    registry: WindowRegistry
    documents: DocumentProvider
    event_bus: EventBus
    controller: DesktopController


class Orchestrator:
    """Creates and wires desktop components for CLI use."""

    def __init__(self, root: Path | None = None, config: dict[str, Any] | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self._config = config

    def build(self) -> DesktopBundle:
        config = self._config if self._config is not None else load_effective_config(self.root)
        window_cfg = config.get("window", {})
        desktop_cfg = config.get("desktop", {})

        registry = WindowRegistry(
            default_position=Point(*pair(window_cfg.get("default_position", [100, 80]), "window.default_position")),
            default_size=Size(*pair(window_cfg.get("default_size", [420, 300]), "window.default_size")),
        )
        clamp = None
        if config.get("drag", {}).get("clamp_to_desktop", False):
            clamp = clamp_to_bounds(
                Size(int(desktop_cfg.get("width", 1280)), int(desktop_cfg.get("height", 800)))
            )
        documents = DocumentProvider.from_config(config)
        event_bus = EventBus()
        controller = DesktopController(
            registry=registry,
            documents=documents,
            drag=DragController(registry, clamp=clamp),
            event_bus=event_bus,
            titlebar_height=int(window_cfg.get("titlebar_height", 28)),
        )
        return DesktopBundle(
            config=config,
            registry=registry,
            documents=documents,
            event_bus=event_bus,
            controller=controller,
        )
