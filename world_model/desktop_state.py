"""Desktop state schema."""

from __future__ import annotations

from dataclasses import dataclass, field

from world_model.window_registry import WindowRegistry


@dataclass
class DesktopState:
    """Minimal desktop snapshot."""

    open_windows: list[str] = field(default_factory=list)
    active_window: str | None = None
    dragging: str | None = None


def snapshot_desktop(registry: WindowRegistry, dragging: str | None = None) -> DesktopState:
    """Build a desktop snapshot; the active window is the topmost one."""
    topmost = registry.topmost()
    return DesktopState(
        open_windows=[window.id for window in registry.list()],
        active_window=topmost.id if topmost else None,
        dragging=dragging,
    )
