"""Window instance and geometry value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Point:
    """Integer 2D vector used for positions, pointers and offsets."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def as_list(self) -> list[int]:
        return [self.x, self.y]


@dataclass(frozen=True)
class Size:
    """Window dimensions."""

    width: int
    height: int


@dataclass
class WindowInstance:
    """One open window on the desktop.

    ``id``, ``title``, ``content`` and ``size`` are fixed for the lifetime of the
    instance. Only the registry mutates ``z`` (on raise) and ``position`` (on drag).
    """

    id: str
    title: str
    content: Any
    z: int
    position: Point
    size: Size

    def contains(self, point: Point) -> bool:
        """Return True when ``point`` lies inside the window rectangle."""
        return (
            self.position.x <= point.x < self.position.x + self.size.width
            and self.position.y <= point.y < self.position.y + self.size.height
        )

    def in_titlebar(self, point: Point, titlebar_height: int) -> bool:
        return self.contains(point) and point.y < self.position.y + titlebar_height

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "z": self.z,
            "position": self.position.as_list(),
            "size": [self.size.width, self.size.height],
        }
