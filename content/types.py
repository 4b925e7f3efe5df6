"""Document payload models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

DocumentKind = Literal["thread", "text", "app", "folder"]


class Document(BaseModel):
    """A document the desktop can show as an icon and open in a window."""

    id: str
    name: str
    kind: DocumentKind = "text"
    payload: str = ""
    meta: dict[str, Any] = Field(default_factory=dict)
