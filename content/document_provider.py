"""In-memory document source backing the icon grid and file manager."""

from __future__ import annotations

from typing import Any

from content.types import Document

DEFAULT_DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Welcome.thread",
        "kind": "thread",
        "payload": "Welcome to the BBS - this is the first post.",
    },
    {"id": "2", "name": "General.thread", "kind": "thread", "payload": "General discussion board."},
    {"id": "3", "name": "Notes.txt", "kind": "text", "payload": "Local notes file."},
]


class DocumentProvider:
    """Keeps documents in insertion order."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        for document in documents or []:
            self.create(document)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> DocumentProvider:
        """Build provider from the ``documents`` config list, falling back to the seed set."""
        raw = config["documents"] if "documents" in config else DEFAULT_DOCUMENTS
        if not isinstance(raw, list):
            raise ValueError("documents config must be a list.")
        return cls([Document.model_validate(item) for item in raw])

    def list_documents(self) -> list[Document]:
        return list(self._documents.values())

    def get(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def create(self, document: Document) -> None:
        if document.id in self._documents:
            raise ValueError(f"Document id already exists: {document.id}")
        self._documents[document.id] = document
