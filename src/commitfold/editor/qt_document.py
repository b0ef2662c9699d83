"""Adapter exposing a Qt ``QTextDocument`` as a :class:`LineSource`."""

from __future__ import annotations

from typing import Any

from PySide6.QtGui import QTextDocument

from .document_model import GIT_COMMIT_LANGUAGE, TextLine


class QtLineDocument:
    """Read-only line view over a ``QTextDocument`` (one line per text block)."""

    def __init__(self, document: QTextDocument | None = None, *, language_id: str = GIT_COMMIT_LANGUAGE) -> None:
        self._document = document if document is not None else QTextDocument()
        self._language_id = language_id

    @classmethod
    def from_text(cls, text: str, *, language_id: str = GIT_COMMIT_LANGUAGE) -> "QtLineDocument":
        document = QTextDocument()
        document.setPlainText(text)
        return cls(document, language_id=language_id)

    @classmethod
    def from_editor(cls, editor: Any, *, language_id: str = GIT_COMMIT_LANGUAGE) -> "QtLineDocument":
        """Wrap the document owned by a ``QPlainTextEdit``/``QTextEdit``."""

        return cls(editor.document(), language_id=language_id)

    @property
    def document(self) -> QTextDocument:
        return self._document

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def line_count(self) -> int:
        return self._document.blockCount()

    def line_at(self, index: int) -> TextLine:
        if index < 0 or index >= self._document.blockCount():
            raise IndexError(f"Line {index} is outside document of {self._document.blockCount()} lines")
        block = self._document.findBlockByNumber(index)
        return TextLine(line_number=index, text=block.text())


__all__ = ["QtLineDocument"]
