"""Tests for the QTextDocument line adapter."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from commitfold.core.ranges import FoldingRangeKind, FoldRange  # noqa: E402
from commitfold.editor.document_model import LineSource  # noqa: E402
from commitfold.folding.provider import CommitMessageFoldingProvider  # noqa: E402


@pytest.fixture(autouse=True)
def _ensure_qapp(qapp):  # pragma: no cover - pytest-qt provides the fixture
    """Guarantee a running QApplication before creating Qt documents."""

    return qapp


def test_qt_document_exposes_blocks_as_lines() -> None:
    from commitfold.editor.qt_document import QtLineDocument

    document = QtLineDocument.from_text("subject\n\nbody")

    assert isinstance(document, LineSource)
    assert document.line_count == 3
    assert document.line_at(2).text == "body"
    with pytest.raises(IndexError):
        document.line_at(3)


def test_qt_document_is_reachable_lazily_from_editor_package() -> None:
    import commitfold.editor as editor

    assert editor.qt_document.QtLineDocument.__name__ == "QtLineDocument"


def test_provider_folds_qt_editor_contents() -> None:
    from PySide6.QtWidgets import QPlainTextEdit

    from commitfold.editor.qt_document import QtLineDocument

    editor = QPlainTextEdit()
    editor.setPlainText("Subject\n\nline one\nline two\n\n# c1\n# c2")

    ranges = CommitMessageFoldingProvider().provide_folding_ranges(QtLineDocument.from_editor(editor))

    assert ranges == [
        FoldRange(2, 3, FoldingRangeKind.REGION),
        FoldRange(5, 6, FoldingRangeKind.COMMENT),
    ]
