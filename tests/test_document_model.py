"""Tests for the in-memory line document."""

from __future__ import annotations

from pathlib import Path

import pytest

from commitfold.core.ranges import LineRange
from commitfold.editor.document_model import GIT_COMMIT_LANGUAGE, LineDocument, LineSource, TextLine


def test_from_text_splits_on_universal_newlines() -> None:
    document = LineDocument.from_text("subject\r\n\r\nbody\rmore\n")

    assert document.lines == ("subject", "", "body", "more", "")
    assert document.line_count == 5
    assert document.language_id == GIT_COMMIT_LANGUAGE


def test_empty_text_has_one_empty_line() -> None:
    assert LineDocument.from_text("").line_count == 1
    assert LineDocument().line_count == 0


def test_line_at_returns_text_line_and_rejects_out_of_range() -> None:
    document = LineDocument.from_text("a\n  \nc")

    assert document.line_at(1) == TextLine(line_number=1, text="  ")
    assert document.line_at(1).is_empty_or_whitespace
    with pytest.raises(IndexError):
        document.line_at(3)
    with pytest.raises(IndexError):
        document.line_at(-1)


def test_iter_lines_and_text_in() -> None:
    document = LineDocument.from_text("one\ntwo\nthree")

    assert [line.line_number for line in document.iter_lines()] == [0, 1, 2]
    assert document.text_in(LineRange(1, 9)) == "two\nthree"
    assert LineDocument().text_in(LineRange(0, 1)) == ""


def test_update_text_bumps_version_and_hash() -> None:
    document = LineDocument.from_text("draft")
    signature = document.version_signature()
    original_hash = document.content_hash

    document.update_text("draft\n\nbody")

    assert document.version_id == 2
    assert document.content_hash != original_hash
    assert document.version_signature() != signature
    assert document.line_count == 3


def test_from_path_reads_utf8(tmp_path: Path) -> None:
    target = tmp_path / "COMMIT_EDITMSG"
    target.write_text("Résumé support\n\n# comment\n", encoding="utf-8")

    document = LineDocument.from_path(target)

    assert document.path == target
    assert document.line_at(0).text == "Résumé support"


def test_line_document_satisfies_line_source_protocol() -> None:
    assert isinstance(LineDocument.from_text("x"), LineSource)
