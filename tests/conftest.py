"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest

# Run Qt headless so the suite works without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from commitfold.editor.document_model import LineDocument


@pytest.fixture
def commit_document() -> LineDocument:
    return LineDocument.from_text(
        "Add folding for commit messages\n"
        "\n"
        "Paragraphs, headers and comment blocks can now be collapsed\n"
        "in the commit message editor.\n"
        "\n"
        "# Please enter the commit message for your changes.\n"
        "# On branch main"
    )
