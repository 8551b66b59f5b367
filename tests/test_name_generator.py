#!/usr/bin/env python3
"""
Test module for new-name generation.
File: tests/test_name_generator.py

Usage:  python test_name_generator.py
        pytest test_name_generator.py
"""

import sys

from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from attachment_renamer.core.document import NoteDocument
from attachment_renamer.core.models import AttachmentFile
from attachment_renamer.core.settings import RenamerSettings
from attachment_renamer.renamer.name_generator import (
    build_variable_context,
    generate_new_name,
    is_meaningful_stem,
)
from tests.helpers import run_test_group


NOTE = NoteDocument.from_text(
    "Projects/Apollo/Launch plan.md",
    "---\nimageNameKey: foo\n---\n## Intro\n# Launch\n![[Pasted image 1.png]]\n",
)
IMAGE = AttachmentFile("Projects/Apollo/Pasted image 1.png")
APRIL_8 = datetime(2022, 4, 8, 9, 30)


def test_variable_context():
    assert build_variable_context(NOTE) == {
        "imageNameKey": "foo",
        "fileName": "Launch plan",
        "dirName": "Apollo",
        "dirPath": "Projects/Apollo",
        "firstHeading": "Launch",
    }


def test_variable_context_without_frontmatter():
    note = NoteDocument.from_text("Inbox.md", "just text\n")
    context = build_variable_context(note)
    assert context["imageNameKey"] == ""
    assert context["dirName"] == ""
    assert context["dirPath"] == ""
    assert context["firstHeading"] == ""


def test_default_pattern_uses_note_name():
    rendered = generate_new_name(IMAGE, NOTE, RenamerSettings(), now=APRIL_8)
    assert rendered.stem == "Launch plan"
    assert rendered.new_name == "Launch plan.png"
    assert rendered.is_meaningful


def test_pattern_with_date():
    settings = RenamerSettings(image_name_pattern="{{imageNameKey}}-{{DATE:YYYYMMDD}}")
    assert generate_new_name(IMAGE, NOTE, settings, now=APRIL_8).new_name == "foo-20220408.png"


def test_empty_rendering_is_not_meaningful():
    note = NoteDocument.from_text("Inbox.md", "")
    settings = RenamerSettings(image_name_pattern="{{imageNameKey}}-{{dirName}}")
    rendered = generate_new_name(AttachmentFile("Pasted image 2.jpg"), note, settings)
    assert rendered.stem == "-"
    assert not rendered.is_meaningful


def test_meaningful_check_uses_delimiter():
    assert not is_meaningful_stem("", "-")
    assert not is_meaningful_stem(" - -", "-")
    assert not is_meaningful_stem("__", "_")
    assert is_meaningful_stem("-", "_")
    assert is_meaningful_stem("a-", "-")


def main() -> int:
    return run_test_group("Testing new-name generation", [
        test_variable_context,
        test_variable_context_without_frontmatter,
        test_default_pattern_uses_note_name,
        test_pattern_with_date,
        test_empty_rendering_is_not_meaningful,
        test_meaningful_check_uses_delimiter,
    ])


if __name__ == "__main__":
    sys.exit(main())


# End of file #
