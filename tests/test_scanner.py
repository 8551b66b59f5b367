#!/usr/bin/env python3
"""
Test module for attachment selection.
File: tests/test_scanner.py

Usage:  python test_scanner.py
        pytest test_scanner.py
"""

import sys

from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from attachment_renamer.core.models import AttachmentFile
from attachment_renamer.core.scanner import (
    is_batch_image,
    is_image,
    is_video,
    matches_exclude_extension,
    should_handle,
)
from attachment_renamer.core.settings import RenamerSettings
from tests.helpers import run_test_group


def attachment(path: str) -> AttachmentFile:
    return AttachmentFile.from_vault_path(path)


def test_pasted_images_are_always_handled():
    settings = RenamerSettings()
    assert should_handle(attachment("notes/Pasted image 20240101120000.png"), settings)
    assert not should_handle(attachment("notes/diagram.png"), settings)


def test_markdown_is_never_handled():
    settings = RenamerSettings(handle_all_attachments=True)
    assert not should_handle(attachment("notes/other.md"), settings)
    assert not should_handle(attachment("Pasted image note.md"), settings)


def test_handle_all_attachments_with_exclusions():
    settings = RenamerSettings(handle_all_attachments=True, exclude_extension_pattern="docx?|xlsx?|zip")
    assert should_handle(attachment("files/report.pdf"), settings)
    assert not should_handle(attachment("files/report.docx"), settings)
    assert not should_handle(attachment("files/archive.zip"), settings)


def test_exclude_pattern_uses_first_line_only():
    pdf = attachment("a.pdf")
    assert matches_exclude_extension(pdf, "pdf\nzip")
    assert not matches_exclude_extension(pdf, "zip\npdf")
    assert not matches_exclude_extension(pdf, "")
    assert not matches_exclude_extension(pdf, "\npdf")


def test_invalid_exclude_pattern_excludes_nothing():
    assert not matches_exclude_extension(attachment("a.pdf"), "pdf(")
    settings = RenamerSettings(handle_all_attachments=True, exclude_extension_pattern="[")
    assert should_handle(attachment("a.pdf"), settings)


def test_extension_helpers():
    assert is_image(attachment("a.JPG"))
    assert is_image(attachment("a.svg"))
    assert not is_image(attachment("a.webp"))
    assert is_video(attachment("clip.mp4"))
    assert not is_video(attachment("clip.webm"))

    assert is_batch_image(attachment("a.jpeg"))
    assert is_batch_image(attachment("a.webp"))
    assert is_batch_image(attachment("a.TIFF"))
    assert not is_batch_image(attachment("a.svg"))
    assert not is_batch_image(attachment("a.pdf"))


def main() -> int:
    return run_test_group("Testing attachment selection", [
        test_pasted_images_are_always_handled,
        test_markdown_is_never_handled,
        test_handle_all_attachments_with_exclusions,
        test_exclude_pattern_uses_first_line_only,
        test_invalid_exclude_pattern_excludes_nothing,
        test_extension_helpers,
    ])


if __name__ == "__main__":
    sys.exit(main())


# End of file #
