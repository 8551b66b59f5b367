"""
Attachment selection - which new files the renamer should handle.
File: attachment_renamer/core/scanner.py
"""

import re

from rich.console import Console

from attachment_renamer.constants import IMAGE_EXTS, VIDEO_EXTS, PASTED_IMAGE_PREFIX
from attachment_renamer.core.models import AttachmentFile
from attachment_renamer.renamer.renamer_regex_patterns import BATCH_IMAGE_EXT_RGX

console = Console()


def is_markdown_file(attachment: AttachmentFile) -> bool:
    return attachment.extension == 'md'


def is_pasted_image(attachment: AttachmentFile) -> bool:
    return attachment.name.startswith(PASTED_IMAGE_PREFIX)


def is_image(attachment: AttachmentFile) -> bool:
    return attachment.extension.lower() in IMAGE_EXTS


def is_video(attachment: AttachmentFile) -> bool:
    return attachment.extension.lower() in VIDEO_EXTS


def is_batch_image(attachment: AttachmentFile) -> bool:
    """Extension filter used by the instant batch rename."""
    return BATCH_IMAGE_EXT_RGX.search(attachment.extension) is not None


def matches_exclude_extension(attachment: AttachmentFile, pattern: str) -> bool:
    """
    Check the attachment's extension against the exclude pattern.

    Only the first line of the pattern is used. An invalid regex excludes
    nothing and prints a warning.
    """
    lines = (pattern or '').splitlines()
    first_line = lines[0] if lines else ''
    if not first_line:
        return False
    try:
        return re.search(first_line, attachment.extension) is not None
    except re.error as e:
        console.print(f"[yellow]Invalid exclude extension pattern '{first_line}': {e}[/yellow]")
        return False


def should_handle(attachment: AttachmentFile, settings) -> bool:
    """
    Decide whether a newly created file is renamed.

    Markdown files never are. Pasted images always are. Anything else only
    with handle_all_attachments, and only if its extension is not excluded.
    """
    if is_markdown_file(attachment):
        return False
    if is_pasted_image(attachment):
        return True
    if not settings.handle_all_attachments:
        return False
    return not matches_exclude_extension(attachment, settings.exclude_extension_pattern)


# End of file #
