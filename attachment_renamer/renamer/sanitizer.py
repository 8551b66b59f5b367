"""
Text sanitization utilities for attachment names and links.
File: attachment_renamer/renamer/sanitizer.py
"""

from urllib.parse import quote

from attachment_renamer.constants import debug_log
from attachment_renamer.renamer.renamer_regex_patterns import (
    FILENAME_NOT_ALLOWED_RGX,
    FS_FILENAME_NOT_ALLOWED_RGX,
    URI_SAFE_CHARS,
)


DEFAULT_DELIMITER = '-'


def sanitize_filename(text: str) -> str:
    """
    Strip characters that are not allowed in a vault file name.

    Letters of any script, digits, spaces and a fixed set of punctuation
    survive. Path separators do not.

    Examples:
        "My note: draft" -> "My note draft"
        "a/b\\c.png" -> "abc.png"
        "日記 2024" -> "日記 2024"

    Args:
        text: Raw name typed by the user or rendered from a template

    Returns:
        Sanitized name, trimmed of surrounding whitespace
    """
    return FILENAME_NOT_ALLOWED_RGX.sub('', text).strip()


def sanitize_fs_filename(text: str) -> str:
    """
    Strip characters not allowed in a name stored under the physical root.

    Same as sanitize_filename but keeps ':' and '/' so the name can carry
    sub-directories (and drive letters on Windows).
    """
    return FS_FILENAME_NOT_ALLOWED_RGX.sub('', text).strip()


def sanitize_link(text: str) -> str:
    """Encode a display link path the way a browser's encodeURI does."""
    encoded = quote(text, safe=URI_SAFE_CHARS)
    debug_log(f'original string: {text}')
    debug_log(f'encoded link: {encoded}')
    return encoded


def sanitize_delimiter(text: str) -> str:
    """
    Reduce a duplicate-number delimiter to filename-safe characters.

    Falls back to '-' when nothing valid is left.
    """
    clean = sanitize_filename(text or '')
    return clean if clean else DEFAULT_DELIMITER


def sanitize_for_storage(text: str, physical: bool) -> str:
    """Pick the sanitizer matching the active storage mode."""
    if physical:
        return sanitize_fs_filename(text)
    return sanitize_filename(text)


# End of file #
