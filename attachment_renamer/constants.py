"""
Shared constants and debug tracing.
File: attachment_renamer/constants.py
"""

import os

from rich.console import Console

# Name prefix the note app gives to images created from pasted content
PASTED_IMAGE_PREFIX = 'Pasted image '

IMAGE_EXTS = ['jpg', 'jpeg', 'png', 'gif', 'bmp', 'svg']
VIDEO_EXTS = ['mpg', 'avi', 'mov', 'mkv', 'mp4']

DEFAULT_SETTINGS_FILENAME = '.attachment-renamer.json'

DEBUG_ENV_VAR = 'ATTACHMENT_RENAMER_DEBUG'

DEBUG = os.environ.get(DEBUG_ENV_VAR, '').lower() in ('1', 'true', 'yes', 'on')

_debug_console = Console(stderr=True)


def set_debug(enabled: bool):
    """Turn debug tracing on or off for the rest of the process."""
    global DEBUG
    DEBUG = enabled


def debug_log(*args):
    """Print a timestamped trace line when debug mode is on."""
    if DEBUG:
        _debug_console.log(*args, style='dim')


# End of file #
