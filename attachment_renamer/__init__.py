"""Attachment Renamer - Rename pasted images and other attachments in a note vault."""

from ._version import __version__
from .cli import main

__all__ = ['main', '__version__']
