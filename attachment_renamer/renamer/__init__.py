"""
Template-based attachment naming.
File: attachment_renamer/renamer/__init__.py

Renders name patterns and sanitizes the result for use as a file name
or link. Name generation from a note lives in renamer.name_generator.
"""

from attachment_renamer.renamer.template_engine import TemplateEngine, render_template
from attachment_renamer.renamer.sanitizer import (
    sanitize_filename,
    sanitize_fs_filename,
    sanitize_link,
    sanitize_delimiter,
)


__all__ = [
    'TemplateEngine',
    'render_template',
    'sanitize_filename',
    'sanitize_fs_filename',
    'sanitize_link',
    'sanitize_delimiter',
]

# End of file #
