"""
New-name generation for attachments from the active note.
File: attachment_renamer/renamer/name_generator.py
"""

import re

from datetime import datetime
from typing import Optional

from attachment_renamer.constants import debug_log
from attachment_renamer.core.document import NoteDocument, first_heading
from attachment_renamer.core.models import AttachmentFile, RenderedName
from attachment_renamer.renamer.template_engine import TemplateEngine, stringify_value


IMAGE_NAME_KEY = 'imageNameKey'


def build_variable_context(note: NoteDocument) -> dict[str, str]:
    """
    Collect the template variables for one rename.

    Variables:
        fileName      note name without ".md"
        dirName       name of the note's folder ('' at the vault root)
        dirPath       vault path of the note's folder ('' at the vault root)
        imageNameKey  "imageNameKey" from the note's front-matter ('' if absent)
        firstHeading  first level-1 heading ('' if none)
    """
    frontmatter = note.frontmatter or {}
    return {
        IMAGE_NAME_KEY: stringify_value(frontmatter.get(IMAGE_NAME_KEY)),
        'fileName': note.basename,
        'dirName': note.parent_name,
        'dirPath': note.parent,
        'firstHeading': first_heading(note.headings),
    }


def is_meaningful_stem(stem: str, delimiter: str) -> bool:
    """False when nothing but delimiter characters and whitespace is left."""
    meaningless_rgx = re.compile(f"[{re.escape(delimiter)}\\s]")
    return meaningless_rgx.sub('', stem) != ''


def generate_new_name(attachment: AttachmentFile, note: NoteDocument, settings,
                      now: Optional[datetime] = None,
                      engine: Optional[TemplateEngine] = None) -> RenderedName:
    """
    Render the configured pattern for an attachment embedded in a note.

    Args:
        attachment: The file being renamed (supplies the extension)
        note: The active note (supplies the variables)
        settings: RenamerSettings
        now: Instant for DATE directives, defaults to the current time
        engine: TemplateEngine to reuse

    Returns:
        RenderedName with the stem, the name with extension and whether the
        stem carries any real content
    """
    engine = engine or TemplateEngine()
    context = build_variable_context(note)
    stem = engine.render(settings.image_name_pattern, context, note.frontmatter, now)

    rendered = RenderedName(
        stem=stem,
        new_name=f"{stem}.{attachment.extension}",
        is_meaningful=is_meaningful_stem(stem, settings.dup_number_delimiter),
    )
    debug_log('generated newName:', rendered.new_name, rendered.is_meaningful)
    return rendered


# End of file #
