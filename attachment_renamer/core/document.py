"""
Markdown note reading - front-matter, headings and attachment embeds.
File: attachment_renamer/core/document.py
"""

import os

from pathlib import Path
from typing import Any, Optional
from dataclasses import dataclass, field
from urllib.parse import unquote

import yaml

from rich.console import Console

from attachment_renamer.constants import debug_log
from attachment_renamer.core import path_utils
from attachment_renamer.core.models import AttachmentFile
from attachment_renamer.renamer.renamer_regex_patterns import (
    FRONTMATTER_BLOCK_RGX,
    ATX_HEADING_RGX,
    WIKILINK_EMBED_RGX,
    MARKDOWN_EMBED_RGX,
)


console = Console()


@dataclass(frozen=True)
class Heading:
    level: int
    heading: str


@dataclass(frozen=True)
class Embed:
    """An embed as written in the note; original is the exact source text."""
    link: str
    original: str
    is_wikilink: bool
    alias: str = ''


@dataclass
class NoteDocument:
    """A note in the vault, addressed by its vault-relative path."""
    path: str
    text: str = ''
    frontmatter: Optional[dict[str, Any]] = None
    headings: list[Heading] = field(default_factory=list)
    embeds: list[Embed] = field(default_factory=list)

    @property
    def basename(self) -> str:
        """File name without the .md extension."""
        return path_utils.stem(path_utils.basename(self.path))

    @property
    def parent(self) -> str:
        """Vault path of the containing folder, '' at the vault root."""
        return path_utils.directory(self.path)

    @property
    def parent_name(self) -> str:
        return path_utils.basename(self.parent) if self.parent else ''

    @classmethod
    def from_text(cls, path: str, text: str) -> 'NoteDocument':
        """Parse note text into front-matter, headings and embeds."""
        frontmatter, body = parse_frontmatter(text)
        return cls(
            path=path_utils.join(path_utils.normalize_separators(path)),
            text=text,
            frontmatter=frontmatter,
            headings=parse_headings(body),
            embeds=parse_embeds(body),
        )


def parse_frontmatter(text: str) -> tuple[Optional[dict[str, Any]], str]:
    """
    Split a leading YAML front-matter block from the note body.

    Invalid YAML, or YAML that is not a mapping, counts as no front-matter.

    Returns:
        Tuple of (frontmatter or None, body text after the block)
    """
    match = FRONTMATTER_BLOCK_RGX.match(text)
    if not match:
        return None, text

    body = text[match.end():]
    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        console.print(f"[yellow]Warning: could not parse front-matter: {e}[/yellow]")
        return None, body

    if not isinstance(data, dict):
        return None, body
    return data, body


def _strip_code_fences(body: str) -> str:
    """Blank out fenced code blocks so '#' comments are not taken as headings."""
    lines = []
    in_fence = False
    for line in body.split('\n'):
        if line.lstrip().startswith(('```', '~~~')):
            in_fence = not in_fence
            lines.append('')
            continue
        lines.append('' if in_fence else line)
    return '\n'.join(lines)


def parse_headings(body: str) -> list[Heading]:
    return [Heading(len(m.group(1)), m.group(2).strip())
            for m in ATX_HEADING_RGX.finditer(_strip_code_fences(body))]


def first_heading(headings: Optional[list[Heading]]) -> str:
    """Text of the first level-1 heading, '' if there is none."""
    for heading in headings or []:
        if heading.level == 1:
            return heading.heading
    return ''


def parse_embeds(body: str) -> list[Embed]:
    """
    Find attachment embeds in document order.

    Recognizes ![[target|alias]] wikilinks and ![alt](target) Markdown
    embeds. External URLs are ignored.
    """
    found = []

    for m in WIKILINK_EMBED_RGX.finditer(body):
        found.append((m.start(), Embed(m.group(1).strip(), m.group(0), True, m.group(2) or '')))

    for m in MARKDOWN_EMBED_RGX.finditer(body):
        target = m.group(2)
        if target.startswith('<') and target.endswith('>'):
            target = target[1:-1]
        if '://' in target:
            continue
        found.append((m.start(), Embed(unquote(target), m.group(0), False, m.group(1))))

    return [embed for _, embed in sorted(found, key=lambda item: item[0])]


def load_note(vault_root: Path, note_path: str) -> NoteDocument:
    """
    Read a note from the vault.

    Raises:
        FileNotFoundError: If the note does not exist
    """
    full_path = vault_root / path_utils.normalize_separators(note_path)
    with open(full_path, 'r', encoding='utf-8') as f:
        text = f.read()
    note = NoteDocument.from_text(note_path, text)
    debug_log('frontmatter', note.frontmatter)
    return note


def save_note(vault_root: Path, note: NoteDocument):
    full_path = vault_root / note.path
    with open(full_path, 'w', encoding='utf-8') as f:
        f.write(note.text)


def replace_embed(note: NoteDocument, old_text: str, new_text: str) -> int:
    """
    Swap an embed's text for another everywhere in the note, re-parsing it in place.

    Returns:
        Number of occurrences replaced
    """
    count = note.text.count(old_text)
    if not count:
        debug_log('embed text not found in note', old_text)
        return 0

    updated = NoteDocument.from_text(note.path, note.text.replace(old_text, new_text))
    note.text = updated.text
    note.frontmatter = updated.frontmatter
    note.headings = updated.headings
    note.embeds = updated.embeds
    debug_log('replace text', old_text, new_text)
    return count


def resolve_link_target(vault_root: Path, link: str, source_path: str) -> Optional[AttachmentFile]:
    """
    Find the file a link points to, the way the note app does.

    Tries the path relative to the linking note's folder, then relative to
    the vault root, then the first file anywhere in the vault with the same
    base name.

    Returns:
        The attachment, or None if nothing matches
    """
    link = path_utils.normalize_separators(link)
    source_dir = path_utils.directory(source_path)

    for candidate in (path_utils.join(source_dir, link), path_utils.join(link)):
        normalized = os.path.normpath(candidate).replace('\\', '/')
        if normalized.startswith('..'):
            continue
        if (vault_root / normalized).is_file():
            return AttachmentFile.from_vault_path(normalized)

    base = path_utils.basename(link)
    for dirpath, dirnames, filenames in os.walk(vault_root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith('.'))
        if base in filenames:
            rel = path_utils.relative(str(vault_root), os.path.join(dirpath, base))
            return AttachmentFile.from_vault_path(rel)

    return None


# End of file #
