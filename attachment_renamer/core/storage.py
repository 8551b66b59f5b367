"""
Attachment storage backends.
File: attachment_renamer/core/storage.py

Two places an attachment can end up:

- VaultStorage: inside the vault, next to where the note app dropped it.
  Names are vault-relative and links are regular vault links.
- PhysicalStorage: under an external "physical root" directory. Names are
  relative to that root and links point under a separate "view root".

The deduplication algorithm only sees the interface: where to list files,
what directory a candidate name is relative to, and how to turn a name into
a real path or a link.
"""

import os
import shutil

from abc import ABC, abstractmethod
from pathlib import Path
from rich.console import Console

from attachment_renamer.constants import IMAGE_EXTS, VIDEO_EXTS, debug_log
from attachment_renamer.core import path_utils
from attachment_renamer.core.exceptions import RenameConflictError, SourceMissingError
from attachment_renamer.core.models import AttachmentFile
from attachment_renamer.renamer.sanitizer import sanitize_link


console = Console()


class AttachmentStorage(ABC):
    """Directory lister + path joiner for one storage mode."""

    physical = False

    def __init__(self, root: Path):
        self.root = Path(root)

    def resolve(self, name: str) -> Path:
        """Real filesystem path of a root-relative name."""
        return self.root / path_utils.normalize_separators(name)

    def list_files(self, directory: str) -> list[str]:
        """
        Names of the files (not folders) directly inside a root-relative directory.

        A directory that does not exist lists as empty.
        """
        dir_path = self.resolve(directory)
        if not dir_path.is_dir():
            debug_log(f'listing {dir_path}: directory does not exist')
            return []
        return sorted(entry.name for entry in dir_path.iterdir() if entry.is_file())

    def relativize(self, name: str) -> str:
        """Express a name relative to the storage root."""
        return path_utils.join(path_utils.normalize_separators(name))

    @abstractmethod
    def target_directory(self, attachment: AttachmentFile) -> str:
        """Root-relative directory that new names for this attachment are relative to."""
        ...

    @abstractmethod
    def source_path(self, vault_root: Path, attachment: AttachmentFile) -> Path:
        """Real path of the attachment before it is moved."""
        ...

    @abstractmethod
    def display_path(self, name: str) -> str:
        """Path shown to the user and used in links."""
        ...

    @abstractmethod
    def link_text(self, name: str, use_markdown_links: bool = False):
        """
        Embed text for a renamed attachment.

        Returns:
            Link text, or None if this storage cannot link the file type
        """
        ...

    def move(self, source: Path, name: str) -> Path:
        """
        Move a file to a root-relative name, creating parent directories.

        Raises:
            SourceMissingError: If the source file is gone
            RenameConflictError: If something already sits at the target
        """
        target = self.resolve(name)

        if not source.exists():
            raise SourceMissingError(source)
        if target.exists() and target.resolve() != source.resolve():
            raise RenameConflictError(target, source)

        if not target.parent.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            debug_log(f'Created target parent directory: {target.parent}')

        shutil.move(str(source), str(target))
        return target


class VaultStorage(AttachmentStorage):
    """Attachments stay inside the vault."""

    def target_directory(self, attachment: AttachmentFile) -> str:
        return attachment.parent

    def source_path(self, vault_root: Path, attachment: AttachmentFile) -> Path:
        return self.resolve(attachment.path)

    def display_path(self, name: str) -> str:
        return name

    def shortest_link_path(self, name: str) -> str:
        """
        Base name when it is unique in the vault, otherwise the full vault path.
        """
        base = path_utils.basename(name)
        matches = 0
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if not d.startswith('.')]
            matches += filenames.count(base)
            if matches > 1:
                return name
        return base

    def link_text(self, name: str, use_markdown_links: bool = False) -> str:
        link_path = self.shortest_link_path(name)
        if use_markdown_links:
            return f"![]({sanitize_link(link_path)})"
        return f"![[{link_path}]]"


class PhysicalStorage(AttachmentStorage):
    """Attachments move out of the vault into a physical root directory."""

    physical = True

    def __init__(self, root: Path, view_root: str = ''):
        super().__init__(root)
        self.view_root = view_root

    def target_directory(self, attachment: AttachmentFile) -> str:
        return ''

    def source_path(self, vault_root: Path, attachment: AttachmentFile) -> Path:
        return Path(os.path.realpath(vault_root / attachment.path))

    def relativize(self, name: str) -> str:
        """Absolute names become relative to the physical root, "../" included when outside it."""
        name = path_utils.normalize_separators(name)
        if os.path.isabs(name):
            return path_utils.relative(path_utils.normalize_separators(str(self.root)), name)
        return path_utils.join(name)

    def display_path(self, name: str) -> str:
        return path_utils.join(self.view_root, name)

    def link_text(self, name: str, use_markdown_links: bool = False):
        extension = path_utils.extension(name).lower()
        view_path = sanitize_link(self.display_path(name))

        if extension in IMAGE_EXTS:
            return f"![{path_utils.basename(name)}]({view_path})"
        if extension in VIDEO_EXTS:
            return f'<video controls src="{view_path}" style />'

        console.print(f"[yellow]Unhandled attachment type: {extension}[/yellow]")
        return None


def storage_for_settings(vault_root: Path, settings) -> AttachmentStorage:
    """Pick the storage backend for the configured mode."""
    if settings.uses_physical_root:
        return PhysicalStorage(Path(settings.root_dir_physical), settings.root_dir_view)
    return VaultStorage(vault_root)


# End of file #
