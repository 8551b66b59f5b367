"""
Plain records for vault files and rename results.
File: attachment_renamer/core/models.py
"""

from dataclasses import dataclass, field
from typing import Optional

from attachment_renamer.core import path_utils


@dataclass(frozen=True)
class AttachmentFile:
    """An attachment addressed by its path relative to the vault root."""
    path: str

    @classmethod
    def from_vault_path(cls, path: str) -> 'AttachmentFile':
        return cls(path_utils.join(path_utils.normalize_separators(path)))

    @property
    def name(self) -> str:
        return path_utils.basename(self.path)

    @property
    def stem(self) -> str:
        return path_utils.stem(self.name)

    @property
    def extension(self) -> str:
        return path_utils.extension(self.name)

    @property
    def parent(self) -> str:
        """Vault path of the containing folder, '' at the vault root."""
        return path_utils.directory(self.path)


@dataclass(frozen=True)
class RenderedName:
    stem: str
    new_name: str
    is_meaningful: bool


class RenameStatus:
    """Outcome of one rename attempt."""
    RENAMED     = "renamed"
    SKIPPED     = "skipped"
    FAILED      = "failed"
    DRY_RUN     = "dry-run"


@dataclass
class RenameOutcome:
    source: str
    status: str
    new_name: Optional[str] = None
    reason: str = ""
    link_text: Optional[str] = None


@dataclass
class BatchResult:
    """Aggregate result of a batch rename; every item gets an outcome."""
    outcomes: list[RenameOutcome] = field(default_factory=list)

    def add(self, outcome: RenameOutcome):
        self.outcomes.append(outcome)

    def _with_status(self, status: str) -> list[RenameOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def renamed(self) -> list[RenameOutcome]:
        return self._with_status(RenameStatus.RENAMED)

    @property
    def skipped(self) -> list[RenameOutcome]:
        return self._with_status(RenameStatus.SKIPPED)

    @property
    def failed(self) -> list[RenameOutcome]:
        return self._with_status(RenameStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed

    def __str__(self):
        return (f"BatchResult({len(self.renamed)} renamed, "
                f"{len(self.skipped)} skipped, {len(self.failed)} failed)")


# End of file #
