"""
Renamer settings - defaults, JSON persistence and CLI overrides.
File: attachment_renamer/core/settings.py

Settings live in a JSON file in the vault root (".attachment-renamer.json"
unless --settings says otherwise). Command line flags override the file;
--save-settings writes the merged result back.
"""

import json
import argparse

from pathlib import Path
from dataclasses import dataclass, asdict, fields, replace
from rich.console import Console

from attachment_renamer.constants import DEFAULT_SETTINGS_FILENAME, debug_log
from attachment_renamer.renamer.sanitizer import sanitize_delimiter


console = Console()


@dataclass(frozen=True)
class RenamerSettings:
    """All user-facing configuration, with the defaults of a fresh install."""
    image_name_pattern: str = '{{fileName}}'       # e.g. {{imageNameKey}}-{{DATE:YYYYMMDD}}
    dup_number_at_start: bool = False
    dup_number_delimiter: str = '-'
    dup_number_always: bool = False
    auto_rename: bool = False
    handle_all_attachments: bool = False
    exclude_extension_pattern: str = ''
    disable_rename_notice: bool = False
    root_dir_physical: str = ''
    root_dir_view: str = ''
    use_markdown_links: bool = False

    def __post_init__(self):
        # Frozen dataclass, so bypass __setattr__ for the sanitized delimiter
        object.__setattr__(self, 'dup_number_delimiter', sanitize_delimiter(self.dup_number_delimiter))

    @property
    def uses_physical_root(self) -> bool:
        return self.root_dir_physical != ''

    @classmethod
    def from_dict(cls, data: dict) -> 'RenamerSettings':
        """Build settings from a mapping, ignoring unknown keys and keeping defaults for missing ones."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            debug_log(f'ignoring unknown settings keys: {sorted(unknown)}')
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict:
        return asdict(self)

    def with_overrides(self, **overrides) -> 'RenamerSettings':
        """Copy with the given non-None values replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def default_settings_path(vault_root: Path) -> Path:
    return vault_root / DEFAULT_SETTINGS_FILENAME


def load_settings(settings_path: Path) -> RenamerSettings:
    """
    Load settings from a JSON file.

    A missing file yields the defaults.

    Raises:
        ValueError: If the file is not a JSON object
    """
    if not settings_path.exists():
        debug_log(f'no settings file at {settings_path}, using defaults')
        return RenamerSettings()

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid settings file {settings_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_path} must contain a JSON object")

    return RenamerSettings.from_dict(data)


def save_settings(settings: RenamerSettings, settings_path: Path):
    """Write settings as pretty-printed JSON."""
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_path, 'w', encoding='utf-8') as f:
        json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
        f.write('\n')
    console.print(f"[dim]Settings saved to {settings_path}[/dim]")


def settings_from_args(args: argparse.Namespace, base: RenamerSettings) -> RenamerSettings:
    """
    Apply command line overrides on top of loaded settings.

    Only flags the user actually passed (non-None) override the file.
    """
    return base.with_overrides(
        image_name_pattern=getattr(args, 'pattern', None),
        dup_number_at_start=getattr(args, 'dup_number_at_start', None),
        dup_number_delimiter=getattr(args, 'dup_number_delimiter', None),
        dup_number_always=getattr(args, 'dup_number_always', None),
        auto_rename=getattr(args, 'auto_rename', None),
        handle_all_attachments=getattr(args, 'handle_all_attachments', None),
        exclude_extension_pattern=getattr(args, 'exclude_extension_pattern', None),
        disable_rename_notice=getattr(args, 'disable_rename_notice', None),
        root_dir_physical=getattr(args, 'root_dir_physical', None),
        root_dir_view=getattr(args, 'root_dir_view', None),
        use_markdown_links=getattr(args, 'use_markdown_links', None),
    )


# End of file #
