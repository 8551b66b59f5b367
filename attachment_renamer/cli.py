"""Command-line interface for renaming note attachments."""

import sys
import signal
import argparse

from pathlib import Path
from typing import Optional
from rich.console import Console

from attachment_renamer._version import __version__
from attachment_renamer.constants import set_debug, debug_log, DEBUG_ENV_VAR, DEFAULT_SETTINGS_FILENAME
from attachment_renamer.core.document import load_note
from attachment_renamer.core.exceptions import MalformedNameError
from attachment_renamer.core.models import AttachmentFile, RenameStatus
from attachment_renamer.core.operations import (
    batch_rename_all_images,
    batch_rename_interactive,
    rename_with_name,
    start_rename_process,
)
from attachment_renamer.core.settings import (
    default_settings_path,
    load_settings,
    save_settings,
    settings_from_args,
)
from attachment_renamer.ui import display_batch_result, display_settings_table


console = Console()


def setup_signal_handlers():
    """Setup graceful handling of Ctrl+C interruptions."""
    def signal_handler(sig, frame):
        console.print("\n[yellow]Operation interrupted by user[/yellow]")
        sys.exit(130)  # Standard exit code for Ctrl+C

    signal.signal(signal.SIGINT, signal_handler)


epilog_for_argparse = f"""
Name pattern variables:
    {{{{fileName}}}}          name of the note, without ".md"
    {{{{dirName}}}}           name of the note's folder (empty at the vault root)
    {{{{dirPath}}}}           vault path of the note's folder
    {{{{imageNameKey}}}}      "imageNameKey" from the note's front-matter
    {{{{firstHeading}}}}      first level-1 heading of the note
    {{{{frontmatter:KEY}}}}   any front-matter key
    {{{{DATE:FORMAT}}}}       current date, Moment.js style, e.g. {{{{DATE:YYYY-MM-DD}}}}

Examples from pattern to names (repeated in sequence), with
fileName = "My note" and imageNameKey = "foo":
    {{{{fileName}}}}                          My note, My note-1, My note-2
    {{{{imageNameKey}}}}                      foo, foo-1, foo-2
    {{{{imageNameKey}}}}-{{{{DATE:YYYYMMDD}}}}    foo-20220408, foo-20220408-1, foo-20220408-2

Duplicate numbers:
    The delimiter builds the suffix ("-1", "-2") or, with --dup-number-at-start,
    the prefix ("1-", "2-"). Numbering continues from the highest existing number.

Physical root directory:
    With --root-dir-physical, attachments move out of the vault to
    <root_dir_physical>/<name> and are linked as ![](<root_dir_view>/<name>).
    On Windows use forward slashes, e.g. C:/myVaultServer/

Examples:
    %(prog)s "Daily/2024-01-01.md" "Daily/Pasted image 20240101.png"
    %(prog)s note.md "Pasted image 1.png" --auto-rename --pattern "{{{{fileName}}}}-{{{{DATE:HHmmss}}}}"
    %(prog)s note.md image.png --name "diagram"
    %(prog)s note.md --batch-rename-all --dry-run
    %(prog)s note.md --batch-rename
    %(prog)s --show-settings --dup-number-delimiter "_" --save-settings

Settings are read from {DEFAULT_SETTINGS_FILENAME} in the vault unless --settings is given.
Debug tracing: --debug or {DEBUG_ENV_VAR}=1
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attachment-renamer",
        description="Attachment Renamer - Rename pasted images and other attachments in a note vault",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog_for_argparse
    )

    parser.add_argument('note', type=Path, nargs='?',
        help='Note (Markdown file) that embeds the attachments')
    parser.add_argument('attachments', type=Path, nargs='*', metavar='ATTACHMENT',
        help='Attachment file(s) to rename')

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}',
        help='Show program version and exit')
    parser.add_argument('--vault', type=Path, default=Path('.'), metavar='DIR',
        help='Vault root directory (default: current directory)')

    # Operations
    operations = parser.add_argument_group('operations')
    operations.add_argument('--name', metavar='STEM',
        help='Rename the attachment to this name (without extension) instead of using the pattern')
    operations.add_argument('--batch-rename-all', action='store_true',
        help='Rename all images embedded in the note from the pattern, without prompting')
    operations.add_argument('--batch-rename', action='store_true',
        help='Ask for a new name for every file embedded in the note')

    # Naming
    naming = parser.add_argument_group('naming')
    naming.add_argument('--pattern', metavar='PATTERN',
        help='Name pattern, e.g. "{{imageNameKey}}-{{DATE:YYYYMMDD}}"')
    naming.add_argument('--dup-number-at-start', action=argparse.BooleanOptionalAction, default=None,
        help='Put the duplicate number at the start (prefix) instead of the end (suffix)')
    naming.add_argument('--dup-number-delimiter', metavar='DELIM',
        help='Delimiter between name and duplicate number (only filename-safe characters, default "-")')
    naming.add_argument('--dup-number-always', action=argparse.BooleanOptionalAction, default=None,
        help='Always add a duplicate number, not only when the name is taken')
    naming.add_argument('--auto-rename', action=argparse.BooleanOptionalAction, default=None,
        help='Rename without asking when the generated name is meaningful')

    # Attachment selection
    selection = parser.add_argument_group('attachment selection')
    selection.add_argument('--handle-all-attachments', action=argparse.BooleanOptionalAction, default=None,
        help='Handle every attachment, not only names starting with "Pasted image "')
    selection.add_argument('--exclude-extension-pattern', metavar='REGEX',
        help='With --handle-all-attachments, skip extensions matching this regex (e.g. "docx?|xlsx?|zip")')

    # Storage and links
    storage = parser.add_argument_group('storage and links')
    storage.add_argument('--root-dir-physical', metavar='DIR',
        help='Store attachments under this directory outside the vault ("" to disable)')
    storage.add_argument('--root-dir-view', metavar='PREFIX',
        help='Path prefix used in links to attachments under the physical root')
    storage.add_argument('--use-markdown-links', action=argparse.BooleanOptionalAction, default=None,
        help='Write ![](path) links instead of ![[wikilinks]]')
    storage.add_argument('--disable-rename-notice', action=argparse.BooleanOptionalAction, default=None,
        help='Do not print a notice after each rename')

    # Settings
    settings_group = parser.add_argument_group('settings')
    settings_group.add_argument('--settings', type=Path, metavar='FILE',
        help='Settings file (default: <vault>/.attachment-renamer.json)')
    settings_group.add_argument('--save-settings', action='store_true',
        help='Save the effective settings (file + command line overrides)')
    settings_group.add_argument('--show-settings', action='store_true',
        help='Show the effective settings')

    # Processing modes
    modes = parser.add_argument_group('processing modes')
    modes.add_argument('--dry-run', action='store_true',
        help='Show what would be done without actually doing it')
    modes.add_argument('--debug', action='store_true',
        help='Print debug tracing')

    return parser


def vault_relative(vault_root: Path, path: Path) -> str:
    """
    Express a path given on the command line relative to the vault root.

    Relative paths are tried against the current directory first, then the vault.

    Raises:
        ValueError: If the path lies outside the vault
    """
    vault_abs = vault_root.resolve()
    candidate = path if path.is_absolute() else Path.cwd() / path
    if not candidate.exists() and not path.is_absolute():
        candidate = vault_abs / path

    try:
        return candidate.resolve().relative_to(vault_abs).as_posix()
    except ValueError:
        raise ValueError(f"{path} is not inside the vault {vault_abs}") from None


def validate_arguments(args: argparse.Namespace) -> tuple[bool, str]:
    """Check that the requested operations fit together."""
    batch_modes = sum([bool(args.batch_rename_all), bool(args.batch_rename)])
    if batch_modes > 1:
        return False, "Use only one of --batch-rename-all and --batch-rename"

    if batch_modes and args.attachments:
        return False, "Batch renames work on the whole note; do not list attachments"

    if args.name is not None and len(args.attachments) != 1:
        return False, "--name needs exactly one attachment"

    if (batch_modes or args.attachments) and args.note is None:
        return False, "A note is required"

    return True, ""


def rename_attachments(args: argparse.Namespace, vault_root: Path, note, settings) -> int:
    """Rename each attachment given on the command line; failures do not stop the rest."""
    exit_code = 0

    for attachment_path in args.attachments:
        try:
            attachment = AttachmentFile.from_vault_path(vault_relative(vault_root, attachment_path))
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            exit_code = 1
            continue

        if not (vault_root / attachment.path).is_file():
            console.print(f"[red]Error: File {attachment.path} does not exist[/red]")
            exit_code = 1
            continue

        try:
            if args.name is not None:
                outcome = rename_with_name(vault_root, attachment, args.name, note, settings,
                                           dry_run=args.dry_run)
            else:
                outcome = start_rename_process(vault_root, attachment, note, settings,
                                               dry_run=args.dry_run)
        except (OSError, MalformedNameError) as e:
            console.print(f"[red]Failed to rename {attachment.path}: {e}[/red]")
            exit_code = 1
            continue

        if outcome.status == RenameStatus.SKIPPED:
            console.print(f"[dim]Skipped {attachment.path}: {outcome.reason}[/dim]")

    return exit_code


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the attachment renamer.

    Like the rest of the tool, options are long-only.
    """
    setup_signal_handlers()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        set_debug(True)

    is_valid, error = validate_arguments(args)
    if not is_valid:
        parser.error(error)

    vault_root = args.vault
    if not vault_root.is_dir():
        console.print(f"[red]Error: Vault directory {vault_root} does not exist[/red]")
        return 1

    settings_path = args.settings or default_settings_path(vault_root)
    try:
        settings = settings_from_args(args, load_settings(settings_path))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    debug_log('settings', settings)

    if args.save_settings:
        save_settings(settings, settings_path)
    if args.show_settings:
        display_settings_table(settings)

    if args.note is None:
        if not (args.save_settings or args.show_settings):
            parser.print_help()
        return 0

    try:
        note = load_note(vault_root, vault_relative(vault_root, args.note))
    except (OSError, ValueError) as e:
        console.print(f"[red]Error: could not read note {args.note}: {e}[/red]")
        return 1

    if args.batch_rename_all:
        result = batch_rename_all_images(vault_root, note, settings, dry_run=args.dry_run)
        display_batch_result(result)
        return 0 if result.ok else 1

    if args.batch_rename:
        result = batch_rename_interactive(vault_root, note, settings, dry_run=args.dry_run)
        display_batch_result(result)
        return 0 if result.ok else 1

    if args.attachments:
        return rename_attachments(args, vault_root, note, settings)

    console.print(f"[yellow]Nothing to rename in {note.path}.[/yellow]")
    if note.embeds:
        console.print("Embedded files:")
        for embed in note.embeds:
            console.print(f"  {embed.link}")
    console.print("\nGive attachment paths, or use --batch-rename-all / --batch-rename")
    return 0


# End of file #
