"""User interface components - rename prompts, previews and result tables."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.prompt import Confirm, Prompt

from attachment_renamer.core import path_utils
from attachment_renamer.core.models import AttachmentFile, BatchResult, RenameStatus
from attachment_renamer.core.scanner import is_image, is_video
from attachment_renamer.core.storage import AttachmentStorage
from attachment_renamer.renamer.sanitizer import sanitize_for_storage, sanitize_link

console = Console()


def show_rename_preview(attachment: AttachmentFile, stem: str, storage: AttachmentStorage):
    """Show where the attachment would go with the given stem."""
    new_name = f"{stem}.{attachment.extension}"
    relative_name = path_utils.join(storage.target_directory(attachment), new_name)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value", style="cyan")
    table.add_row("Origin path", attachment.path)
    table.add_row("New path", str(storage.resolve(relative_name)) if storage.physical else relative_name)
    table.add_row("New display link", sanitize_link(storage.display_path(relative_name)))
    console.print(table)


def ask_new_name(attachment: AttachmentFile, stem: str, storage: AttachmentStorage) -> Optional[str]:
    """
    Ask for the new attachment name, the terminal version of the rename dialog.

    Args:
        attachment: File being renamed
        stem: Suggested stem ('' when the generated name was not meaningful)
        storage: Active storage backend (decides how input is sanitized)

    Returns:
        Confirmed name with extension, or None if the user cancels
    """
    kind = "image" if is_image(attachment) else "video" if is_video(attachment) else f"{attachment.extension} file"
    console.print(f"\n[cyan]Rename {kind}[/cyan]")
    show_rename_preview(attachment, stem or '<new name>', storage)

    while True:
        value = Prompt.ask("New name (without extension)", default=stem or None)
        new_stem = sanitize_for_storage(value or '', storage.physical)

        if not new_stem:
            console.print('[red]Error: "New name" could not be empty[/red]')
            if not Confirm.ask("Try again?", default=True):
                return None
            continue

        if new_stem != (value or '').strip():
            console.print(f"[dim]Sanitized name: {new_stem}[/dim]")
            show_rename_preview(attachment, new_stem, storage)

        if Confirm.ask("Rename?", default=True):
            return f"{new_stem}.{attachment.extension}"
        return None


def ask_batch_name(attachment: AttachmentFile, storage: AttachmentStorage) -> Optional[str]:
    """
    Ask for a new stem for one file of an interactive batch rename.

    Returns:
        Name with extension, or None to leave the file alone (empty input)
    """
    value = Prompt.ask(f"[cyan]{attachment.path}[/cyan] new name (empty to skip)", default='',
                       show_default=False)
    new_stem = sanitize_for_storage(value, storage.physical)
    if not new_stem:
        return None
    return f"{new_stem}.{attachment.extension}"


def display_settings_table(settings, title: str = "Renamer Settings"):
    """Display the effective settings."""
    table = Table(title=title)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in settings.to_dict().items():
        table.add_row(key, repr(value) if isinstance(value, str) else str(value))

    console.print(table)


def display_batch_result(result: BatchResult, title: str = "Batch Rename Results"):
    """Display per-file outcomes of a batch rename."""
    if not result.outcomes:
        console.print("[dim]No embedded attachments found[/dim]")
        return

    status_styles = {
        RenameStatus.RENAMED: 'green',
        RenameStatus.DRY_RUN: 'cyan',
        RenameStatus.SKIPPED: 'yellow',
        RenameStatus.FAILED: 'red',
    }

    table = Table(title=title)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("New name / reason")

    for outcome in result.outcomes:
        style = status_styles.get(outcome.status, 'white')
        detail = outcome.new_name if outcome.new_name and not outcome.reason else outcome.reason
        table.add_row(outcome.source, f"[{style}]{outcome.status}[/{style}]", detail or '')

    console.print(table)
    console.print(f"[dim]{len(result.renamed)} renamed, {len(result.skipped)} skipped, "
                  f"{len(result.failed)} failed[/dim]")


# End of file #
