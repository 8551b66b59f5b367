"""
Attachment rename operations - single file, instant batch and interactive batch.
File: attachment_renamer/core/operations.py

Every rename goes through the same steps:
  render a name -> deduplicate it against the target directory
  -> move the file -> rewrite the note's embed -> report.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console

from attachment_renamer.constants import debug_log
from attachment_renamer.core import path_utils
from attachment_renamer.core.deduplication import (
    DuplicatePolicy,
    NameObj,
    deduplicate,
    listing_directory,
)
from attachment_renamer.core.document import (
    Embed,
    NoteDocument,
    replace_embed,
    resolve_link_target,
    save_note,
)
from attachment_renamer.core.exceptions import MalformedNameError
from attachment_renamer.core.models import (
    AttachmentFile,
    BatchResult,
    RenameOutcome,
    RenameStatus,
)
from attachment_renamer.core.scanner import is_batch_image, is_markdown_file, should_handle
from attachment_renamer.core.storage import AttachmentStorage, storage_for_settings
from attachment_renamer.renamer.name_generator import generate_new_name
from attachment_renamer.renamer.template_engine import TemplateEngine

console = Console()


def resolve_unique_name(candidate_name: str, attachment: AttachmentFile,
                        storage: AttachmentStorage, policy: DuplicatePolicy,
                        reserved: Optional[set[str]] = None) -> NameObj:
    """
    Turn a candidate name into a collision-free name in the given storage.

    Args:
        candidate_name: Name with extension, e.g. "foo.png" or "img/foo.png"
        attachment: File being renamed
        storage: Storage backend the file is moving into
        policy: Duplicate numbering policy
        reserved: Root-relative names already handed out but not yet on disk
                  (earlier items of a dry-run batch)

    Returns:
        NameObj relative to the storage root
    """
    candidate_name = storage.relativize(candidate_name)
    target_dir = storage.target_directory(attachment)
    listing_dir = listing_directory(candidate_name, target_dir)
    listing = storage.list_files(listing_dir)
    listing += [path_utils.basename(name) for name in sorted(reserved or ())
                if path_utils.directory(name) == listing_dir]
    name_obj = deduplicate(candidate_name, target_dir, listing, policy)
    debug_log('deduplicated newName:', name_obj.name)
    return name_obj


def find_embeds(vault_root: Path, note: NoteDocument, attachment: AttachmentFile) -> list[Embed]:
    """Every embed in the note that resolves to the attachment, one per distinct text."""
    embeds = []
    seen = set()
    for embed in note.embeds:
        if embed.original in seen:
            continue
        if resolve_link_target(vault_root, embed.link, note.path) == attachment:
            seen.add(embed.original)
            embeds.append(embed)
    return embeds


def _carry_alias(embed: Embed, new_link: str) -> str:
    """Keep a wikilink alias (often an image width) on the rewritten link."""
    if embed.is_wikilink and embed.alias and new_link.startswith('![[') and new_link.endswith(']]'):
        return f"{new_link[:-2]}|{embed.alias}]]"
    return new_link


def rename_attachment(vault_root: Path, attachment: AttachmentFile, new_name: str,
                      note: NoteDocument, settings, storage: Optional[AttachmentStorage] = None,
                      replace_link: bool = True, dry_run: bool = False,
                      reserved: Optional[set[str]] = None) -> RenameOutcome:
    """
    Deduplicate a confirmed name, move the file and rewrite the note's links to it.

    Args:
        vault_root: Vault directory
        attachment: File to rename
        new_name: Confirmed name with extension
        note: Note embedding the attachment (updated in place and saved)
        settings: RenamerSettings
        storage: Storage backend, defaults to the one the settings select
        replace_link: Rewrite the note's embeds to point at the new name
        dry_run: Only report what would happen
        reserved: Names handed out earlier in the same batch; a dry run adds its
                  name here so later items do not get the same one

    Returns:
        RenameOutcome with status renamed (or dry-run)

    Raises:
        MalformedNameError: If the name has no extension
        RenameConflictError: If the target appeared after the directory was listed
        SourceMissingError: If the attachment is gone
    """
    storage = storage or storage_for_settings(vault_root, settings)
    policy = DuplicatePolicy.from_settings(settings)
    name_obj = resolve_unique_name(new_name, attachment, storage, policy, reserved)

    # Links resolve against the old location, so collect them before the move
    embeds = find_embeds(vault_root, note, attachment) if replace_link else []

    if dry_run:
        if reserved is not None:
            reserved.add(name_obj.name)
        console.print(f"[cyan]Would rename {attachment.path} → {storage.display_path(name_obj.name)}[/cyan]")
        return RenameOutcome(attachment.path, RenameStatus.DRY_RUN, name_obj.name)

    source = storage.source_path(vault_root, attachment)
    try:
        storage.move(source, name_obj.name)
    except OSError as e:
        console.print(f"[red]Failed to rename {name_obj.name}: {e}[/red]")
        raise

    link_text = None
    if replace_link:
        link_text = _rewrite_links(vault_root, note, embeds, name_obj, storage, settings)

    if not settings.disable_rename_notice:
        console.print(f"[green]Renamed {attachment.name} to {name_obj.name}[/green]")

    return RenameOutcome(attachment.path, RenameStatus.RENAMED, name_obj.name, link_text=link_text)


def _rewrite_links(vault_root: Path, note: NoteDocument, embeds: list[Embed],
                   name_obj: NameObj, storage: AttachmentStorage, settings) -> Optional[str]:
    """
    Replace every embed of a moved attachment and save the note.

    Returns:
        The new link text (without alias), or None if nothing was rewritten
    """
    if not embeds:
        console.print(f"[yellow]No link to the attachment found in {note.path}[/yellow]")
        return None

    new_link = storage.link_text(name_obj.name, settings.use_markdown_links)
    if new_link is None:
        return None

    replaced = 0
    for embed in embeds:
        replaced += replace_embed(note, embed.original, _carry_alias(embed, new_link))

    if replaced:
        save_note(vault_root, note)
    return new_link


def start_rename_process(vault_root: Path, attachment: AttachmentFile, note: NoteDocument,
                         settings, auto_rename: Optional[bool] = None,
                         dry_run: bool = False) -> RenameOutcome:
    """
    Rename a newly created attachment embedded in a note.

    Generates a name from the pattern. Renames straight away when
    auto-rename is on and the name is meaningful, otherwise asks the user.

    Returns:
        RenameOutcome; skipped when the file is not handled or the user cancels
    """
    from attachment_renamer.ui import ask_new_name

    if not should_handle(attachment, settings):
        debug_log('file not handled', attachment.path)
        return RenameOutcome(attachment.path, RenameStatus.SKIPPED, reason="not a handled attachment")

    auto_rename = settings.auto_rename if auto_rename is None else auto_rename
    storage = storage_for_settings(vault_root, settings)
    rendered = generate_new_name(attachment, note, settings)

    if not rendered.is_meaningful or not auto_rename:
        confirmed = ask_new_name(attachment, rendered.stem if rendered.is_meaningful else '', storage)
        debug_log('confirmedName:', confirmed)
        if confirmed is None:
            return RenameOutcome(attachment.path, RenameStatus.SKIPPED, reason="cancelled")
        new_name = confirmed
    else:
        new_name = rendered.new_name

    return rename_attachment(vault_root, attachment, new_name, note, settings,
                             storage=storage, dry_run=dry_run)


def rename_with_name(vault_root: Path, attachment: AttachmentFile, stem: str,
                     note: NoteDocument, settings, dry_run: bool = False) -> RenameOutcome:
    """Rename an attachment to an explicit stem, keeping its extension."""
    from attachment_renamer.renamer.sanitizer import sanitize_for_storage

    storage = storage_for_settings(vault_root, settings)
    clean = sanitize_for_storage(stem, storage.physical)
    if not clean:
        raise MalformedNameError(stem, f"New name is empty after sanitizing: '{stem}'")
    return rename_attachment(vault_root, attachment, f"{clean}.{attachment.extension}", note,
                             settings, storage=storage, dry_run=dry_run)


def embedded_attachments(vault_root: Path, note: NoteDocument) -> list[tuple[Embed, Optional[AttachmentFile]]]:
    """
    Resolve the note's embeds once, up front, one entry per attachment.

    Embeds that point at the same file (an aliased and a plain embed, or two
    path forms) collapse into the first one. Unresolved links stay in the list
    with None, once per link.
    """
    entries = []
    seen_attachments = set()
    seen_links = set()

    for embed in note.embeds:
        attachment = resolve_link_target(vault_root, embed.link, note.path)
        if attachment is None:
            if embed.link not in seen_links:
                seen_links.add(embed.link)
                entries.append((embed, None))
            continue
        if attachment in seen_attachments:
            continue
        seen_attachments.add(attachment)
        entries.append((embed, attachment))

    return entries


def batch_rename_all_images(vault_root: Path, note: NoteDocument, settings,
                            dry_run: bool = False) -> BatchResult:
    """
    Rename every image embedded in a note from the pattern, without prompting.

    Each embedded file gets its own outcome. Unresolvable links, non-image
    files and non-meaningful names are skipped; errors fail that file only
    and the batch carries on.
    """
    result = BatchResult()
    storage = storage_for_settings(vault_root, settings)
    engine = TemplateEngine()
    reserved = set()

    for embed, attachment in embedded_attachments(vault_root, note):
        if attachment is None:
            console.print(f"[yellow]File not found: {embed.link}[/yellow]")
            result.add(RenameOutcome(embed.link, RenameStatus.SKIPPED, reason="file not found"))
            continue

        if not is_batch_image(attachment):
            result.add(RenameOutcome(attachment.path, RenameStatus.SKIPPED, reason="not an image"))
            continue

        rendered = generate_new_name(attachment, note, settings, engine=engine)
        if not rendered.is_meaningful:
            console.print(f"[yellow]Skipping {attachment.name}: the generated name is not meaningful[/yellow]")
            result.add(RenameOutcome(attachment.path, RenameStatus.SKIPPED,
                                     reason="generated name is not meaningful"))
            continue

        try:
            outcome = rename_attachment(vault_root, attachment, rendered.new_name, note, settings,
                                        storage=storage, dry_run=dry_run, reserved=reserved)
        except (OSError, MalformedNameError) as e:
            outcome = RenameOutcome(attachment.path, RenameStatus.FAILED, reason=str(e))
        result.add(outcome)

    return result


def batch_rename_interactive(vault_root: Path, note: NoteDocument, settings,
                             dry_run: bool = False) -> BatchResult:
    """
    Ask for a new name for each file embedded in a note.

    Empty input leaves the file alone.
    """
    from attachment_renamer.ui import ask_batch_name

    result = BatchResult()
    storage = storage_for_settings(vault_root, settings)
    reserved = set()

    for embed, attachment in embedded_attachments(vault_root, note):
        if attachment is None:
            result.add(RenameOutcome(embed.link, RenameStatus.SKIPPED, reason="file not found"))
            continue
        if is_markdown_file(attachment):
            continue

        new_name = ask_batch_name(attachment, storage)
        if new_name is None:
            result.add(RenameOutcome(attachment.path, RenameStatus.SKIPPED, reason="no name given"))
            continue

        try:
            outcome = rename_attachment(vault_root, attachment, new_name, note, settings,
                                        storage=storage, dry_run=dry_run, reserved=reserved)
        except (OSError, MalformedNameError) as e:
            outcome = RenameOutcome(attachment.path, RenameStatus.FAILED, reason=str(e))
        result.add(outcome)

    return result


# End of file #
