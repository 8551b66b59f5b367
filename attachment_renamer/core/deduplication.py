"""
Collision-free attachment naming.
File: attachment_renamer/core/deduplication.py

Given a candidate name and the files already sitting in its target
directory, pick the next free duplicate number:

    suffix mode:  foo.png, foo-1.png, foo-2.png  ->  foo-3.png
    prefix mode:  foo.png, 1-foo.png, 2-foo.png  ->  3-foo.png

The number is one more than the highest existing one, not a count of
duplicates. Every call builds its own matcher and number set.
"""

import re

from dataclasses import dataclass
from typing import Iterable

from attachment_renamer.constants import debug_log
from attachment_renamer.core import path_utils
from attachment_renamer.core.exceptions import MalformedNameError
from attachment_renamer.renamer.sanitizer import sanitize_delimiter


@dataclass(frozen=True)
class DuplicatePolicy:
    """How duplicate numbers are placed and when they are added."""
    at_start: bool = False      # prefix "1-foo" instead of suffix "foo-1"
    delimiter: str = '-'
    always: bool = False        # number even when there is no collision

    @classmethod
    def from_settings(cls, settings) -> 'DuplicatePolicy':
        """Build a policy from RenamerSettings, sanitizing the delimiter."""
        return cls(
            at_start=settings.dup_number_at_start,
            delimiter=sanitize_delimiter(settings.dup_number_delimiter),
            always=settings.dup_number_always,
        )


@dataclass(frozen=True)
class NameObj:
    """Final name relative to the storage root, split for convenience."""
    name: str
    stem: str
    extension: str

    def __str__(self):
        return self.name


def split_candidate(candidate_name: str) -> tuple[str, str]:
    """
    Split a candidate name into stem and extension.

    Raises:
        MalformedNameError: If the base name has no extension
    """
    base = path_utils.basename(candidate_name)
    if '.' not in base or base.endswith('.'):
        raise MalformedNameError(candidate_name, f"Name has no extension: '{candidate_name}'")

    extension = path_utils.extension(candidate_name)
    return candidate_name[:len(candidate_name) - len(extension) - 1], extension


def build_duplicate_pattern(stem_name: str, extension: str, policy: DuplicatePolicy) -> re.Pattern:
    """
    Build the matcher for numbered variants of a base name.

    Args:
        stem_name: Base name without directory or extension, e.g. "foo"
        extension: Extension without the dot, e.g. "png"
        policy: Duplicate numbering policy

    Returns:
        Compiled pattern with a 'number' group
    """
    stem_escaped = re.escape(stem_name)
    delimiter_escaped = re.escape(policy.delimiter)
    extension_escaped = re.escape(extension)

    if policy.at_start:
        return re.compile(
            rf'^(?P<number>\d+){delimiter_escaped}(?P<name>{stem_escaped})\.{extension_escaped}$')
    return re.compile(
        rf'^(?P<name>{stem_escaped}){delimiter_escaped}(?P<number>\d+)\.{extension_escaped}$')


def listing_directory(candidate_name: str, target_directory: str) -> str:
    """Directory, relative to the storage root, whose files the candidate must not collide with."""
    full_path = path_utils.join(target_directory, path_utils.normalize_separators(candidate_name))
    return path_utils.directory(full_path)


def number_name(stem_name: str, extension: str, number: int, policy: DuplicatePolicy) -> str:
    """Attach a duplicate number to a base name."""
    if policy.at_start:
        return f"{number}{policy.delimiter}{stem_name}.{extension}"
    return f"{stem_name}{policy.delimiter}{number}.{extension}"


def deduplicate(candidate_name: str, target_directory: str,
                listing: Iterable[str], policy: DuplicatePolicy) -> NameObj:
    """
    Resolve a candidate name against the files already in its directory.

    Args:
        candidate_name: Name with extension, possibly with a sub-path relative
                        to target_directory (e.g. "img/foo.png")
        target_directory: Directory the candidate is relative to, itself
                          relative to the storage root ("" for the root)
        listing: Names (or paths) of the files in the candidate's directory
        policy: Duplicate numbering policy

    Returns:
        NameObj whose name is relative to the storage root

    Raises:
        MalformedNameError: If the candidate has no extension
    """
    candidate_name = path_utils.normalize_separators(candidate_name)
    candidate_stem, extension = split_candidate(candidate_name)

    full_stem = path_utils.join(target_directory, candidate_stem)
    stem_dir = path_utils.directory(full_stem)
    stem_name = path_utils.basename(full_stem)
    candidate_base = f"{stem_name}.{extension}"

    dup_name_rgx = build_duplicate_pattern(stem_name, extension, policy)
    debug_log('dupNameRegex', dup_name_rgx.pattern)

    dup_numbers = []
    exists = False
    for sibling in listing:
        sibling_base = path_utils.basename(path_utils.normalize_separators(sibling))
        if sibling_base == candidate_base:
            exists = True

        match = dup_name_rgx.match(sibling_base)
        if not match:
            continue
        try:
            dup_numbers.append(int(match.group('number')))
        except ValueError as e:
            raise MalformedNameError(sibling, f"Unparseable duplicate number in '{sibling}'") from e

    final_base = candidate_base
    if exists or policy.always:
        new_number = max(dup_numbers) + 1 if dup_numbers else 1
        final_base = number_name(stem_name, extension, new_number, policy)
        debug_log(f'duplicate numbers {sorted(dup_numbers)} -> {new_number}')

    final_name = path_utils.join(stem_dir, final_base)
    return NameObj(
        name=final_name,
        stem=final_name[:len(final_name) - len(extension) - 1],
        extension=extension,
    )


def parse_duplicate_number(name: str, stem_name: str, extension: str,
                           policy: DuplicatePolicy):
    """
    Recover the duplicate number from a numbered name.

    Returns:
        The number, or None if the name is not a numbered variant of stem_name
    """
    match = build_duplicate_pattern(stem_name, extension, policy).match(path_utils.basename(name))
    return int(match.group('number')) if match else None


# End of file #
