"""
Slash-separated path helpers for vault paths and display links.
File: attachment_renamer/core/path_utils.py

Vault paths always use '/' regardless of platform. These helpers never
touch the filesystem.
"""

import os


def normalize_separators(path: str) -> str:
    """Convert backslashes to forward slashes."""
    return path.replace('\\', '/')


def join(*segments: str) -> str:
    """
    Join path segments, dropping empty and '.' parts.
    
    A leading slash on the first non-empty segment is preserved.

    Examples:
        join('assets', 'img.png') -> 'assets/img.png'
        join('', 'img.png') -> 'img.png'
        join('/root/', './sub', 'a.png') -> '/root/sub/a.png'
    """
    segments = [segment for segment in segments if segment]
    parts = []
    for segment in segments:
        parts.extend(segment.split('/'))

    new_parts = [part for part in parts if part and part != '.']

    # Preserve the initial slash if there was one
    if segments and segments[0].startswith('/'):
        return '/' + '/'.join(new_parts)

    return '/'.join(new_parts)


def basename(full_path: str) -> str:
    """Last part of a path, e.g. 'foo.jpg'."""
    return full_path.split('/')[-1]


def directory(full_path: str) -> str:
    """Parent directory part of a path, '' for a bare name."""
    return '/'.join(full_path.split('/')[:-1])


def extension(full_path: str) -> str:
    """Extension without the dot, '' when the base name has none."""
    name = basename(full_path)
    if '.' not in name:
        return ''
    return name.rsplit('.', 1)[1]


def stem(full_path: str) -> str:
    """Path without its extension."""
    ext = extension(full_path)
    if not ext and not full_path.endswith('.'):
        return full_path
    return full_path[:len(full_path) - len(ext) - 1]


def relative(base_dir: str, target_path: str) -> str:
    """Path of target relative to base, always with forward slashes."""
    rel = os.path.relpath(target_path, base_dir or '.')
    return normalize_separators(rel)


# End of file #
