"""Filesystem discovery for pages directories.

Walks each pages directory and collects every file with a configured
extension as a :class:`ScannedFile`.  Files from all directories are
merged, sorted so a page always precedes the files of its like-named
directory (``parent.vue`` before ``parent/child.vue``), and deduplicated
by relative path, earlier directories winning.
"""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path

from trellis.errors import ConfigurationError
from trellis.routing.route import ScannedFile

logger = logging.getLogger("trellis.pages")

# Collation order for whitespace and punctuation, roughly following the en-US locale
_PUNCTUATION_ORDER = " _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def scan_pages(
    pages_dirs: tuple[str | Path, ...] | list[str | Path],
    extensions: tuple[str, ...] = (".vue",),
) -> list[ScannedFile]:
    """Collect, sort and deduplicate page files.

    Args:
        pages_dirs: Pages directories, highest priority first.
        extensions: File suffixes treated as pages (e.g. ``".vue"``).

    Returns:
        Files sorted by :func:`locale_sort_key` of their relative path.

    Raises:
        ConfigurationError: A pages directory does not exist.
    """
    scanned: list[ScannedFile] = []
    for pages_dir in pages_dirs:
        root = Path(pages_dir).resolve()
        if not root.is_dir():
            msg = f"Pages directory not found: {root}"
            raise ConfigurationError(msg)

        found = _walk_directory(root, frozenset(extensions))
        logger.debug("Found %d page files in %s", len(found), root)
        scanned.extend(
            ScannedFile(
                relative_path=file.relative_to(root).as_posix(),
                absolute_path=str(file),
            )
            for file in found
        )

    scanned.sort(key=lambda f: locale_sort_key(f.relative_path))
    return unique_by_relative_path(scanned)


def _walk_directory(directory: Path, extensions: frozenset[str]) -> list[Path]:
    """Recursively list page files below *directory*, skipping dot entries."""
    files: list[Path] = []
    for item in sorted(directory.iterdir()):
        if item.name.startswith("."):
            continue
        if item.is_dir():
            files.extend(_walk_directory(item, extensions))
        elif item.is_file() and item.suffix in extensions:
            files.append(item)
    return files


def unique_by_relative_path(files: list[ScannedFile]) -> list[ScannedFile]:
    """Keep the first file for each relative path, preserving order."""
    seen: set[str] = set()
    unique: list[ScannedFile] = []
    for file in files:
        if file.relative_path in seen:
            continue
        seen.add(file.relative_path)
        unique.append(file)
    return unique


def locale_sort_key(
    path: str,
) -> tuple[tuple[tuple[int, int | str], ...], tuple[str, ...], tuple[bool, ...]]:
    """Sort key approximating ``localeCompare(..., "en-US")``.

    Independent of the process locale.  Primary order is whitespace and
    punctuation, then digits, then letters compared case- and
    accent-insensitively.  Ties are broken by accents (unaccented first),
    then by case (lowercase first).
    """
    primary: list[tuple[int, int | str]] = []
    secondary: list[str] = []
    tertiary: list[bool] = []
    for char in path:
        marks = ""
        if char.isdigit():
            primary.append((2, int(char) if char.isascii() else ord(char)))
        elif char.isalpha():
            decomposed = unicodedata.normalize("NFD", char)
            base = unicodedata.normalize("NFKD", decomposed[0])[0].casefold()
            marks = "".join(c for c in decomposed[1:] if unicodedata.combining(c))
            primary.append((3, base))
        else:
            index = _PUNCTUATION_ORDER.find(char)
            primary.append((1, index if index >= 0 else len(_PUNCTUATION_ORDER) + ord(char)))
        secondary.append(marks)
        tertiary.append(char.isupper())
    return tuple(primary), tuple(secondary), tuple(tertiary)
