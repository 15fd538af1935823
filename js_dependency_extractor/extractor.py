"""Extraction pipeline — read files, walk directories, normalize names."""

from __future__ import annotations

import asyncio
import os
import stat
from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog

from js_dependency_extractor.exceptions import ExtractionError
from js_dependency_extractor.models import ExtractionResult
from js_dependency_extractor.patterns import PARTIAL_PATTERN, SCOPED_PATTERN, PatternKind

log = structlog.get_logger("js_dependency_extractor.extractor")


# ── name normalization ───────────────────────────────────────────────────

# Punctuation ranks before digits, digits before letters, as localeCompare does.
_PUNCTUATION_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"


def dependency_sort_key(name: str) -> tuple:
    """Collation key approximating ``String.prototype.localeCompare``.

    Names compare case-insensitively first (``alpha`` < ``Zeta``, ``foo_bar``
    < ``foo-bar``); ties are broken lower case first, then by code point.
    """
    primary = []
    for char in name:
        if char.isspace():
            primary.append((0, 0, char))
        elif char in _PUNCTUATION_ORDER:
            primary.append((1, _PUNCTUATION_ORDER.index(char), char))
        elif char.isdigit():
            primary.append((2, 0, char))
        else:
            primary.append((3, 0, char.casefold()))
    tertiary = tuple(char.isupper() for char in name)
    return (tuple(primary), tertiary, name)


def extract_dependency(
    content: str | None,
    kind: PatternKind,
    merge_partial: bool = False,
) -> str | None:
    """Return the dependency named by a raw occurrence, or None.

    With *merge_partial*, ``@scope/pkg/sub`` becomes ``@scope/pkg`` and
    ``pkg/sub`` becomes ``pkg``.
    """
    if not isinstance(content, str) or not content:
        return None

    match = kind.pattern.search(content)
    dependency = match.group(1) if match else None
    if not dependency:
        return None

    if merge_partial:
        root = SCOPED_PATTERN.match(dependency) or PARTIAL_PATTERN.match(dependency)
        return root.group(1) if root else dependency

    return dependency


def _normalize_group(
    occurrences: Iterable[str] | None,
    kind: PatternKind,
    merge_partial: bool,
) -> set[str]:
    if occurrences is None:
        return set()
    names = (extract_dependency(raw, kind, merge_partial) for raw in set(occurrences))
    return {name for name in names if name}


def extract_dependency_names(
    imports: Iterable[str] | None = None,
    requires: Iterable[str] | None = None,
    merge_partial: bool = False,
) -> list[str]:
    """Turn raw occurrences into a locale-ordered list of unique dependency names."""
    dependencies = _normalize_group(imports, PatternKind.IMPORT, merge_partial)
    dependencies |= _normalize_group(requires, PatternKind.REQUIRE, merge_partial)
    return sorted(dependencies, key=dependency_sort_key)


# ── single file ──────────────────────────────────────────────────────────


def _read_occurrences(path: Path) -> ExtractionResult:
    content = path.read_text(encoding="utf-8", errors="replace")
    return ExtractionResult(
        imports=[m.group(0) for m in PatternKind.IMPORT.pattern.finditer(content)],
        requires=[m.group(0) for m in PatternKind.REQUIRE.pattern.finditer(content)],
    )


async def extract_from_file(path: str | os.PathLike[str] | None) -> ExtractionResult:
    """Collect every require/import occurrence of a single file.

    Raises :class:`ExtractionError` when the file cannot be read.
    """
    try:
        file_path = Path(os.path.abspath(path))
        extracted = await asyncio.to_thread(_read_occurrences, file_path)
    except Exception as exc:
        error = ExtractionError(
            f"error while extracting requires and imports for file {path}, {exc}", exc
        )
        log.debug("extractor.file_error", path=str(path), error=str(exc))
        raise error from exc

    log.debug(
        "extractor.file_done",
        path=str(file_path),
        imports=len(extracted.imports),
        requires=len(extracted.requires),
    )
    return extracted


# ── directory walk ───────────────────────────────────────────────────────


def _is_ignored(path: str, ignore_paths: Sequence[str] | None) -> bool:
    return bool(ignore_paths) and any(part in path for part in ignore_paths)


async def _extract_entry(
    entry_path: str,
    ignore_paths: Sequence[str] | None,
    only_extensions: Sequence[str] | None,
) -> ExtractionResult:
    """Extract one directory entry; failures below the top level are logged."""
    if _is_ignored(entry_path, ignore_paths):
        log.debug("extractor.ignored", path=entry_path)
        return ExtractionResult()

    try:
        mode = (await asyncio.to_thread(os.stat, entry_path)).st_mode
    except OSError as exc:
        log.warning("extractor.stat_failed", path=entry_path, error=str(exc))
        return ExtractionResult()

    if stat.S_ISREG(mode):
        _, ext = os.path.splitext(entry_path)
        if only_extensions and ext not in only_extensions:
            return ExtractionResult()
        try:
            return await extract_from_file(entry_path)
        except ExtractionError as exc:
            log.warning("extractor.file_failed", path=entry_path, error=exc.message)
            return ExtractionResult()

    if stat.S_ISDIR(mode):
        try:
            return await extract_from_directory(entry_path, ignore_paths, only_extensions)
        except ExtractionError as exc:
            log.warning("extractor.directory_failed", path=entry_path, error=exc.message)
            return ExtractionResult()

    return ExtractionResult()


async def extract_from_directory(
    path: str | os.PathLike[str] | None,
    ignore_paths: Sequence[str] | None = None,
    only_extensions: Sequence[str] | None = None,
) -> ExtractionResult:
    """Recursively collect require/import occurrences under a directory.

    Entries whose absolute path contains any of *ignore_paths* are skipped
    (ignored directories are not descended into). When *only_extensions*
    is non-empty, only files with one of those extensions are read.
    Siblings are processed concurrently.

    Raises :class:`ExtractionError` when *path* itself cannot be listed.
    Unreadable files and subdirectories are logged and skipped.
    """
    ignore = list(ignore_paths) if ignore_paths else None
    extensions = list(only_extensions) if only_extensions else None

    try:
        dir_path = os.path.abspath(path)
        filenames = await asyncio.to_thread(os.listdir, dir_path)
    except Exception as exc:
        error = ExtractionError(
            f"error while extracting requires and imports for directory {path}, {exc}", exc
        )
        log.debug("extractor.directory_error", path=str(path), error=str(exc))
        raise error from exc

    results = await asyncio.gather(
        *(
            _extract_entry(os.path.join(dir_path, name), ignore, extensions)
            for name in filenames
        )
    )

    extracted = ExtractionResult()
    for result in results:
        extracted.merge(result)

    log.debug(
        "extractor.directory_done",
        path=dir_path,
        entries=len(filenames),
        imports=len(extracted.imports),
        requires=len(extracted.requires),
    )
    return extracted
