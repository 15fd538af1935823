"""Data models for the dependency extractor."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field


def _freeze(values: Iterable[str] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class ScanConfig:
    """Resolved input of a single scan.

    ``ignore_paths`` are plain substrings matched against absolute paths.
    ``only_extensions`` include the leading dot (``.ts``); ``None`` or an
    empty sequence means every file is inspected.
    """

    path: str | os.PathLike[str] | None
    ignore_paths: tuple[str, ...] | None = None
    only_extensions: tuple[str, ...] | None = None
    merge_partial: bool = False

    def __post_init__(self) -> None:
        # Lists are accepted for convenience; store tuples to stay immutable.
        object.__setattr__(self, "ignore_paths", _freeze(self.ignore_paths))
        object.__setattr__(self, "only_extensions", _freeze(self.only_extensions))
        object.__setattr__(self, "merge_partial", self.merge_partial is True)


@dataclass
class ExtractionResult:
    """Raw occurrences collected from one file or a directory subtree."""

    imports: list[str] = field(default_factory=list)
    requires: list[str] = field(default_factory=list)

    def merge(self, other: ExtractionResult) -> ExtractionResult:
        """Append *other*'s occurrences to this result and return it."""
        self.imports.extend(other.imports)
        self.requires.extend(other.requires)
        return self

    def is_empty(self) -> bool:
        return not self.imports and not self.requires
