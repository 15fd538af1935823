"""Entry point of the extractor: scan a file or a directory."""

from __future__ import annotations

import asyncio
import os
import stat

import structlog

from js_dependency_extractor.exceptions import ExtractionError
from js_dependency_extractor.extractor import (
    extract_dependency_names,
    extract_from_directory,
    extract_from_file,
)
from js_dependency_extractor.models import ScanConfig

log = structlog.get_logger("js_dependency_extractor.orchestrator")


async def extract_dependencies(config: ScanConfig) -> list[str]:
    """Extract the sorted, unique dependency names found at ``config.path``.

    A file path is scanned directly (filters do not apply); a directory
    is walked with ``config.ignore_paths`` and ``config.only_extensions``.

    Raises :class:`ExtractionError` on any failure, with the message
    ``unable to extract dependencies at <path>, <cause>``.
    """
    path = config.path
    log.debug(
        "orchestrator.start",
        path=str(path),
        ignore_paths=config.ignore_paths,
        only_extensions=config.only_extensions,
        merge_partial=config.merge_partial,
    )

    try:
        if path is None:
            raise ExtractionError("a path to a file or a directory is required")

        target = os.path.abspath(path)
        mode = (await asyncio.to_thread(os.stat, target)).st_mode

        if stat.S_ISREG(mode):
            extracted = await extract_from_file(target)
        elif stat.S_ISDIR(mode):
            extracted = await extract_from_directory(
                target,
                ignore_paths=config.ignore_paths,
                only_extensions=config.only_extensions,
            )
        else:
            raise ExtractionError(f"valid path to a file or a directory expected, found {path}")

        dependencies: list[str] = []
        if not extracted.is_empty():
            dependencies = extract_dependency_names(
                imports=extracted.imports,
                requires=extracted.requires,
                merge_partial=config.merge_partial,
            )
    except Exception as exc:
        reason = exc.message if isinstance(exc, ExtractionError) else str(exc)
        error = ExtractionError(f"unable to extract dependencies at {path}, {reason}", exc)
        log.debug("orchestrator.failed", path=str(path), error=error.message)
        raise error from exc

    log.debug("orchestrator.done", path=str(path), dependencies=len(dependencies))
    return dependencies


def extract(config: ScanConfig) -> list[str]:
    """Synchronous wrapper around :func:`extract_dependencies`."""
    return asyncio.run(extract_dependencies(config))
