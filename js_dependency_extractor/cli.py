"""CLI entry point for standalone usage: js-dependency-extractor.

Usage:
    js-dependency-extractor -p ./my-project
    js-dependency-extractor -p ./my-project -e .ts -e .tsx -i node_modules,test
    js-dependency-extractor -p ./my-project --merge-partial --json
"""

from __future__ import annotations

import json
import sys

import click

from js_dependency_extractor import __version__
from js_dependency_extractor.core.logging import setup_logging
from js_dependency_extractor.exceptions import ExtractionError
from js_dependency_extractor.models import ScanConfig
from js_dependency_extractor.orchestrator import extract


def _split_values(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> tuple[str, ...] | None:
    """Flatten repeated and comma-separated option values."""
    flattened = [v.strip() for value in values for v in value.split(",") if v.strip()]
    return tuple(flattened) or None


@click.command(name="js-dependency-extractor")
@click.version_option(__version__, "-v", "--version", message="%(version)s")
@click.option(
    "-p",
    "--path",
    required=True,
    help="Path to a file or a directory to extract dependencies from",
)
@click.option("-d", "--debug", is_flag=True, help="Output extra debugging")
@click.option(
    "-e",
    "--only-extensions",
    multiple=True,
    callback=_split_values,
    help="File extension(s) to inspect, e.g. .ts (repeatable or comma-separated)",
)
@click.option(
    "-i",
    "--ignore-paths",
    multiple=True,
    callback=_split_values,
    help="Path substring(s) to ignore (repeatable or comma-separated)",
)
@click.option(
    "-m",
    "--merge-partial",
    is_flag=True,
    help="Merge partial requires/imports into one main dependency",
)
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON array")
def main(
    path: str,
    debug: bool,
    only_extensions: tuple[str, ...] | None,
    ignore_paths: tuple[str, ...] | None,
    merge_partial: bool,
    as_json: bool,
) -> None:
    """A JavaScript and TypeScript files dependency extractor."""
    setup_logging("DEBUG" if debug else None)

    config = ScanConfig(
        path=path,
        ignore_paths=ignore_paths,
        only_extensions=only_extensions,
        merge_partial=merge_partial,
    )
    if debug:
        options = {
            "path": path,
            "debug": debug,
            "only_extensions": list(only_extensions or []),
            "ignore_paths": list(ignore_paths or []),
            "merge_partial": merge_partial,
        }
        click.echo(f"command options: {options}", err=True)

    try:
        dependencies = extract(config)
    except ExtractionError as e:
        click.echo(e.message, err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(dependencies, indent=2))
        return
    for name in dependencies:
        click.echo(name)


if __name__ == "__main__":
    main()
