"""Shared pytest fixtures for js-dependency-extractor tests."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
import structlog

# relative path -> content, rooted at my-project/
_MY_PROJECT = {
    "app/index.ts": (
        "import path from 'path';\n"
        "import memwatch from '@airbnb/node-memwatch';\n"
        "import { partial } from '@airbnb/example-lib/partial';\n"
        "import { v1 } from 'uuid/v1';\n"
        'import { v4 } from "uuid/v4";\n'
        "import { helper } from './helpers';\n"
        "\n"
        "const crypto = require('crypto');\n"
        "\n"
        "export const id = () => v4();\n"
    ),
    "app/helpers.js": (
        "const fs = require('fs');\n"
        'const util = require("util");\n'
        "const sharp = require('sharp');\n"
        "const local = require('./local');\n"
        "\n"
        "module.exports = { fs, util, sharp, local };\n"
    ),
    "app/empty/index.js": "module.exports = {};\n",
    "app/.old/legacy.js": "const gm = require('gm');\n",
    "test/index.test.js": (
        "const { expect } = require('chai');\n"
        "const gm = require('gm');\n"
        "const magic = require('image-magic');\n"
        "const sharp = require('sharp');\n"
    ),
    "node_modules/some-lib/index.js": (
        "module.exports = [require('submodule1'), require('submodule2')];\n"
    ),
    "README.md": "Nothing to see here.\n",
}

FULL_DEPENDENCIES = [
    "@airbnb/example-lib/partial",
    "@airbnb/node-memwatch",
    "chai",
    "crypto",
    "fs",
    "gm",
    "image-magic",
    "path",
    "sharp",
    "submodule1",
    "submodule2",
    "util",
    "uuid/v1",
    "uuid/v4",
]

MERGE_PARTIAL_DEPENDENCIES = [
    "@airbnb/example-lib",
    "@airbnb/node-memwatch",
    "chai",
    "crypto",
    "fs",
    "gm",
    "image-magic",
    "path",
    "sharp",
    "submodule1",
    "submodule2",
    "util",
    "uuid",
]

# ignoring my-project/test, node_modules and .old
IGNORED_PATHS_DEPENDENCIES = [
    "@airbnb/example-lib/partial",
    "@airbnb/node-memwatch",
    "crypto",
    "fs",
    "path",
    "sharp",
    "util",
    "uuid/v1",
    "uuid/v4",
]

# only .ts files
ONLY_TS_DEPENDENCIES = [
    "@airbnb/example-lib/partial",
    "@airbnb/node-memwatch",
    "crypto",
    "path",
    "uuid/v1",
    "uuid/v4",
]


@pytest.fixture
def my_project(tmp_path: Path) -> Path:
    """A small JS/TS project tree on disk."""
    root = tmp_path / "my-project"
    for rel, content in _MY_PROJECT.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return root


@pytest.fixture(autouse=True, scope="session")
def _quiet_structlog():
    """Route log events to stderr at WARNING so stdout assertions stay clean."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    yield
    structlog.reset_defaults()
