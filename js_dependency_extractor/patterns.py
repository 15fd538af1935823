"""Textual patterns used to detect require/import statements.

Detection is lexical only: a pattern can match inside a comment or a
string literal that happens to look like a statement.
"""

from __future__ import annotations

import re
from enum import Enum

# `from 'dependency'` or `from "dependency"`
IMPORT_PATTERN = re.compile(r"""from\s+['"]([^'"\n:.]+)['"]""")

# `require('dependency')` or `require("dependency")`
REQUIRE_PATTERN = re.compile(r"""require\(['"]([^'".)]*)['"]\)""")

# `@scope/dependency` out of `@scope/dependency/module`
SCOPED_PATTERN = re.compile(r"^(@[^/]+/[^/]+)")

# `dependency` out of `dependency/module`
PARTIAL_PATTERN = re.compile(r"^([^/]+)/")


class PatternKind(Enum):
    """Statement form an occurrence was found with."""

    IMPORT = "import"
    REQUIRE = "require"

    @property
    def pattern(self) -> re.Pattern[str]:
        return IMPORT_PATTERN if self is PatternKind.IMPORT else REQUIRE_PATTERN
