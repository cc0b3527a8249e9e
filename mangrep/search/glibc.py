"""Prototype lookups in a glibc source tree."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from .grep import compile_multiline, grep_tree


def prototype_pattern(func: str) -> re.Pattern:
    # glibc writes `extern int open (const char *__file, ...) __nonnull ((1));`
    return compile_multiline(
        rf'^extern\s[^;]*?\b{re.escape(func)}\s*\([^;]*;',
    )


def grep_glibc_prototype(func: str, root: Path) -> Iterator[str]:
    """Yield `path:N:` prefixed prototypes of func from glibc headers."""
    return grep_tree(prototype_pattern(func), root, suffixes=['.h'])
