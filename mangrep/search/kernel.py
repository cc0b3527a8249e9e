"""Syscall lookups in a Linux kernel source tree."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

from .grep import compile_multiline, grep_tree


def syscall_pattern(name: str) -> re.Pattern:
    """Entry points and prototypes mentioning the syscall."""
    name = re.escape(name)
    return compile_multiline(
        rf'^.*(?:SYSCALL_DEFINE\d\(\s*{name}\b|\bsys_{name}\s*\().*$'
    )


def syscall_def_pattern(name: str) -> re.Pattern:
    """Whole syscall definitions, up to the closing brace in column 0."""
    name = re.escape(name)
    return compile_multiline(
        rf'^(?:(?:COMPAT_)?SYSCALL_DEFINE\d\(\s*{name}\b'
        rf'|asmlinkage\s[\w\s*]*\bsys_{name}\s*\()'
        r'[^;{]*\{.*?^\}',
        dotall=True,
    )


def grep_syscall(name: str, root: Path) -> Iterator[str]:
    """Yield `path:N:line` for every line naming the syscall."""
    return grep_tree(syscall_pattern(name), root)


def grep_syscall_def(name: str, root: Path) -> Iterator[str]:
    """Yield the full definitions of the syscall found in C sources."""
    return grep_tree(syscall_def_pattern(name), root, suffixes=['.c'])
