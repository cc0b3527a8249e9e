"""Source tree searching."""
from __future__ import annotations

from .grep import Hit, find_hits, format_hit, numbered_lines, iter_regular_files, grep_tree
from .kernel import grep_syscall, grep_syscall_def
from .glibc import grep_glibc_prototype

__all__ = [
    'Hit',
    'find_hits',
    'format_hit',
    'numbered_lines',
    'iter_regular_files',
    'grep_tree',
    'grep_syscall',
    'grep_syscall_def',
    'grep_glibc_prototype',
]
