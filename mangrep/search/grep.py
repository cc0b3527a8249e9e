"""Multiline pattern matching with pcregrep-style numbered output."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from ..config import SKIP_DIRS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hit:
    """One match: the line it starts on and every line it touches."""
    lineno: int
    lines: List[str]


def find_hits(regex: re.Pattern, text: str) -> List[Hit]:
    """Find every match of regex in text.

    Each hit covers whole lines, from the start of the line where the
    match begins to the end of the line where it ends.
    """
    hits = []
    lineno = 1
    counted = 0
    emitted_to = -1
    for match in regex.finditer(text):
        start, end = match.span()
        # Empty matches, and further matches on a line already printed
        if start == end or start <= emitted_to:
            continue
        if text[end - 1] == '\n':
            end -= 1
        line_start = text.rfind('\n', 0, start) + 1
        line_end = text.find('\n', end)
        if line_end == -1:
            line_end = len(text)
        lineno += text.count('\n', counted, line_start)
        counted = line_start
        emitted_to = line_end
        hits.append(Hit(lineno, text[line_start:line_end].split('\n')))
    return hits


def format_hit(hit: Hit, path: Optional[os.PathLike] = None) -> List[str]:
    """Render a hit the way `pcregrep -nM` does.

    Only the first line carries the `N:` prefix (and `path:` when given);
    continuation lines are printed bare.
    """
    prefix = f"{path}:" if path is not None else ""
    first, *rest = hit.lines
    return [f"{prefix}{hit.lineno}:{first}", *rest]


def numbered_lines(regex: re.Pattern, text: str) -> List[str]:
    """All hits of regex in text, formatted with line numbers."""
    out: List[str] = []
    for hit in find_hits(regex, text):
        out.extend(format_hit(hit))
    return out


def iter_regular_files(root: Path, skip_dirs: Iterable[str] = SKIP_DIRS) -> Iterator[Path]:
    """Yield regular files below root in lexicographic path order.

    Symlinks are not followed and not reported. Directories named in
    skip_dirs are not descended into.
    """
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in skip_dirs]
        for name in filenames:
            path = Path(dirpath) / name
            if path.is_file() and not path.is_symlink():
                found.append(path)
    return iter(sorted(found, key=str))


def read_text(path: Path) -> Optional[str]:
    """Read a source file, or None for unreadable or binary files."""
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.warning(f"Cannot read {path}: {e}")
        return None
    if b'\0' in data:
        return None
    return data.decode('utf-8', errors='replace')


def iter_tree(root: Path, suffixes: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield searchable files under root, optionally filtered by suffix."""
    wanted = tuple(suffixes) if suffixes else None
    if root.is_file():
        yield root
        return
    if not root.is_dir():
        logger.error(f"{root}: No such file or directory")
        return
    for path in iter_regular_files(root):
        if wanted is None or path.name.endswith(wanted):
            yield path


def grep_tree(regex: re.Pattern, root: Path, suffixes: Optional[Iterable[str]] = None) -> Iterator[str]:
    """Yield formatted hits of regex for every file under root."""
    for path in iter_tree(root, suffixes):
        text = read_text(path)
        if text is None:
            continue
        for hit in find_hits(regex, text):
            yield from format_hit(hit, path)


def compile_multiline(pattern: str, dotall: bool = False) -> re.Pattern:
    """Compile a pattern where ^ and $ match at line boundaries."""
    flags = re.MULTILINE
    if dotall:
        flags |= re.DOTALL
    return re.compile(pattern, flags)
