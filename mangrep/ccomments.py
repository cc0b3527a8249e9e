"""Best-effort C comment removal for line-oriented text.

Handles one comment per line. Two comments on the same line, or a block
comment and a line comment sharing a line, come out wrong; callers only
feed it man-page SYNOPSIS text where that does not happen in practice.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator

_SPAN_RE = re.compile(r'/\*.*\*/')
_LINE_COMMENT_RE = re.compile(r'//.*')


def strip_comments(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with C comments removed.

    Block comments spanning several lines are deleted whole, from the line
    holding the opening marker through the line holding the closing one.
    """
    in_block = False
    for line in lines:
        if _SPAN_RE.search(line):
            # Complete span on one line: never part of a multi-line block
            line = _SPAN_RE.sub('', line, count=1)
        elif in_block:
            if '*/' in line:
                in_block = False
            continue
        elif '/*' in line:
            in_block = True
            continue

        yield _LINE_COMMENT_RE.sub('', line)


def strip_comments_text(text: str) -> str:
    """Remove C comments from a block of text."""
    return '\n'.join(strip_comments(text.split('\n')))
