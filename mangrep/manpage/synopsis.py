"""Function and variable names from rendered SYNOPSIS sections."""
from __future__ import annotations

import re
from itertools import groupby
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from ..ccomments import strip_comments_text
from ..config import SYNOPSIS_SECTION
from ..search.grep import compile_multiline, numbered_lines
from .sections import man_section

# Indented `type name(params);`, the parameter list may run over several lines
# and a variadic `...` may be followed by blanks (a stripped `/* mode_t mode */`)
FUNCTION_DECL_RE = compile_multiline(
    r'^ +[\w *]+\w+\([\w\s(),\[\]*]*(?:\.\.\.)?\s*\); *$'
)

# extern type (*name)(params);
EXTERN_FUNC_POINTER_RE = re.compile(
    r'^\s*extern\s+[\w ]+\**\s*\(\s*\*\s*(\w+)\s*\)\s*\([\w\s(),\[\]*.]*\)\s*;\s*$'
)

# extern type name;
EXTERN_VARIABLE_RE = re.compile(r'^\s*extern\s+[\w ]+[ *]\**(\w+)\s*;\s*$')

_NUMBERED_RE = re.compile(r'^\d+:')
_SYSCALL_WRAPPER_RE = re.compile(r'\bsyscall\(\s*SYS_(\w+)\s*,?\s*')
_CALLED_NAME_RE = re.compile(r'(\w+)\(')


def collapse_adjacent(names: Iterable[str]) -> List[str]:
    """Drop consecutive repeats, keeping later non-adjacent ones (like uniq)."""
    return [name for name, _ in groupby(names)]


def list_functions(text: str) -> List[str]:
    """Names of the functions declared in comment-free SYNOPSIS text."""
    names = []
    for line in numbered_lines(FUNCTION_DECL_RE, text):
        # Continuation lines of a multi-line declaration carry no number
        if not _NUMBERED_RE.match(line):
            continue
        line = _SYSCALL_WRAPPER_RE.sub(r'\1(', _NUMBERED_RE.sub('', line, count=1))
        match = _CALLED_NAME_RE.search(line)
        if match:
            names.append(match.group(1))
    return collapse_adjacent(names)


def list_variables(text: str) -> List[str]:
    """Names of the extern variables declared in comment-free SYNOPSIS text."""
    names = []
    for line in text.split('\n'):
        if FUNCTION_DECL_RE.search(line) or 'typedef' in line:
            continue
        match = EXTERN_FUNC_POINTER_RE.match(line) or EXTERN_VARIABLE_RE.match(line)
        if match:
            names.append(match.group(1))
    return collapse_adjacent(names)


def synopsis_text(paths: Sequence[Path], render: Optional[Callable[[str], str]] = None) -> str:
    """Rendered SYNOPSIS sections of every page under paths, comments removed."""
    rendered = []
    for path in paths:
        rendered.extend(man_section(path, [SYNOPSIS_SECTION], render=render))
    return strip_comments_text(''.join(rendered))


def man_lsfunc(paths: Sequence[Path], render: Optional[Callable[[str], str]] = None) -> List[str]:
    """List the functions in the SYNOPSIS of each page under paths."""
    return list_functions(synopsis_text(paths, render))


def man_lsvar(paths: Sequence[Path], render: Optional[Callable[[str], str]] = None) -> List[str]:
    """List the variables in the SYNOPSIS of each page under paths."""
    return list_variables(synopsis_text(paths, render))
