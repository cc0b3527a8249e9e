"""Rendered section text for a directory of man pages."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, Sequence

from .discovery import load_documents
from .parser import select_sections
from .render import render_man

logger = logging.getLogger(__name__)


def man_section(
    path: Path,
    names: Sequence[str],
    render: Optional[Callable[[str], str]] = None,
) -> Iterator[str]:
    """Yield the rendered header and named sections of each page under path.

    Args:
        path: A man page file or a directory searched recursively
        names: Section names (e.g. 'SYNOPSIS'), emitted in this order
        render: Formatter from troff source to text, `man` by default

    Pages whose rendering fails yield an empty string.
    """
    if render is None:
        render = render_man
    for man_file, text in load_documents(path):
        logger.debug(f"Extracting {', '.join(names)} from {man_file}")
        yield render(select_sections(text, names))
