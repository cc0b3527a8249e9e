"""Man page source discovery and reading."""
from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..search.grep import iter_regular_files

logger = logging.getLogger(__name__)


def read_man_file(file_path: Path) -> Optional[str]:
    """Read a man page source file, handling compression.

    Returns None if the file cannot be read.
    """
    try:
        if file_path.suffix == '.gz':
            with gzip.open(file_path, 'rt', encoding='utf-8', errors='ignore') as f:
                return f.read()
        with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
            return f.read()
    except (OSError, EOFError) as e:
        logger.warning(f"Cannot read {file_path}: {e}")
        return None


def count_lines(text: str) -> int:
    """Count lines the way `wc -l` does (newline characters)."""
    return text.count('\n')


def is_link_page(text: str) -> bool:
    """One-line pages are `.so` redirects to another page, not content."""
    return count_lines(text) == 1


def discover_man_pages(path: Path) -> List[Path]:
    """List the man page files under path (or path itself if it is a file).

    Files come back in lexicographic path order.
    """
    if path.is_file():
        return [path]
    if not path.is_dir():
        logger.error(f"{path}: No such file or directory")
        return []
    # Every regular file counts, VCS directories included
    return list(iter_regular_files(path, skip_dirs=()))


def load_documents(path: Path) -> List[Tuple[Path, str]]:
    """Read every real man page under path.

    Returns:
        List of (path, source_text) pairs, link pages and unreadable files left out
    """
    documents = []
    for man_file in discover_man_pages(path):
        text = read_man_file(man_file)
        if text is None:
            continue
        if is_link_page(text):
            logger.debug(f"Skipping link page {man_file}")
            continue
        documents.append((man_file, text))
    return documents
