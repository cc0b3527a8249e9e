"""Git helpers for man-pages commits."""
from __future__ import annotations

import subprocess
from pathlib import PurePosixPath
from typing import List, Tuple


def staged_files() -> Tuple[int, List[str]]:
    """Paths staged in the current git repository, with git's exit status."""
    result = subprocess.run(
        ['git', 'diff', '--staged', '--name-only'],
        stdout=subprocess.PIPE,
        text=True,
    )
    return result.returncode, [line for line in result.stdout.splitlines() if line]


def format_staged(paths: List[str]) -> str:
    """Join basenames for a commit subject: `man2/open.2, man3/x.3` -> `open.2, x.3`."""
    return ', '.join(PurePosixPath(path).name for path in paths)
