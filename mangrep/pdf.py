"""Render a man page to PDF and open it."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .config import PDF_DIR, PDF_OPENER
from .manpage.render import man_environment

logger = logging.getLogger(__name__)


def pdf_path(page: str, directory: Path = PDF_DIR) -> Path:
    """Where the PDF for page is written (`open.2` -> <dir>/open.2.pdf)."""
    return directory / f"{Path(page).name}.pdf"


def pdfman(page: str, directory: Path = PDF_DIR, opener: Optional[str] = PDF_OPENER) -> int:
    """Typeset page as PostScript, convert it to PDF and open the result.

    Returns the exit status of the first step that fails, or 0.
    """
    output = pdf_path(page, directory)

    postscript = subprocess.run(
        ['man', '-Tps', page],
        stdout=subprocess.PIPE,
        env=man_environment(),
    )
    if postscript.returncode != 0:
        return postscript.returncode

    converted = subprocess.run(['ps2pdf', '-', str(output)], input=postscript.stdout)
    if converted.returncode != 0:
        return converted.returncode
    logger.info(f"Wrote {output}")

    if not opener:
        return 0
    return subprocess.run([opener, str(output)]).returncode
