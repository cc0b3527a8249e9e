"""Configuration and constants for mangrep."""
from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

# Exit status for wrong argument counts (EX_USAGE from sysexits.h)
USAGE_STATUS = 64

# Rendering
MAN_WIDTH = int(os.environ.get('MANGREP_MANWIDTH', '200'))  # Wide width to avoid wrapping declarations
_timeout = os.environ.get('MANGREP_RENDER_TIMEOUT')
RENDER_TIMEOUT = float(_timeout) if _timeout else None

# Source trees searched by the grep_* commands
LINUX_SRC = Path(os.environ.get('MANGREP_LINUX_SRC', '.'))
GLIBC_SRC = Path(os.environ.get('MANGREP_GLIBC_SRC', '.'))

# pdfman output and viewer
PDF_DIR = Path(os.environ.get('MANGREP_PDF_DIR', tempfile.gettempdir()))
PDF_OPENER = os.environ.get('MANGREP_OPENER', 'open' if sys.platform == 'darwin' else 'xdg-open')

# Section read by man_lsfunc / man_lsvar
SYNOPSIS_SECTION = 'SYNOPSIS'

# Directories never descended into when walking a tree
SKIP_DIRS = frozenset({'.git', '.hg', '.svn'})
