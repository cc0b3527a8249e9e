"""Man page processing utilities."""
from __future__ import annotations

from .parser import extract_header, extract_section, select_sections
from .discovery import discover_man_pages, load_documents, read_man_file
from .render import render_man
from .sections import man_section
from .synopsis import list_functions, list_variables, man_lsfunc, man_lsvar

__all__ = [
    'extract_header',
    'extract_section',
    'select_sections',
    'discover_man_pages',
    'load_documents',
    'read_man_file',
    'render_man',
    'man_section',
    'list_functions',
    'list_variables',
    'man_lsfunc',
    'man_lsvar',
]
