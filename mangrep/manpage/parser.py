"""Man page source (troff) section extraction."""
from __future__ import annotations

import re
from typing import List, Sequence


def _is_section_marker(line: str) -> bool:
    return line.startswith('.SH')


def _marks_section(line: str, name: str) -> bool:
    """Check if line is the `.SH NAME` or `.SH "NAME"` marker for name."""
    pattern = r'\.SH\s+"?' + re.escape(name) + r'"?\s*$'
    return re.match(pattern, line) is not None


def extract_header(lines: Sequence[str]) -> List[str]:
    """Lines from the `.TH` title marker up to the first section marker."""
    header = []
    in_header = False
    for line in lines:
        if in_header and _is_section_marker(line):
            break
        if line.startswith('.TH'):
            in_header = True
        if in_header:
            header.append(line)
    return header


def extract_section(lines: Sequence[str], name: str) -> List[str]:
    """The marker line of section name and its body, up to the next section.

    Only the first section with that name is returned; an absent section
    gives an empty list.
    """
    section = []
    in_section = False
    for line in lines:
        if in_section:
            if _is_section_marker(line):
                break
            section.append(line)
        elif _marks_section(line, name):
            in_section = True
            section.append(line)
    return section


def select_sections(man_page_text: str, names: Sequence[str]) -> str:
    """Build a reduced page: the header, then each named section in order."""
    lines = man_page_text.split('\n')
    selected = extract_header(lines)
    for name in names:
        selected.extend(extract_section(lines, name))
    return '\n'.join(selected) + '\n' if selected else ''
