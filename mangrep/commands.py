"""Command registry: argument checks, usage errors and dispatch.

Every command takes the argument list of the shell function it replaces
and returns an exit status.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from rich.console import Console

from . import config
from .manpage import man_lsfunc, man_lsvar, man_section
from .pdf import pdfman
from .search import grep_glibc_prototype, grep_syscall, grep_syscall_def
from .vcs import format_staged, staged_files

# Exit status when an external tool is missing, as in a shell
COMMAND_NOT_FOUND = 127

err_console = Console(stderr=True, highlight=False, emoji=False)


@dataclass(frozen=True)
class Command:
    """A shell-function style command."""
    name: str
    usage: str
    min_args: int
    max_args: Optional[int]
    handler: Callable[[List[str]], int]

    def accepts(self, args: List[str]) -> bool:
        if len(args) < self.min_args:
            return False
        return self.max_args is None or len(args) <= self.max_args


def usage_error(command: Command) -> int:
    """Report wrong usage on stderr and return the usage status."""
    err_console.print(f"Usage: {command.name} {command.usage}".rstrip(), markup=False)
    return config.USAGE_STATUS


def _emit(lines: Iterable[str]) -> int:
    """Print lines to stdout; status 0 if there were any, 1 otherwise."""
    status = 1
    for line in lines:
        print(line)
        status = 0
    return status


def _grep_syscall(args: List[str]) -> int:
    return _emit(grep_syscall(args[0], config.LINUX_SRC))


def _grep_syscall_def(args: List[str]) -> int:
    return _emit(grep_syscall_def(args[0], config.LINUX_SRC))


def _grep_glibc_prototype(args: List[str]) -> int:
    return _emit(grep_glibc_prototype(args[0], config.GLIBC_SRC))


def _missing_status(paths: List[Path]) -> int:
    # Missing paths are reported during discovery; like find, fail at the end
    return 0 if all(path.exists() for path in paths) else 1


def _man_section(args: List[str]) -> int:
    path = Path(args[0])
    for text in man_section(path, args[1:]):
        sys.stdout.write(text)
    return _missing_status([path])


def _man_lsfunc(args: List[str]) -> int:
    paths = [Path(arg) for arg in args]
    for name in man_lsfunc(paths):
        print(name)
    return _missing_status(paths)


def _man_lsvar(args: List[str]) -> int:
    paths = [Path(arg) for arg in args]
    for name in man_lsvar(paths):
        print(name)
    return _missing_status(paths)


def _pdfman(args: List[str]) -> int:
    return pdfman(args[0])


def _man_gitstaged(args: List[str]) -> int:
    status, paths = staged_files()
    if status == 0:
        print(format_staged(paths))
    return status


COMMANDS: Dict[str, Command] = {
    command.name: command
    for command in [
        Command('grep_syscall', '<syscall>', 1, 1, _grep_syscall),
        Command('grep_syscall_def', '<syscall>', 1, 1, _grep_syscall_def),
        Command('man_section', '<dir> <section>...', 2, None, _man_section),
        Command('man_lsfunc', '<manpage|manNdir>...', 1, None, _man_lsfunc),
        Command('man_lsvar', '<manpage|manNdir>...', 1, None, _man_lsvar),
        Command('pdfman', '<manpage>', 1, 1, _pdfman),
        Command('man_gitstaged', '', 0, None, _man_gitstaged),
        Command('grep_glibc_prototype', '<func>', 1, 1, _grep_glibc_prototype),
    ]
}


def run_command(name: str, args: List[str]) -> int:
    """Run the named command with shell-style arguments.

    Raises:
        KeyError: if name is not a known command
    """
    command = COMMANDS[name]
    if not command.accepts(args):
        return usage_error(command)

    try:
        return command.handler(args)
    except FileNotFoundError as e:
        # A missing external tool (man, ps2pdf, git, the opener)
        err_console.print(f"{name}: {e.filename}: command not found", markup=False)
        return COMMAND_NOT_FOUND
