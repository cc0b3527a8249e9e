"""Command-line interface for mangrep."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .commands import COMMANDS, run_command


def setup_logging(verbose: bool) -> None:
    """Send mangrep log records to stderr through rich; stdout carries data only."""
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("mangrep")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    commands = "\n".join(
        f"  {command.name} {command.usage}".rstrip() for command in COMMANDS.values()
    )
    parser = argparse.ArgumentParser(
        prog="mangrep",
        description="Search Linux kernel, glibc and man-pages sources.",
        epilog=f"commands:\n{commands}\n\nExample: mangrep man_lsfunc man2/",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"mangrep {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress and suppressed failures")
    parser.add_argument("command", choices=sorted(COMMANDS), metavar="<command>", help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments passed to the command")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return run_command(args.command, args.args)


def _alias(name: str) -> Callable[[], None]:
    """Console script running one command directly, like the shell function."""
    def entry() -> None:
        setup_logging(verbose=False)
        sys.exit(run_command(name, sys.argv[1:]))
    entry.__name__ = f"{name}_main"
    return entry


grep_syscall_main = _alias('grep_syscall')
grep_syscall_def_main = _alias('grep_syscall_def')
man_section_main = _alias('man_section')
man_lsfunc_main = _alias('man_lsfunc')
man_lsvar_main = _alias('man_lsvar')
pdfman_main = _alias('pdfman')
man_gitstaged_main = _alias('man_gitstaged')
grep_glibc_prototype_main = _alias('grep_glibc_prototype')


if __name__ == "__main__":
    sys.exit(main())
