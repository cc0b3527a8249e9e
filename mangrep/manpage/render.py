"""Rendering man page source to plain text with `man`."""
from __future__ import annotations

import logging
import os
import subprocess

from ..config import MAN_WIDTH, RENDER_TIMEOUT

logger = logging.getLogger(__name__)


def man_environment() -> dict:
    """Environment for running `man` non-interactively."""
    env = os.environ.copy()
    env['MANWIDTH'] = str(MAN_WIDTH)
    env['MANPAGER'] = 'cat'  # Disable pager
    env['PAGER'] = 'cat'
    env.pop('MAN_KEEP_FORMATTING', None)
    return env


def render_man(source: str) -> str:
    """Format troff man page source as flat text.

    Returns an empty string if `man` fails, so one broken page does not
    stop a batch.
    """
    if not source:
        return ''
    try:
        # man -l - reads the page from stdin
        result = subprocess.run(
            ['man', '-l', '-'],
            input=source,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=RENDER_TIMEOUT,
            env=man_environment(),
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"man failed: {e}")
        return ''

    if result.returncode != 0:
        logger.debug(f"man exited with status {result.returncode}")
        return ''
    return result.stdout
