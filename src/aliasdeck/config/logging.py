"""Logging setup for the aliasdeck CLI."""

from __future__ import annotations

import logging

CLI_FORMAT = "%(levelname)s %(message)s"
VERBOSE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger once.

    Debug runs include timestamps and logger names; normal runs print only the
    level and message so command output stays readable. ``force=True`` replaces
    handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format=VERBOSE_FORMAT if level <= logging.DEBUG else CLI_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
