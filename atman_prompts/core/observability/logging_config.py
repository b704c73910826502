"""
Logging setup for the atman-prompts command.

The command's flags and the ``ATMAN_PROMPTS_*`` environment are both
resolved here, so main.py only forwards what it parsed:

    --debug  >  --verbose  >  --quiet  >  ATMAN_PROMPTS_LOG_LEVEL  >  WARNING

Generation progress is logged by the orchestrator at INFO when the run is
verbose, so ``-v`` is what makes per-file lines appear on stderr.
``ATMAN_PROMPTS_LOG_FILE`` additionally appends a full-detail record of the
run to a file, at ``ATMAN_PROMPTS_LOG_FILE_LEVEL`` (default: console level).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LOG_LEVEL = "ATMAN_PROMPTS_LOG_LEVEL"
ENV_LOG_FILE = "ATMAN_PROMPTS_LOG_FILE"
ENV_LOG_FILE_LEVEL = "ATMAN_PROMPTS_LOG_FILE_LEVEL"

# Console: bare messages unless diagnosing, since click already prints the report
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s %(message)s", "%H:%M:%S"),
}
_CONSOLE_DEFAULT = ("%(levelname)s: %(message)s", None)

_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s — %(message)s", "%Y-%m-%d %H:%M:%S")


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Pick the console level name from CLI flags and the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def setup_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Configure the root logger for one CLI run.

    Args:
        debug, verbose, quiet: The command's logging flags.
        environ: Environment to read ``ATMAN_PROMPTS_*`` from (default: os.environ).

    Returns:
        The numeric console level that was applied.
    """
    env = os.environ if environ is None else environ
    console_level = _parse_level(resolve_level(debug, verbose, quiet, env.get(ENV_LOG_LEVEL)))

    fmt, datefmt = _CONSOLE_FORMATS.get(console_level, _CONSOLE_DEFAULT)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    log_file = env.get(ENV_LOG_FILE)
    if log_file:
        file_level = _parse_level(env.get(ENV_LOG_FILE_LEVEL)) if env.get(ENV_LOG_FILE_LEVEL) else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(*_FILE_FORMAT))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)
    logging.raiseExceptions = False
    return console_level


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; unknown names mean WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else logging.WARNING
    return numeric if isinstance(numeric, int) else logging.WARNING
