"""Logged subprocess execution."""

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from taco.core.errors import TacoError, TacoErrorCode
from taco.core.string_utils import quotes_around_if_necessary

logger = logging.getLogger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    """Render a command for display, quoting arguments that contain spaces."""
    return " ".join(quotes_around_if_necessary(str(arg)) for arg in cmd)


def logged_exec(
    cmd: Sequence[str],
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command, logging its command line and output if it fails.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution
        env: Environment for the child process (inherits when None)

    Returns:
        CompletedProcess with captured stdout and stderr

    Raises:
        TacoError: CommandFailed on non-zero exit or when the binary is missing
    """
    cmd_str = format_command(cmd)
    logger.debug("Running %s", cmd_str)

    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            env=dict(env) if env is not None else None,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=False,
        )
    except FileNotFoundError as e:
        logger.error("Command not found: %s", cmd_str)
        raise TacoError.wrap(TacoErrorCode.COMMAND_FAILED, e, cmd_str, 127) from e

    if result.returncode != 0:
        logger.error("%s", cmd_str)
        logger.error("stdout: %s", result.stdout.strip())
        logger.error("stderr: %s", result.stderr.strip())
        raise TacoError(TacoErrorCode.COMMAND_FAILED, cmd_str, result.returncode)

    return result
