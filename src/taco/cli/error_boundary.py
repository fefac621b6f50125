"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from taco.cli.output import user_output
from taco.core.errors import TacoError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def _fail(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - TacoError: Structured taco failures (message rendered from its code)
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except TacoError as e:
            logger.debug("%s failed with %s", func.__name__, e.error_code.value, exc_info=True)
            _fail(str(e))
        except FileNotFoundError as e:
            _fail(str(e))
        except ValueError as e:
            _fail(str(e))
        except PermissionError as e:
            _fail(str(e))

    return wrapper  # type: ignore[return-value]
