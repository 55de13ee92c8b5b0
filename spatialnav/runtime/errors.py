"""Exception policy for collaborator callbacks invoked by the runtime."""

from __future__ import annotations

import logging
from typing import TypeAlias

# Failures a data-fetching callback may raise without aborting a frame.
RecoverableCallbackErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_CALLBACK_ERRORS: RecoverableCallbackErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    LookupError,
)


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *args: object,
    level: int = logging.WARNING,
) -> None:
    """Log a tolerated callback failure with its traceback."""
    logger.log(level, message, *args, exc_info=True)
