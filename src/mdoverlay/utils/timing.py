#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdoverlay/utils/timing.py
"""Timing helper for the parse and render stages."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Time is only measured when the logger has DEBUG enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Parsing")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Rendering"):
        ...     pass

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.3f}s")
    else:
        yield


__all__ = ["debug_timer"]
