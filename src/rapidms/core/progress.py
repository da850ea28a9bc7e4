"""
Progress reporting for long running processors.

ProgressLogger : Interface used by processors to report progress.
NullProgressLogger : Does not report progress.
TqdmProgressLogger : Report progress using a tqdm progress bar.
LoggingProgressLogger : Report progress using the logging module.

"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import tqdm

from . import constants as c
from . import exceptions

logger = logging.getLogger(__file__)


class ProgressLogger(Protocol):
    """Report progress of a task using a monotonic counter."""

    def start(self, begin: int, end: int, label: str) -> None:
        """Start a task with ``end - begin`` steps."""
        ...

    def advance(self) -> None:
        """Advance the counter one step."""
        ...

    def end(self) -> None:
        """Signal the end of the task."""
        ...


class NullProgressLogger:
    """Progress logger that does nothing."""

    def start(self, begin: int, end: int, label: str) -> None:
        pass

    def advance(self) -> None:
        pass

    def end(self) -> None:
        pass


class TqdmProgressLogger:
    """
    Display progress using a tqdm progress bar.

    Parameters
    ----------
    kwargs :
        Extra options passed to the tqdm constructor.

    """

    def __init__(self, **kwargs: Any):
        self._kwargs = kwargs
        self._bar: Optional[tqdm.tqdm] = None

    def start(self, begin: int, end: int, label: str) -> None:
        self._bar = tqdm.tqdm(total=end - begin, desc=label, **self._kwargs)

    def advance(self) -> None:
        if self._bar is not None:
            self._bar.update(1)

    def end(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class LoggingProgressLogger:
    """
    Report progress using the logging module.

    Parameters
    ----------
    log_every : int, default=100
        Number of steps between progress messages.
    level : int, default=logging.INFO
        Log level of progress messages.

    """

    def __init__(self, log_every: int = 100, level: int = logging.INFO):
        self.log_every = log_every
        self.level = level
        self.label = ""
        self.count = 0
        self.total = 0

    def start(self, begin: int, end: int, label: str) -> None:
        self.label = label
        self.count = 0
        self.total = end - begin
        logger.log(self.level, f"{label}: started ({self.total} steps).")

    def advance(self) -> None:
        self.count += 1
        if self.log_every > 0 and self.count % self.log_every == 0:
            logger.log(self.level, f"{self.label}: {self.count}/{self.total}.")

    def end(self) -> None:
        logger.log(self.level, f"{self.label}: finished ({self.count}/{self.total} steps).")


def create_progress_logger(kind: c.ProgressLoggerType | str = c.ProgressLoggerType.NONE, **kwargs):
    """
    Create a progress logger.

    Parameters
    ----------
    kind : ProgressLoggerType or str, default=ProgressLoggerType.NONE
        The progress logger type.
    kwargs :
        Parameters passed to the progress logger constructor.

    Returns
    -------
    ProgressLogger

    Raises
    ------
    ProgressLoggerNotFound
        If an invalid progress logger type is passed.

    """
    try:
        kind = c.ProgressLoggerType(kind)
    except ValueError as e:
        valid = [x.value for x in c.ProgressLoggerType]
        msg = f"{kind} is not a valid progress logger type. Valid values are: {valid}."
        raise exceptions.ProgressLoggerNotFound(msg) from e

    if kind == c.ProgressLoggerType.TQDM:
        return TqdmProgressLogger(**kwargs)
    elif kind == c.ProgressLoggerType.LOGGING:
        return LoggingProgressLogger(**kwargs)
    else:
        return NullProgressLogger()
