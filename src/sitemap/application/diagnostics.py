from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, TypeVar

from src.config.logger_config import logger

T = TypeVar("T")


@dataclass
class DiagnosticsContext:
    """
    Verbosity switch for advisory messages, passed to whoever emits them.

    Not thread-safe: the flag is one mutable slot shared by every holder.
    """

    verbose: bool = False
    echo: Callable[[str], None] = field(default=print, repr=False)

    @contextmanager
    def scoped(self, flag: bool) -> Iterator[DiagnosticsContext]:
        previous, self.verbose = self.verbose, flag
        try:
            yield self
        finally:
            self.verbose = previous

    def emit(self, message: str) -> None:
        logger.debug("diagnostic (verbose={}): {}", self.verbose, message)
        if self.verbose:
            self.echo(message)


def with_warnings(context: DiagnosticsContext, flag: bool, body: Callable[[], T]) -> T:
    """Run ``body`` with ``context.verbose`` set to ``flag``, restoring it afterwards."""
    with context.scoped(flag):
        return body()
