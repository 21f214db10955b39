"""
Opt-in logging for the patch engine.

Entry points take ``logger=None, log=False`` and call ``resolve_logger`` once;
the result is handed down to helpers so one patch run writes to one logger.
Nothing is printed and nothing is emitted unless the caller asks for it.
"""
from __future__ import annotations

import logging

DEFAULT_LOGGER_NAME = "clipdiff"


class NoopLogger:
    """Stands in for a logger when logging was not requested."""

    def _drop(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        return None

    debug = info = warning = error = exception = critical = _drop


def resolve_logger(
    logger: logging.Logger | NoopLogger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return `logger` when given; a named stdlib logger set to `level` when `enabled`;
    otherwise a NoopLogger. Named loggers propagate to the root so host handlers
    (and pytest's caplog) see the records.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or DEFAULT_LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = True
    return lg
