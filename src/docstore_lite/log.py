"""Pluggable logger for the store.

The store talks to a Logger: anything with fatal/error/warn/info/debug/
trace methods taking a printf-style message plus args. ConsoleLogger is
the default and simply forwards to a stdlib logger with a stderr handler.

    store = open_store("./data", Options(logger=ConsoleLogger(logging.DEBUG)))

Logging is observational only. fatal() logs at CRITICAL and returns; it
never exits the process.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Protocol, runtime_checkable

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"


@runtime_checkable
class Logger(Protocol):
    """The capability set the store needs from a logger."""

    def fatal(self, msg: str, *args: Any) -> None: ...
    def error(self, msg: str, *args: Any) -> None: ...
    def warn(self, msg: str, *args: Any) -> None: ...
    def info(self, msg: str, *args: Any) -> None: ...
    def debug(self, msg: str, *args: Any) -> None: ...
    def trace(self, msg: str, *args: Any) -> None: ...


class ConsoleLogger:
    """Logger backed by the stdlib logging module.

    Args:
        level: minimum level to emit (default INFO).
        name: logger name shown in each line (default "docstore_lite").
        stream: where the handler writes (default sys.stderr).
    """

    def __init__(
        self,
        level: int = logging.INFO,
        name: str = "docstore_lite",
        stream: Any = None,
    ) -> None:
        # A private logger per adapter: two stores with different levels or
        # streams never reset each other.
        self._logger = logging.Logger(name, level)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        self._logger.addHandler(handler)

    @property
    def level(self) -> int:
        return self._logger.level

    def fatal(self, msg: str, *args: Any) -> None:
        self._logger.critical(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._logger.error(msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._logger.warning(msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._logger.info(msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self._logger.debug(msg, *args)

    def trace(self, msg: str, *args: Any) -> None:
        self._logger.log(TRACE, msg, *args)
