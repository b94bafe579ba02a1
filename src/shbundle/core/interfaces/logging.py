from __future__ import annotations

"""Logger shapes the bundling components depend on.

Components take any object with the levelled methods below, so a
`logging.Logger`, a `logging.LoggerAdapter` or a test double can be passed
wherever a `logger=` argument is accepted.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Levelled logging calls issued while bundling.

    `debug` carries IO traces, `info` the per-run summary, `warning` the
    stderr of inline commands and `error` the CLI's final failure message.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out loggers scoped under the ``shbundle`` namespace."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
