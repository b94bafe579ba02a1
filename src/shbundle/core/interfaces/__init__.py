from .execution import CommandResult, CommandRunnerProtocol
from .fs import PathResolverProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol

__all__ = [
    'CommandResult',
    'CommandRunnerProtocol',
    'PathResolverProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
