from __future__ import annotations

"""Public surface for shbundle.core: data models, run context, report and protocols."""

from shbundle.core.context import BundleContext
from shbundle.core.interfaces import (
    CommandResult,
    CommandRunnerProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PathResolverProtocol,
)
from shbundle.core.models import Document, Edit
from shbundle.core.report import BundleReport

__all__ = [
    "BundleContext",
    "BundleReport",
    "CommandResult",
    "CommandRunnerProtocol",
    "Document",
    "Edit",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "PathResolverProtocol",
]
