from __future__ import annotations

from shbundle.bundler import Bundler
from shbundle.cli import ShBundle
from shbundle.config import BundlerConfig
from shbundle.constants import INLINE_MARKER, SECTION_FOOTER, SELECTOR_MARKER
from shbundle.core.models import Document, Edit
from shbundle.errors import (
    BundleError,
    CircularIncludeError,
    EditsOverlapError,
    IncludeOutsideRootError,
    ParseError,
    ReadError,
    SelectorConflictError,
    SelectorDuplicateError,
    SelectorMisplacedError,
    SelectorMissingError,
    SubcommandFailureError,
    UnresolvableIncludeError,
)
from shbundle.processing.edits import EditSet, apply_edits
from shbundle.rendering.execution import ShellCommandRunner

__version__ = '0.3.0'


def bundle(text: str, cwd, *, root_dir=None, origin=None) -> str:
    """Bundle *text* in a fresh run; *root_dir* defaults to *cwd*."""
    return Bundler(root_dir if root_dir is not None else cwd).bundle(text, cwd, origin=origin)


__all__ = [
    'Bundler',
    'BundlerConfig',
    'ShBundle',
    'Document',
    'Edit',
    'EditSet',
    'apply_edits',
    'bundle',
    'ShellCommandRunner',
    'INLINE_MARKER',
    'SECTION_FOOTER',
    'SELECTOR_MARKER',
    'BundleError',
    'CircularIncludeError',
    'EditsOverlapError',
    'IncludeOutsideRootError',
    'ParseError',
    'ReadError',
    'SelectorConflictError',
    'SelectorDuplicateError',
    'SelectorMisplacedError',
    'SelectorMissingError',
    'SubcommandFailureError',
    'UnresolvableIncludeError',
]
