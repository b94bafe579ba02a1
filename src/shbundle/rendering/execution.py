from __future__ import annotations

"""Build-time execution of inline command substitutions.

Commands run synchronously through a shell with the bundler's own
privileges, without timeout. Their stdout is frozen into the bundle as a
base64 literal decoded when the bundled script runs.
"""

import base64
import subprocess
from pathlib import Path
from typing import Optional

from shbundle.constants import DEFAULT_SHELL
from shbundle.core.interfaces.execution import CommandResult, CommandRunnerProtocol
from shbundle.core.interfaces.logging import LoggerLikeProtocol
from shbundle.errors import SubcommandFailureError
from shbundle.logging.helpers import get_logger, trace_io


class ShellCommandRunner(CommandRunnerProtocol):
    """Run commands as `<shell> -c <command>` and capture their output."""

    def __init__(self, *, shell: str = DEFAULT_SHELL, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._shell = shell
        self._log = logger or get_logger('exec')

    @property
    def shell(self) -> str:
        return self._shell

    def run(self, command: str, *, cwd: Optional[Path] = None) -> CommandResult:
        trace_io(self._log, 'exec', shell=self._shell, command=command, cwd=str(cwd) if cwd else None)
        try:
            proc = subprocess.run(
                [self._shell, '-c', command],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                cwd=str(cwd) if cwd is not None else None,
                check=False,
            )
        except OSError as exc:
            raise SubcommandFailureError(command, None, str(exc)) from exc
        return CommandResult(
            command=command,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )


def substitution_body(text: str) -> str:
    """Return the command inside a `$(...)` or backtick substitution."""
    if text.startswith('$(') and text.endswith(')'):
        return text[2:-1]
    if text.startswith('`') and text.endswith('`') and len(text) >= 2:
        return text[1:-1]
    raise ValueError(f'not a command substitution: {text!r}')


def encode_inline_output(stdout: bytes) -> str:
    """Return a substitution that reproduces *stdout* byte-for-byte at run time."""
    encoded = base64.b64encode(stdout).decode('ascii')
    return f"$(echo '{encoded}' | base64 -d)"


def run_inline(
    runner: CommandRunnerProtocol,
    command: str,
    *,
    cwd: Optional[Path] = None,
    logger: Optional[LoggerLikeProtocol] = None,
) -> CommandResult:
    """Run *command* for inlining; non-zero exit is fatal, stderr is only reported."""
    log = logger or get_logger('exec')
    result = runner.run(command, cwd=cwd)
    if result.returncode != 0:
        raise SubcommandFailureError(command, result.returncode)
    if result.stderr:
        log.warning(
            "From executed command substitution's stderr: %s",
            result.stderr.decode('utf-8', errors='replace'),
        )
    return result
