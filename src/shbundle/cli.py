from __future__ import annotations

import logging
import os
import stat
import sys
from pathlib import Path
from typing import NoReturn, Sequence, Tuple

from shbundle.bundler import Bundler
from shbundle.config import BundlerConfig
from shbundle.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from shbundle.errors import BundleError, ReadError
from shbundle.logging.factory import DefaultLoggerFactory
from shbundle.logging.helpers import get_logger
from shbundle.parsing.parser import _build_parser


logger: LoggerLikeProtocol = get_logger('shbundle')


def _configure_logging(enable_json: bool, *, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    level = logging.DEBUG if verbose else logging.INFO
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('shbundle')
    setattr(_configure_logging, '_configured_mode', mode)


def _read_input(file_arg: str, dir_arg: str | None) -> Tuple[str, Path, Path | None]:
    """Return (source text, root directory, origin file or None for stdin)."""
    if file_arg and file_arg != '-':
        src = Path(file_arg)
        try:
            text = src.read_text(encoding='utf-8')
        except UnicodeDecodeError as exc:
            raise ReadError(src, str(exc)) from exc
        root = Path(dir_arg) if dir_arg else src.resolve().parent
        return text, root, src
    try:
        text = sys.stdin.read()
    except UnicodeDecodeError as exc:
        raise ReadError(Path('<stdin>'), str(exc)) from exc
    root = Path(dir_arg) if dir_arg else Path.cwd()
    return text, root, None


def _write_output(out: str, out_arg: str | None, *, executable: bool) -> None:
    if not out_arg:
        print(out)
        return
    dest = Path(out_arg)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(out, encoding='utf-8')
    if executable:
        dest.chmod(dest.stat().st_mode | stat.S_IXUSR)
    logger.info('✔ wrote %s', dest)


class ShBundle:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with an argv-like sequence and return the bundled text."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SHBUNDLE_JSON_LOGS') == '1'
        _configure_logging(json_logs, verbose=ns.verbose)

        text, root, origin = _read_input(ns.file, ns.dir)
        # -d sets both the root and the directory top-level includes resolve against.
        cwd = origin.resolve().parent if origin is not None and not ns.dir else root

        config = BundlerConfig.from_env(root).with_overrides(
            shell=ns.shell,
            strict_selectors=ns.strict_selectors,
        )
        bundler = Bundler(config)
        out = bundler.bundle(text, cwd, origin=origin)

        _write_output(out, ns.out, executable=ns.executable)
        if ns.report and bundler.report is not None:
            print(bundler.report.to_json(), file=sys.stderr)
        return out


def main() -> NoReturn:
    """Entry point for the `shbundle` console script."""
    try:
        ShBundle.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except (BundleError, OSError) as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('%s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
