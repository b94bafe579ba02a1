# shbundle/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    p = argparse.ArgumentParser(
        prog="shbundle",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "shbundle – inline every `source`d file of a bash script into a single file.\n"
            "Command substitutions followed by `# build: inline` are executed once at\n"
            "bundle time and their output is frozen into the result."
        ),
    )

    p.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        default="-",
        help="Script to bundle. Reads stdin when omitted or '-'.",
    )
    p.add_argument(
        "-d",
        "--dir",
        metavar="DIR",
        dest="dir",
        help=(
            "Root directory. Sourced files must live under it and are labelled\n"
            "relative to it, and FILE's own includes resolve against it.\n"
            "Defaults to FILE's directory, or the current directory when\n"
            "reading stdin."
        ),
    )
    p.add_argument(
        "-o",
        "--out",
        metavar="FILE",
        dest="out",
        help="Write the bundle to FILE (parent directories are created) instead of stdout.",
    )
    p.add_argument(
        "--executable",
        action="store_true",
        help="Mark the --out file as executable by its owner.",
    )
    p.add_argument(
        "--shell",
        metavar="SHELL",
        help=(
            "Shell used to run `# build: inline` commands (default: $SHBUNDLE_SHELL\n"
            "or bash). Each command runs in the directory its file's includes\n"
            "resolve against: the sourced file's own directory, or DIR / FILE's\n"
            "directory for the top-level script."
        ),
    )
    p.add_argument(
        "--strict-selectors",
        action="store_true",
        default=None,
        help="Require every sourced file to start with the same shebang.",
    )
    p.add_argument(
        "--report",
        action="store_true",
        help="Print a JSON report of the run to stderr.",
    )
    p.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines (also enabled by SHBUNDLE_JSON_LOGS=1).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return p
