"""
Command-line entry point.
Parses arguments, runs provisioning, then opens the target folder and
the Downloads folder. Maps FolderManagerError to exit codes; nothing
else catches them.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from foldermanager.config.config_store import ConfigStore
from foldermanager.core.constants import (
    APP_NAME,
    APP_VERSION,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
)
from foldermanager.core.exceptions import FolderManagerError, ShellOpenFailure, UsageError
from foldermanager.services.confirm import Prompter
from foldermanager.services.provisioner import FolderProvisioner
from foldermanager.services.shell_opener import NullOpener, ShellOpener

_log = logging.getLogger("foldermanager.cli")


class _Parser(argparse.ArgumentParser):
    """Raises UsageError instead of exiting, so main() owns the exit code."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="foldermanager",
        description=(
            "Create (or reuse) a project folder under the configured base "
            "directory, change into it and open it with the Downloads folder."
        ),
    )
    parser.add_argument(
        "folder_name",
        nargs="?",
        help="Folder name. Sanitized and confirmed before use.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file to use instead of the per-user default.",
    )
    parser.add_argument(
        "--no-parents",
        action="store_true",
        help="Create only the final folder; fail if the base directory is missing.",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Do not open file browser windows.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    return parser


def parse_arguments(
    parser: argparse.ArgumentParser,
    argv: Optional[Sequence[str]] = None,
) -> argparse.Namespace:
    """
    Parse argv, requiring exactly one folder name.
    A lone leftover token such as "-draft" is taken as the folder name
    rather than rejected as an unknown option.
    """
    args, extras = parser.parse_known_args(argv)
    if args.folder_name is None and len(extras) == 1:
        args.folder_name = extras.pop()
    if extras:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    if args.folder_name is None:
        parser.error("the following arguments are required: folder_name")
    return args


def run(
    args: argparse.Namespace,
    prompter: Prompter,
    opener: ShellOpener,
    home: Optional[Path] = None,
) -> Path:
    """Provision the folder, then open it and the Downloads folder."""
    store = ConfigStore(prompter, config_path=args.config, home=home)
    provisioner = FolderProvisioner(prompter, store, parents=not args.no_parents)
    result = provisioner.provision(args.folder_name)

    try:
        opener.open_path(result.path)
    except ShellOpenFailure as exc:
        _log.warning("%s", exc)
    try:
        opener.open_downloads_folder()
    except ShellOpenFailure as exc:
        _log.warning("%s", exc)
    return result.path


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    opener: Optional[ShellOpener] = None,
    home: Optional[Path] = None,
) -> int:
    err = err if err is not None else sys.stderr
    parser = build_parser()
    try:
        args = parse_arguments(parser, argv)
    except UsageError as exc:
        parser.print_usage(err)
        print(f"[ERROR] {exc}", file=err)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if opener is None:
        opener = NullOpener() if args.no_open else ShellOpener()
    prompter = Prompter(input_fn=input_fn, out=out)

    try:
        run(args, prompter, opener, home=home)
    except KeyboardInterrupt:
        print("", file=err)
        return EXIT_INTERRUPTED
    except FolderManagerError as exc:
        _log.info("fatal: %s", type(exc).__name__)
        print(f"[ERROR] {exc}", file=err)
        return EXIT_FAILURE
    return EXIT_OK
