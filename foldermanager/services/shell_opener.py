"""
ShellOpener — fire-and-forget file browser launches.
Never waits for the browser window. Failures are raised as ShellOpenFailure;
the caller logs and suppresses them.
"""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from foldermanager.core.exceptions import ShellOpenFailure
from foldermanager.utils import paths

_log = logging.getLogger("foldermanager.services.shell_opener")


def _launcher() -> list[str] | None:
    """Command prefix for the platform file browser. None means os.startfile."""
    if sys.platform.startswith("win"):
        return None
    if sys.platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class ShellOpener:

    def open_path(self, path: Path | str) -> None:
        target = str(path)
        try:
            cmd = _launcher()
            if cmd is None:
                os.startfile(target)  # type: ignore[attr-defined]
            else:
                subprocess.Popen(
                    cmd + [target],
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
        except OSError as exc:
            raise ShellOpenFailure(target, exc) from exc
        _log.info("opened in file browser: %s", target)

    def open_downloads_folder(self) -> None:
        try:
            downloads = paths.downloads_dir()
        except Exception as exc:
            raise ShellOpenFailure("Downloads folder", exc) from exc
        self.open_path(downloads)


class NullOpener(ShellOpener):
    """Opens nothing. Used with --no-open."""

    def open_path(self, path: Path | str) -> None:
        _log.info("open skipped: %s", path)

    def open_downloads_folder(self) -> None:
        _log.info("open skipped: Downloads folder")
