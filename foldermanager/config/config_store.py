"""
ConfigStore — the persisted base directory.
Stored as a single line in <user-local-appdata>/FolderManager/config.txt.
Exactly one value. The file is never deleted by this program.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from foldermanager.core.exceptions import ConfigReadError, ConfigWriteError
from foldermanager.services.confirm import Prompter
from foldermanager.utils import paths

_log = logging.getLogger("foldermanager.config.config_store")


class ConfigStore:
    """
    Reads the base directory, or asks for one on first run and saves it.
    config_path and home are injectable; both default to the platform locations.
    """

    def __init__(
        self,
        prompter: Prompter,
        config_path: Optional[Path] = None,
        home: Optional[Path] = None,
    ) -> None:
        self._prompter = prompter
        self._config_path = config_path
        self._home = home

    @property
    def config_path(self) -> Path:
        if self._config_path is None:
            self._config_path = paths.config_file_path()
        return self._config_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_or_initialize(self) -> str:
        """Return the stored base directory, prompting for one if none is stored."""
        self._ensure_dir()
        base = self.load()
        if base is not None:
            return base

        suggested = str(paths.default_base_dir(self._home))
        self._prompter.say("Config file not found.")
        base = self._prompter.confirm(
            suggested,
            first_display="Suggested default base directory: {}",
            display="Base directory: {}",
            question="Use this as your base directory? (y/n): ",
            replace_prompt="Enter your preferred base directory: ",
            validate=bool,
        )
        self.save(base)
        self._prompter.say("Saved base directory to config file.")
        return base

    def load(self) -> Optional[str]:
        """
        Return the first line of the config file without its terminator.
        Returns None if the file does not exist.

        Raises:
            ConfigReadError: if the file exists but cannot be read or is empty.
        """
        path = self.config_path
        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                first = fh.readline()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(path, exc) from exc

        base = first.rstrip("\r\n")
        if not base:
            raise ConfigReadError(path, "first line is empty")
        _log.info("base directory loaded from %s", path)
        return base

    def save(self, base_path: str) -> None:
        """
        Write base_path plus a newline, replacing any previous content.

        Raises:
            ConfigWriteError: if the file cannot be written.
        """
        self._ensure_dir()
        path = self.config_path
        try:
            with path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(base_path + "\n")
        except OSError as exc:
            raise ConfigWriteError(path, exc) from exc
        _log.info("base directory saved to %s", path)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _ensure_dir(self) -> None:
        parent = self.config_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigWriteError(self.config_path, exc) from exc
