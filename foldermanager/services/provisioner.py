"""
FolderProvisioner — resolves, creates (if needed) and switches into a project folder.
Single instance per run. Prompts go through the Prompter; the base directory
comes from the ConfigStore. Opening file browser windows is the caller's job.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from foldermanager.config.config_store import ConfigStore
from foldermanager.core.exceptions import (
    DirectoryCreateError,
    PathConflictError,
    WorkingDirectoryError,
)
from foldermanager.services.confirm import Prompter
from foldermanager.utils.sanitize import is_usable_name, sanitize

_log = logging.getLogger("foldermanager.services.provisioner")


@dataclass(frozen=True)
class ProvisionResult:
    path: Path
    created: bool


class FolderProvisioner:
    """
    Orchestrates name confirmation, config lookup and directory creation.
    parents=True creates a missing base directory as well; parents=False
    creates only the final folder.
    """

    def __init__(
        self,
        prompter: Prompter,
        config_store: ConfigStore,
        parents: bool = True,
    ) -> None:
        self._prompter = prompter
        self._config = config_store
        self._parents = parents

    def provision(self, raw_name: str) -> ProvisionResult:
        name = self.confirm_name(raw_name)
        base = self._config.load_or_initialize()
        final = Path(base) / name

        created = self.ensure_directory(final)
        self.enter(final)
        return ProvisionResult(path=final, created=created)

    def confirm_name(self, raw_name: str) -> str:
        """Sanitize raw_name and loop until the user accepts a name."""
        return self._prompter.confirm(
            raw_name,
            display='Sanitized folder name: "{}"',
            question="Do you want to use this name? (y/n): ",
            replace_prompt="Enter a new folder name: ",
            transform=sanitize,
            validate=is_usable_name,
        )

    def ensure_directory(self, path: Path) -> bool:
        """
        Create path if missing. Returns True if it was created.

        Raises:
            PathConflictError: if path exists and is not a directory.
            DirectoryCreateError: on any OS-level failure while creating.
        """
        if path.is_dir():
            self._prompter.say(f"Directory already exists: {path}")
            _log.info("directory reused: %s", path)
            return False
        if path.exists():
            raise PathConflictError(path)

        try:
            path.mkdir(parents=self._parents, exist_ok=False)
        except OSError as exc:
            raise DirectoryCreateError(path, exc) from exc

        self._prompter.say(f"Directory created: {path}")
        _log.info("directory created: %s (parents=%s)", path, self._parents)
        return True

    def enter(self, path: Path) -> None:
        """Change the process working directory to path."""
        try:
            os.chdir(path)
        except OSError as exc:
            raise WorkingDirectoryError(path, exc) from exc
        _log.info("working directory changed to %s", path)
