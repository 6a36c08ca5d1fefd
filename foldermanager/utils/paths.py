# foldermanager/utils/paths.py
"""
Platform path resolution.
Every location is a pure function of the platform directories reported by
platformdirs plus a fixed suffix. No module-level state.
"""
from pathlib import Path

import platformdirs

from foldermanager.core.constants import APP_NAME, CONFIG_FILE_NAME, DEFAULT_BASE_SUBDIR
from foldermanager.core.exceptions import EnvironmentResolutionError


def home_dir() -> Path:
    """
    Return the user's home directory.

    Raises:
        EnvironmentResolutionError: if neither the environment nor the
            password database can supply one.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise EnvironmentResolutionError("user home directory", exc) from exc


def config_dir() -> Path:
    """<user-local-appdata>/FolderManager (e.g. %LOCALAPPDATA%\\FolderManager)."""
    try:
        return platformdirs.user_data_path(APP_NAME, appauthor=False, roaming=False)
    except (RuntimeError, KeyError, OSError) as exc:
        raise EnvironmentResolutionError("local application data directory", exc) from exc


def config_file_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def default_base_dir(home: Path | None = None) -> Path:
    """Suggested base directory on first run: <home>/Projects."""
    return (home if home is not None else home_dir()) / DEFAULT_BASE_SUBDIR


def downloads_dir() -> Path:
    """
    Resolve the Downloads special folder.
    Raises OSError if it cannot be resolved or does not exist.
    """
    path = platformdirs.user_downloads_path()
    if not path.is_dir():
        raise FileNotFoundError(f"Downloads folder not found: {path}")
    return path
