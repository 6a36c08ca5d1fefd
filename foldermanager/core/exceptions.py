# foldermanager/core/exceptions.py
"""
All custom exceptions for FolderManager.
Every error except ShellOpenFailure is fatal: the CLI reports it once
and exits non-zero. Messages always carry the operation and the path.
"""
from __future__ import annotations


class FolderManagerError(Exception):
    """Base exception for all FolderManager errors."""


class UsageError(FolderManagerError):
    """Wrong command-line arguments."""


class EnvironmentResolutionError(FolderManagerError):
    """User home / profile directory could not be determined."""
    def __init__(self, what: str = "user home directory", reason: object = None):
        msg = f"could not determine {what}"
        if reason is not None:
            msg += f": {reason}"
        super().__init__(msg)


class InputClosedError(FolderManagerError):
    """Standard input ended while waiting for a confirmation."""
    def __init__(self, msg="input closed while waiting for a response"):
        super().__init__(msg)


# --- Config ---

class ConfigError(FolderManagerError):
    """Base for config file errors."""


class ConfigReadError(ConfigError):
    """Config file exists but could not be read."""
    def __init__(self, path, reason: object):
        self.path = path
        super().__init__(f"could not read config file {str(path)!r}: {reason}")


class ConfigWriteError(ConfigError):
    """Config file (or its directory) could not be written."""
    def __init__(self, path, reason: object):
        self.path = path
        super().__init__(f"could not write config file {str(path)!r}: {reason}")


# --- Provisioning ---

class ProvisionError(FolderManagerError):
    """Base for target directory errors."""


class PathConflictError(ProvisionError):
    """Target path exists but is not a directory."""
    def __init__(self, path):
        self.path = path
        super().__init__(f"path exists and is not a directory: {str(path)!r}")


class DirectoryCreateError(ProvisionError):
    """Target directory could not be created."""
    def __init__(self, path, reason: object):
        self.path = path
        super().__init__(f"could not create directory {str(path)!r}: {reason}")


class WorkingDirectoryError(ProvisionError):
    """Could not change the working directory to the target."""
    def __init__(self, path, reason: object):
        self.path = path
        super().__init__(f"could not change directory to {str(path)!r}: {reason}")


# --- Shell ---

class ShellOpenFailure(FolderManagerError):
    """File browser could not be launched. Never fatal."""
    def __init__(self, target: str, reason: object):
        self.target = target
        super().__init__(f"could not open {target} in file browser: {reason}")
