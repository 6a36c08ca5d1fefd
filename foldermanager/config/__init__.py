# foldermanager/config — persisted base directory.
from foldermanager.config.config_store import ConfigStore

__all__ = ["ConfigStore"]
