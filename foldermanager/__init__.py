# foldermanager — create or reuse a project folder under a configured base directory.
from foldermanager.core.constants import APP_VERSION

__version__ = APP_VERSION
