"""
FolderManager — entry point.
Provisions a project folder, then opens it and the Downloads folder.
No business logic here.
"""
import sys

from foldermanager.cli import main

if __name__ == "__main__":
    sys.exit(main())
