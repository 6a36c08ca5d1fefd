# foldermanager/__main__.py
"""Entry point for python -m foldermanager."""
import sys

from foldermanager.cli import main

sys.exit(main())
