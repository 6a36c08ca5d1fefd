# tests/smoke/test_imports.py
"""Smoke test: all packages import cleanly."""
import unittest


class TestImports(unittest.TestCase):

    def test_core_constants(self):
        from foldermanager.core import constants
        self.assertEqual(constants.APP_NAME, "FolderManager")

    def test_core_exceptions(self):
        from foldermanager.core import exceptions
        self.assertTrue(issubclass(exceptions.ConfigReadError, exceptions.FolderManagerError))

    def test_utils_sanitize(self):
        from foldermanager.utils import sanitize
        self.assertTrue(callable(sanitize.sanitize))

    def test_config_store(self):
        from foldermanager.config import ConfigStore
        self.assertTrue(callable(ConfigStore.load_or_initialize))

    def test_services(self):
        from foldermanager.services import confirm, provisioner, shell_opener
        self.assertIsNotNone(confirm.Prompter)
        self.assertIsNotNone(provisioner.FolderProvisioner)
        self.assertIsNotNone(shell_opener.ShellOpener)

    def test_cli(self):
        from foldermanager import cli
        self.assertTrue(callable(cli.main))


if __name__ == "__main__":
    unittest.main()
