# tests/unit/services/test_shell_opener.py
import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock
from foldermanager.core.exceptions import ShellOpenFailure
from foldermanager.services.shell_opener import NullOpener, ShellOpener

_MOD = "foldermanager.services.shell_opener"


class TestOpenPath(unittest.TestCase):

    def test_linux_uses_xdg_open(self):
        with mock.patch(f"{_MOD}.sys.platform", "linux"), \
             mock.patch(f"{_MOD}.subprocess.Popen") as popen:
            ShellOpener().open_path(Path("/tmp/x"))
        args, kwargs = popen.call_args
        self.assertEqual(args[0], ["xdg-open", str(Path("/tmp/x"))])
        self.assertIs(kwargs["stdout"], subprocess.DEVNULL)

    def test_macos_uses_open(self):
        with mock.patch(f"{_MOD}.sys.platform", "darwin"), \
             mock.patch(f"{_MOD}.subprocess.Popen") as popen:
            ShellOpener().open_path("/Users/a/x")
        self.assertEqual(popen.call_args[0][0], ["open", "/Users/a/x"])

    def test_does_not_wait(self):
        with mock.patch(f"{_MOD}.sys.platform", "linux"), \
             mock.patch(f"{_MOD}.subprocess.Popen") as popen:
            ShellOpener().open_path("/x")
        popen.return_value.wait.assert_not_called()

    def test_missing_launcher_raises_failure(self):
        with mock.patch(f"{_MOD}.sys.platform", "linux"), \
             mock.patch(f"{_MOD}.subprocess.Popen",
                        side_effect=FileNotFoundError("xdg-open")):
            with self.assertNoLogs("foldermanager", level="WARNING"), \
                 self.assertRaises(ShellOpenFailure) as ctx:
                ShellOpener().open_path("/x")
        self.assertIn("/x", str(ctx.exception))


class TestOpenDownloads(unittest.TestCase):

    def test_opens_resolved_folder(self):
        tmp = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, tmp, ignore_errors=True)
        opener = ShellOpener()
        with mock.patch("platformdirs.user_downloads_path", return_value=tmp), \
             mock.patch.object(opener, "open_path") as open_path:
            opener.open_downloads_folder()
        open_path.assert_called_once_with(tmp)

    def test_missing_folder_raises_failure(self):
        opener = ShellOpener()
        missing = Path(tempfile.gettempdir()) / "definitely-not-here-9f3a1c"
        with mock.patch("platformdirs.user_downloads_path", return_value=missing), \
             mock.patch.object(opener, "open_path") as open_path:
            with self.assertRaises(ShellOpenFailure):
                opener.open_downloads_folder()
        open_path.assert_not_called()

    def test_resolution_error_raises_failure(self):
        with mock.patch(f"{_MOD}.paths.downloads_dir", side_effect=RuntimeError("no api")):
            with self.assertRaises(ShellOpenFailure) as ctx:
                ShellOpener().open_downloads_folder()
        self.assertIn("Downloads", str(ctx.exception))


class TestNullOpener(unittest.TestCase):

    def test_opens_nothing(self):
        with mock.patch(f"{_MOD}.subprocess.Popen") as popen:
            NullOpener().open_path("/x")
            NullOpener().open_downloads_folder()
        popen.assert_not_called()


if __name__ == "__main__":
    unittest.main()
