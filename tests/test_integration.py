import unittest
from unittest.mock import patch
from importlib import metadata
from pathlib import Path
import os
import sys
import tempfile
import shutil

# Add src to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from outpane.main import main, DEFAULT_SURFACE
from outpane.util.output import Printer
from outpane.viewer import Viewer

FAKE_COMPILER = '''
import sys
source = open(sys.argv[-1]).read()
flags = sys.argv[1:-1]
if flags:
    print("flags: " + " ".join(flags))
if "fail" in source:
    sys.stderr.write("error: unexpected token\\n")
    sys.exit(2)
print("-- bytecode --")
for i, line in enumerate(source.splitlines()):
    print("[%d] %s" % (i + 1, line))
'''

class TestIntegration(unittest.TestCase):
    def setUp(self):
        self.test_dir = Path(tempfile.mkdtemp())
        self.cwd = os.getcwd()
        os.chdir(self.test_dir)
        (self.test_dir / ".git").mkdir()

        Path("fake_potion.py").write_text(FAKE_COMPILER)
        Path("Outpane.toml").write_text(
            "[command]\n"
            f"path = '{sys.executable}'\n"
            "[command.args]\n"
            "show = ['fake_potion.py']\n"
            "run = ['fake_potion.py']\n"
        )
        Path("hello.pn").write_text("1 + 1\n'hi' say\n")
        Path("broken.pn").write_text("fail (\n")
        self.viewer = Viewer()

    def tearDown(self):
        os.chdir(self.cwd)
        shutil.rmtree(self.test_dir)

    def test_show_renders_surface(self):
        code = main(["hello.pn", "--unsafe"], viewer=self.viewer)
        self.assertEqual(code, 0)
        surface = self.viewer.get(DEFAULT_SURFACE)
        self.assertEqual(surface.lines, ["-- bytecode --", "[1] 1 + 1", "[2] 'hi' say"])
        self.assertIsNone(surface.status)

    def test_custom_surface_name(self):
        main(["hello.pn", "--unsafe", "-s", "__Other__"], viewer=self.viewer)
        self.assertIsNotNone(self.viewer.get("__Other__"))
        self.assertIsNone(self.viewer.get(DEFAULT_SURFACE))

    def test_failed_compile_shows_output_and_status(self):
        code = main(["broken.pn", "--unsafe"], viewer=self.viewer)
        self.assertEqual(code, 2)
        surface = self.viewer.get(DEFAULT_SURFACE)
        self.assertEqual(surface.lines, ["error: unexpected token"])
        self.assertIsNotNone(surface.status)

    def test_second_run_replaces_content(self):
        main(["broken.pn", "--unsafe"], viewer=self.viewer)
        first = self.viewer.get(DEFAULT_SURFACE)
        main(["hello.pn", "--unsafe"], viewer=self.viewer)
        second = self.viewer.get(DEFAULT_SURFACE)
        self.assertIs(first, second)
        self.assertEqual(second.lines[0], "-- bytecode --")
        self.assertIsNone(second.status)

    def test_command_not_found(self):
        code = main(["hello.pn", "--unsafe", "-c", "/nonexistent/potion"], viewer=self.viewer)
        self.assertEqual(code, 1)
        self.assertIsNone(self.viewer.get(DEFAULT_SURFACE))

    def test_dry_run(self):
        code = main(["hello.pn", "--unsafe", "--dry-run"], viewer=self.viewer)
        self.assertEqual(code, 0)
        self.assertIsNone(self.viewer.get(DEFAULT_SURFACE))

    def test_run_mode(self):
        self.assertEqual(main(["hello.pn", "--unsafe", "-r"], viewer=self.viewer), 0)
        self.assertEqual(main(["broken.pn", "--unsafe", "-r"], viewer=self.viewer), 1)
        self.assertIsNone(self.viewer.get(DEFAULT_SURFACE))

    def test_extra_args_starting_with_dash(self):
        code = main(["hello.pn", "--unsafe", "-a", "-V --trace"], viewer=self.viewer)
        self.assertEqual(code, 0)
        self.assertEqual(self.viewer.get(DEFAULT_SURFACE).lines[0], "flags: -V --trace")

    @patch("outpane.main.SecurityManager")
    @patch("outpane.util.version.fp", Path(tempfile.gettempdir()) / "no_such_pyproject.toml")
    @patch("outpane.util.version.metadata.version", side_effect=metadata.PackageNotFoundError("outpane"))
    def test_normal_run_does_not_read_version(self, mock_metadata, mock_security):
        with patch.object(Printer, "warning") as mock_warning:
            code = main(["hello.pn"], viewer=self.viewer)
        self.assertEqual(code, 0)
        mock_warning.assert_not_called()
        mock_metadata.assert_not_called()

    @patch("outpane.util.version.fp", Path(tempfile.gettempdir()) / "no_such_pyproject.toml")
    @patch("outpane.util.version.metadata.version", return_value="1.2.3")
    def test_version_from_installed_metadata(self, mock_metadata):
        with patch.object(Printer, "info") as mock_info:
            self.assertEqual(main(["--version"], viewer=self.viewer), 0)
        mock_info.assert_called_once_with("Currently: 1.2.3")
        self.assertIsNone(self.viewer.get(DEFAULT_SURFACE))

    @patch("builtins.input", side_effect=EOFError)
    def test_no_file_and_no_input(self, mock_input):
        self.assertEqual(main(["--unsafe"], viewer=self.viewer), 1)

    @patch("builtins.input", return_value="hello.pn")
    def test_file_from_prompt(self, mock_input):
        self.assertEqual(main(["--unsafe"], viewer=self.viewer), 0)
        self.assertIsNotNone(self.viewer.get(DEFAULT_SURFACE))

if __name__ == '__main__':
    unittest.main()
