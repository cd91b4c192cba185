"""
CLI subcommand and interactive menu tests.
"""
import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from course_advisor import cli
from course_advisor.ui import TerminalDisplay
from course_advisor.ui.terminal import ASCII_FRAME, PLAIN_PALETTE


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text("CSCI200, Intro to CS, CSCI101\nCSCI101, Programming Fundamentals\n")
    return path


@pytest.fixture
def display():
    return TerminalDisplay(stream=io.StringIO(), palette=PLAIN_PALETTE, frame=ASCII_FRAME)


def output(display) -> str:
    return display.stream.getvalue()


class TestSubcommands:

    def test_check_reports_load(self, catalog_file, display):
        assert cli.main(["check", str(catalog_file)], display=display) == 0
        assert f"Loaded 2 courses from {catalog_file.resolve()}" in output(display)
        assert "All prerequisites found in the loaded catalog." in output(display)

    def test_check_missing_file(self, tmp_path, display):
        missing = tmp_path / "missing.csv"
        assert cli.main(["check", str(missing)], display=display) == 1
        assert f"Unable to locate file: {missing}" in output(display)
        assert f"No courses were loaded from {missing}" in output(display)

    def test_list(self, catalog_file, display):
        assert cli.main(["list", str(catalog_file)], display=display) == 0
        text = output(display)
        assert text.index("CSCI101, Programming Fundamentals") < text.index("CSCI200, Intro to CS")

    def test_show_normalizes_lookup(self, catalog_file, display):
        assert cli.main(["show", str(catalog_file), "csci200"], display=display) == 0
        text = output(display)
        assert "CSCI200, Intro to CS" in text
        assert "  CSCI101 - Programming Fundamentals" in text
        assert "Searching for course" not in text

    def test_show_reports_cleanup(self, catalog_file, display):
        assert cli.main(["show", str(catalog_file), "csci200, Intro"], display=display) == 0
        assert "Searching for course: CSCI200" in output(display)

    def test_show_unknown_course(self, catalog_file, display):
        assert cli.main(["show", str(catalog_file), "MATH999"], display=display) == 1
        assert "Course not found: MATH999" in output(display)

    def test_show_invalid_course_number(self, catalog_file, display):
        assert cli.main(["show", str(catalog_file), "200"], display=display) == 1
        assert "Course number must start with letters and end with digits." in output(display)

    def test_command_is_required(self, display):
        with pytest.raises(SystemExit) as exc:
            cli.main([], display=display)
        assert exc.value.code == 2


class TestMenu:

    def run_menu(self, display, keystrokes: str) -> int:
        menu = cli.AdvisorMenu(display=display, input_stream=io.StringIO(keystrokes))
        return menu.run()

    def test_full_session(self, catalog_file, display):
        keys = f"2\n\n1\n{catalog_file}\n\n2\n\n3\ncsci200\n\n9\n"
        assert self.run_menu(display, keys) == 0

        text = output(display)
        assert "Course Advisor Menu" in text
        assert "Please load courses first (option 1)." in text
        assert "Courses have been loaded!" in text
        assert "| CSCI101, Programming Fundamentals |" in text
        assert "  CSCI101 - Programming Fundamentals" in text
        assert text.rstrip().endswith("Goodbye.")

    def test_trailing_comma_in_file_name(self, catalog_file, display):
        assert self.run_menu(display, f"1\n{catalog_file},\n\n9\n") == 0
        assert "Ignoring trailing comma in file name input." in output(display)
        assert "Courses have been loaded!" in output(display)

    def test_failed_load_keeps_menu_running(self, tmp_path, display):
        missing = tmp_path / "missing.csv"
        assert self.run_menu(display, f"1\n{missing}\n\n3\n\n9\n") == 0
        text = output(display)
        assert f"No courses were loaded from {missing}" in text
        assert "Please load courses first (option 1)." in text

    def test_invalid_option(self, display):
        assert self.run_menu(display, "7\n\n9\n") == 0
        assert "Error, please enter option 1, 2, 3, 4, or 9." in output(display)

    def test_input_closed(self, display):
        assert self.run_menu(display, "") == 0
        assert "Input stream closed. Exiting." in output(display)

    def test_dashboard_receives_only_the_path(self, catalog_file, display, monkeypatch):
        calls = []

        class Completed:
            returncode = 3

        def fake_run(command):
            calls.append(command)
            return Completed()

        monkeypatch.setattr(cli.subprocess, "run", fake_run)
        assert self.run_menu(display, f"1\n{catalog_file}\n\n4\n\n9\n") == 0

        assert calls == [
            [sys.executable, "-m", "course_advisor", "serve", str(catalog_file.resolve())]
        ]
        assert "Dashboard exited with code 3" in output(display)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
