"""
Command-line interface for the course advisor.

Usage:
    course-advisor list courses.csv
    course-advisor show courses.csv CSCI200
    course-advisor check courses.csv
    course-advisor menu [courses.csv]
    course-advisor serve [courses.csv] [--host HOST] [--port PORT]

File names are searched for in the working directory and its parents.
"""
import argparse
import logging
import subprocess
import sys
from typing import Optional, TextIO

from . import config
from .catalog import CourseDirectory, normalize_course_id_input, resolve_course_file
from .domain import LoadResult
from .ui import StyledLine, TerminalDisplay

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1


def load_catalog_file(
    directory: CourseDirectory, file_name: str, display: TerminalDisplay
) -> LoadResult:
    """Resolve a file name, load it into the directory and print the report."""
    resolved = resolve_course_file(file_name)
    result = directory.load(str(resolved) if resolved else file_name)
    display.show_load_result(result, requested=file_name)
    return result


def lookup_course(directory: CourseDirectory, text: str, display: TerminalDisplay) -> bool:
    """Normalize a typed course id and print the matching course."""
    normalized = normalize_course_id_input(text)
    if normalized is None:
        display.error("Course number must start with letters and end with digits.")
        return False

    if normalized.was_trimmed:
        display.info(f"Searching for course: {normalized.course_id}")

    course = directory.get(normalized.course_id)
    if course is None:
        display.error(f"Course not found: {normalized.course_id}")
        return False

    display.show_course(course, directory)
    return True


def launch_dashboard(catalog_path: Optional[str], display: TerminalDisplay) -> int:
    """
    Start the web dashboard as a separate process.

    Only the resolved catalog path is passed along; the dashboard loads its
    own copy of the catalog.
    """
    command = [sys.executable, "-m", "course_advisor", "serve"]
    if catalog_path:
        command.append(catalog_path)

    logger.info(f"[CLI] Launching dashboard: {command}")
    try:
        exit_code = subprocess.run(command).returncode
    except KeyboardInterrupt:
        return EXIT_OK

    if exit_code != 0:
        display.warn(f"Dashboard exited with code {exit_code}")
    return exit_code


# =============================================================================
# Interactive menu
# =============================================================================

MENU_ITEMS = [
    ("1", "Load the courses from the file"),
    ("2", "Print course list in alphanumeric order"),
    ("3", "Find a course by the course number"),
    ("4", "Launch web dashboard"),
    ("9", "Exit"),
]


class AdvisorMenu:
    """
    Interactive menu loop: load, list, look up, launch the dashboard, exit.

    Listing and lookup require a successful load first.
    """

    def __init__(
        self,
        display: Optional[TerminalDisplay] = None,
        input_stream: Optional[TextIO] = None,
        directory: Optional[CourseDirectory] = None,
    ):
        self.display = display or TerminalDisplay()
        self.input_stream = input_stream or sys.stdin
        self.directory = directory or CourseDirectory()
        self.current_path: Optional[str] = None

    def read_line(self, prompt: str) -> Optional[str]:
        """Prompt and read one line; None when input is closed."""
        self.display.stream.write(self.display.prompt(prompt))
        self.display.stream.flush()
        line = self.input_stream.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def wait_for_enter(self) -> None:
        self.read_line("Press Enter to continue...")

    def render_menu(self) -> None:
        palette = self.display.palette
        lines = [self.display.styled("Course Advisor Menu", palette.title)]
        lines.append(self.display.styled("", ""))
        for number, label in MENU_ITEMS:
            plain = f"{number}. {label}"
            lines.append(
                StyledLine(plain=plain, colored=f"{palette.number}{number}. {palette.text}{label}")
            )
        self.display.write(self.display.render_framed(lines))

    def handle_load(self) -> bool:
        """Returns False when input closes while asking for the file name."""
        file_name = self.read_line("Enter file name: ")
        if file_name is None:
            return False

        file_name = file_name.strip()
        if file_name.endswith(","):
            self.display.warn("Ignoring trailing comma in file name input.")
            file_name = file_name[:-1].strip()
        if not file_name:
            self.display.info(f"Using default catalog file: {config.DEFAULT_CATALOG_FILE}")
            file_name = config.DEFAULT_CATALOG_FILE

        result = load_catalog_file(self.directory, file_name, self.display)
        if result.ok:
            self.current_path = result.path
            self.display.success("Courses have been loaded!")
        return True

    def run(self) -> int:
        while True:
            self.render_menu()
            choice = self.read_line("Enter option: ")
            if choice is None:
                self.display.write()
                self.display.info("Input stream closed. Exiting.")
                return EXIT_OK

            choice = choice.strip()
            if choice == "1":
                if not self.handle_load():
                    self.display.write()
                    self.display.info("Input stream closed. Exiting.")
                    return EXIT_OK
            elif choice in ("2", "3") and not self.directory.is_loaded:
                self.display.warn("Please load courses first (option 1).")
            elif choice == "2":
                self.display.show_course_list(self.directory)
            elif choice == "3":
                text = self.read_line("Enter the course number: ")
                if text is not None:
                    lookup_course(self.directory, text, self.display)
            elif choice == "4":
                launch_dashboard(self.current_path, self.display)
            elif choice == "9":
                self.display.success("Goodbye.")
                return EXIT_OK
            else:
                self.display.error("Error, please enter option 1, 2, 3, 4, or 9.")

            self.wait_for_enter()


# =============================================================================
# Subcommands
# =============================================================================

def cmd_list(args, display: TerminalDisplay) -> int:
    directory = CourseDirectory()
    if not load_catalog_file(directory, args.file, display).ok:
        return EXIT_FAILED
    display.show_course_list(directory)
    return EXIT_OK


def cmd_show(args, display: TerminalDisplay) -> int:
    directory = CourseDirectory()
    if not load_catalog_file(directory, args.file, display).ok:
        return EXIT_FAILED
    display.write()
    return EXIT_OK if lookup_course(directory, args.course, display) else EXIT_FAILED


def cmd_check(args, display: TerminalDisplay) -> int:
    directory = CourseDirectory()
    return EXIT_OK if load_catalog_file(directory, args.file, display).ok else EXIT_FAILED


def cmd_menu(args, display: TerminalDisplay) -> int:
    menu = AdvisorMenu(display=display)
    if args.file:
        result = load_catalog_file(menu.directory, args.file, display)
        menu.current_path = result.path if result.ok else None
    return menu.run()


def cmd_serve(args, display: TerminalDisplay) -> int:
    import uvicorn

    from .web import create_app

    catalog_path = None
    if args.file:
        resolved = resolve_course_file(args.file)
        catalog_path = str(resolved) if resolved else args.file

    uvicorn.run(create_app(catalog_path), host=args.host, port=args.port)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="course-advisor",
        description="Load a course catalog and browse courses and prerequisites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Print every course in id order")
    list_parser.add_argument("file", help="Catalog file")
    list_parser.set_defaults(handler=cmd_list)

    show_parser = subparsers.add_parser("show", help="Print one course and its prerequisites")
    show_parser.add_argument("file", help="Catalog file")
    show_parser.add_argument("course", help="Course number, e.g. CSCI200")
    show_parser.set_defaults(handler=cmd_show)

    check_parser = subparsers.add_parser("check", help="Validate a catalog file")
    check_parser.add_argument("file", help="Catalog file")
    check_parser.set_defaults(handler=cmd_check)

    menu_parser = subparsers.add_parser("menu", help="Interactive menu")
    menu_parser.add_argument("file", nargs="?", default=None, help="Catalog file to load first")
    menu_parser.set_defaults(handler=cmd_menu)

    serve_parser = subparsers.add_parser("serve", help="Run the web dashboard")
    serve_parser.add_argument("file", nargs="?", default=None, help="Catalog file")
    serve_parser.add_argument("--host", default=config.WEB_HOST)
    serve_parser.add_argument("--port", type=int, default=config.WEB_PORT)
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None, display: Optional[TerminalDisplay] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)
    return args.handler(args, display or TerminalDisplay())


if __name__ == "__main__":
    sys.exit(main())
