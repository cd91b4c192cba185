"""
Terminal display for catalog load reports, course lists and course details.

Colours follow COURSE_ADVISOR_THEME (dark, light, plain) and are disabled
entirely when NO_COLOR is set. Borders follow COURSE_ADVISOR_FRAME (ascii,
unicode, none).
"""
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .. import config
from ..catalog import CourseDirectory
from ..domain import Course, LoadResult


@dataclass(frozen=True)
class Palette:
    """ANSI colour codes per UI element. Empty strings mean no colour."""
    border: str = ""
    title: str = ""
    number: str = ""
    text: str = ""
    prompt: str = ""
    success: str = ""
    warning: str = ""
    error: str = ""
    info: str = ""
    reset: str = ""


DARK_PALETTE = Palette(
    border="\x1b[95m",
    title="\x1b[97;1m",
    number="\x1b[93;1m",
    text="\x1b[97m",
    prompt="\x1b[96;1m",
    success="\x1b[92m",
    warning="\x1b[93m",
    error="\x1b[91m",
    info="\x1b[94m",
    reset="\x1b[0m",
)

LIGHT_PALETTE = Palette(
    border="\x1b[35m",
    title="\x1b[30;1m",
    number="\x1b[34;1m",
    text="\x1b[30m",
    prompt="\x1b[36;1m",
    success="\x1b[32m",
    warning="\x1b[33m",
    error="\x1b[31m",
    info="\x1b[35m",
    reset="\x1b[0m",
)

PLAIN_PALETTE = Palette()


@dataclass(frozen=True)
class FrameStyle:
    """Border characters for framed blocks. All empty means no frame."""
    top_left: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_right: str = ""
    horizontal: str = ""
    vertical: str = ""


ASCII_FRAME = FrameStyle("+", "+", "+", "+", "-", "|")
UNICODE_FRAME = FrameStyle("╔", "╗", "╚", "╝", "═", "║")
NO_FRAME = FrameStyle()


def select_palette(theme: str = config.THEME, no_color: bool = config.NO_COLOR) -> Palette:
    """Pick a palette from a theme name; unknown names fall back to dark."""
    if no_color:
        return PLAIN_PALETTE
    theme = theme.strip().lower()
    if theme == "light":
        return LIGHT_PALETTE
    if theme in ("plain", "none", "off"):
        return PLAIN_PALETTE
    return DARK_PALETTE


def select_frame(name: str = config.FRAME) -> FrameStyle:
    """Pick a frame style by name; unknown names fall back to ascii."""
    name = name.strip().lower()
    if name == "unicode":
        return UNICODE_FRAME
    if name in ("none", "off"):
        return NO_FRAME
    return ASCII_FRAME


@dataclass
class StyledLine:
    """A line kept in plain and coloured form so padding can use the plain width."""
    plain: str
    colored: str


class TerminalDisplay:
    """
    Formats and prints catalog information to a text stream.

    Nothing here reads or changes catalog state beyond get()/ids().
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        palette: Optional[Palette] = None,
        frame: Optional[FrameStyle] = None,
    ):
        self.stream = stream or sys.stdout
        self.palette = palette or select_palette()
        self.frame = frame or select_frame()

    # =========================================================================
    # Low-level output
    # =========================================================================

    def paint(self, text: str, color: str) -> str:
        if not color:
            return text
        return f"{color}{text}{self.palette.reset}"

    def write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def info(self, message: str) -> None:
        self.write(self.paint(message, self.palette.info))

    def success(self, message: str) -> None:
        self.write(self.paint(message, self.palette.success))

    def warn(self, message: str) -> None:
        self.write(self.paint(message, self.palette.warning))

    def error(self, message: str) -> None:
        self.write(self.paint(message, self.palette.error))

    def prompt(self, message: str) -> str:
        return self.paint(message, self.palette.prompt)

    def render_framed(self, lines: list[StyledLine]) -> str:
        """Render lines inside the active frame, padded to the widest line."""
        border = self.palette.border
        frame = self.frame
        reset = self.palette.reset

        if not frame.vertical:
            return "\n".join(
                (line.colored + reset) if line.colored else "" for line in lines
            )

        max_width = max((len(line.plain) for line in lines), default=0)
        inner_width = max_width + 2  # One space of padding on each side

        top = self.paint(frame.top_left + frame.horizontal * inner_width + frame.top_right, border)
        bottom = self.paint(
            frame.bottom_left + frame.horizontal * inner_width + frame.bottom_right, border
        )
        side = self.paint(frame.vertical, border)

        rendered = [top]
        for line in lines:
            body = (line.colored + reset) if line.colored else ""
            padding = " " * (max_width - len(line.plain))
            rendered.append(f"{side} {body}{padding} {side}")
        rendered.append(bottom)
        return "\n".join(rendered)

    def styled(self, text: str, color: str) -> StyledLine:
        return StyledLine(plain=text, colored=f"{color}{text}" if text else "")

    # =========================================================================
    # Catalog views
    # =========================================================================

    def show_load_result(self, result: LoadResult, requested: str = "") -> None:
        """
        Print the outcome of a load.

        Failed loads print every warning as an error followed by a summary.
        Successful loads print the count, every warning, and the missing
        prerequisite check.
        """
        if not result.ok:
            for warning in result.warnings:
                self.error(warning)
            self.warn(f"No courses were loaded from {requested or result.path}")
            return

        self.success(f"Loaded {result.courses} courses from {result.path}")
        for warning in result.warnings:
            self.warn(warning)

        if not result.missing_prerequisites:
            self.success("All prerequisites found in the loaded catalog.")
        else:
            for missing in result.missing_prerequisites:
                self.warn(f"Prerequisite missing from catalog: {missing}")

    def show_course_list(self, directory: CourseDirectory) -> None:
        """Print every course as "ID, Title" in id order."""
        ids = directory.ids()
        if not ids:
            self.warn("No courses available to display.")
            return

        lines = [self.styled("Course List", self.palette.title), StyledLine("", "")]
        for course_id in ids:
            course = directory.get(course_id)
            if course is None:
                continue
            lines.append(self.styled(f"{course.course_id}, {course.title}", self.palette.text))

        self.write()
        self.write(self.render_framed(lines))
        self.write()

    def show_course(self, course: Course, directory: CourseDirectory) -> None:
        """Print one course with the titles of its prerequisites."""
        self.write(f"{self.paint(course.course_id, self.palette.title)}, {course.title}")

        if not course.prerequisites:
            self.info("Prerequisites: none")
            return

        self.write(self.paint("Prerequisites:", self.palette.border))
        for prereq_id in course.prerequisites:
            prereq = directory.get(prereq_id)
            if prereq is not None:
                detail = f" - {prereq.title}"
            else:
                detail = f" - {self.paint('(missing from catalog)', self.palette.warning)}"
            self.write(f"{self.paint('  ' + prereq_id, self.palette.number)}{detail}")
