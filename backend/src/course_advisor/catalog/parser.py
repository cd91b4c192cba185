"""
Catalog line parser: turns one comma-separated line into a Course.

Line format:
    <course id>, <title>[, <prerequisite id>, ...]

There is no quoting; every comma separates fields. Empty prerequisite
fields (trailing commas) are ignored.
"""
from dataclasses import dataclass, field
from typing import Optional

from ..domain import Course
from .ids import WHITESPACE, is_valid_course_id, to_upper_ascii


@dataclass
class ParsedLine:
    """Result of parsing a single catalog line."""
    course: Optional[Course] = None
    warnings: list[str] = field(default_factory=list)
    skipped: bool = False


def split_fields(line: str) -> list[str]:
    """Split a line on commas and trim each field."""
    return [cell.strip(WHITESPACE) for cell in line.split(",")]


def parse_line(line: str, line_number: int) -> ParsedLine:
    """
    Parse one catalog line.

    Args:
        line: Raw line text (line endings allowed)
        line_number: 1-based line number used in warnings

    Returns:
        ParsedLine with a Course, or skipped=True when the line is blank or
        structurally invalid. Warnings are never raised as exceptions.
    """
    text = line.strip(WHITESPACE)
    if not text:
        return ParsedLine(skipped=True)

    columns = split_fields(text)
    if len(columns) < 2:
        return ParsedLine(
            warnings=[f"Skipping line {line_number}: expected course ID and name."],
            skipped=True,
        )

    course_id = to_upper_ascii(columns[0])
    if not is_valid_course_id(course_id):
        return ParsedLine(
            warnings=[f"Skipping line {line_number}: invalid course ID '{columns[0]}'."],
            skipped=True,
        )

    warnings = []
    prerequisites = []
    seen = set()

    for raw in columns[2:]:
        if not raw:
            continue

        prereq_id = to_upper_ascii(raw)
        if not is_valid_course_id(prereq_id):
            warnings.append(
                f"Skipping invalid prerequisite '{raw}' for course {course_id}."
            )
            continue

        if prereq_id in seen:
            warnings.append(
                f"Duplicate prerequisite '{prereq_id}' ignored for course {course_id}."
            )
            continue

        seen.add(prereq_id)
        prerequisites.append(prereq_id)

    course = Course(
        course_id=course_id, title=columns[1], prerequisites=tuple(prerequisites)
    )
    return ParsedLine(course=course, warnings=warnings)
