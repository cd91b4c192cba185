"""
Catalog indexer: builds the course_id lookup and cross-checks prerequisites.
"""
import logging
from typing import Iterable

from ..domain import Course
from .parser import parse_line

logger = logging.getLogger(__name__)


def index_courses(lines: Iterable[str]) -> tuple[dict[str, Course], list[str]]:
    """
    Parse every line into a fresh course_id -> Course mapping.

    A course id defined twice keeps the later line and records a warning.

    Args:
        lines: Catalog lines in file order

    Returns:
        Tuple of (courses_by_id, warnings)
        - courses_by_id: Dictionary mapping course_id -> Course
        - warnings: Messages in the order they were produced
    """
    courses_by_id: dict[str, Course] = {}
    warnings: list[str] = []

    for line_number, line in enumerate(lines, start=1):
        parsed = parse_line(line, line_number)
        warnings.extend(parsed.warnings)

        if parsed.course is None:
            continue

        course_id = parsed.course.course_id
        if course_id in courses_by_id:
            warnings.append(f"Replacing existing course entry for {course_id}.")

        courses_by_id[course_id] = parsed.course

    for warning in warnings:
        logger.debug(f"[Catalog] {warning}")

    return courses_by_id, warnings


def find_missing_prerequisites(courses_by_id: dict[str, Course]) -> list[str]:
    """
    List prerequisites that point at courses absent from the mapping.

    Needs the complete mapping: a prerequisite may be defined further down
    the file than the course that references it.

    Returns:
        Sorted, de-duplicated "<ID> (referenced by <OWNER>)" entries
    """
    missing = set()
    for course_id, course in courses_by_id.items():
        for prereq_id in course.prerequisites:
            if prereq_id not in courses_by_id:
                missing.add(f"{prereq_id} (referenced by {course_id})")
    return sorted(missing)


def sorted_course_ids(courses_by_id: dict[str, Course]) -> list[str]:
    """Course ids in lexicographic order."""
    return sorted(courses_by_id)
