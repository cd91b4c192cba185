"""
Course advisor: load a comma-separated course catalog, validate course ids
and prerequisites, and look courses up by id or list them in order.

Catalog line format:
    CSCI200, Data Structures, CSCI101, MATH201

Usage:
    from course_advisor import CourseDirectory

    directory = CourseDirectory()
    result = directory.load("courses.csv")
    for warning in result.warnings:
        print(warning)
    course = directory.get("CSCI200")
"""

__version__ = "0.1.0"

from .domain import Course, LoadResult
from .catalog import (
    CourseDirectory,
    is_valid_course_id,
    normalize_course_id_input,
    resolve_course_file,
)

__all__ = [
    "__version__",
    "Course",
    "LoadResult",
    "CourseDirectory",
    "is_valid_course_id",
    "normalize_course_id_input",
    "resolve_course_file",
]
