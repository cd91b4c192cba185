"""
Catalog package for loading, validating and querying course catalogs.
"""
from .ids import is_valid_course_id, normalize_course_id, normalize_course_id_input
from .parser import parse_line
from .index import index_courses, find_missing_prerequisites
from .loader import read_catalog_lines
from .directory import CourseDirectory
from .paths import resolve_course_file

__all__ = [
    "is_valid_course_id",
    "normalize_course_id",
    "normalize_course_id_input",
    "parse_line",
    "index_courses",
    "find_missing_prerequisites",
    "read_catalog_lines",
    "CourseDirectory",
    "resolve_course_file",
]
