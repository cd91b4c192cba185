"""
Course directory: the loaded, queryable catalog.

A load parses the whole file into a fresh mapping and swaps it in with a
single assignment, and only when at least one course was read. Readers
never see a half-loaded catalog, and a failed load keeps the previous one.

Not thread-safe: callers that share a directory across threads must
serialize load() against other calls themselves.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ..domain import Course, LoadResult
from .index import find_missing_prerequisites, index_courses, sorted_course_ids
from .loader import read_catalog_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _DirectoryState:
    """Committed catalog contents. Replaced as a whole, never mutated."""
    courses_by_id: dict[str, Course] = field(default_factory=dict)
    sorted_ids: tuple[str, ...] = ()


class CourseDirectory:
    """
    In-memory course catalog loaded from a comma-separated text file.

    Usage:
        directory = CourseDirectory()
        result = directory.load("courses.csv")
        if result.ok:
            course = directory.get("CSCI200")
            all_ids = directory.ids()
    """

    def __init__(self):
        self._state = _DirectoryState()

    def load(self, path: str | Path) -> LoadResult:
        """
        Read, validate and commit a catalog file.

        Problems with individual lines or prerequisites become warnings and
        the rest of the file is still read. The load fails (ok=False) only if
        the file can't be read or holds no valid course; the current catalog
        is then left untouched.

        Args:
            path: Catalog file to open (no directory search is done)

        Returns:
            LoadResult describing the attempt
        """
        result = LoadResult()
        if not str(path):
            result.warnings.append("File name is empty.")
            return result

        catalog_path = Path(path)
        if not catalog_path.exists():
            logger.warning(f"[Catalog] File not found: {path}")
            result.warnings.append(f"Unable to locate file: {path}")
            result.path = str(path)
            return result

        result.path = str(catalog_path.resolve())

        try:
            lines = read_catalog_lines(result.path)
        except OSError as e:
            logger.warning(f"[Catalog] Cannot read {result.path}: {e}")
            result.warnings.append(f"Unable to open file: {result.path}")
            return result

        courses_by_id, warnings = index_courses(lines)
        result.warnings.extend(warnings)

        if not courses_by_id:
            logger.warning(f"[Catalog] No valid courses in {result.path}")
            return result

        result.ok = True
        result.courses = len(courses_by_id)
        result.missing_prerequisites = find_missing_prerequisites(courses_by_id)

        self._state = _DirectoryState(
            courses_by_id=courses_by_id,
            sorted_ids=tuple(sorted_course_ids(courses_by_id)),
        )

        logger.info(
            f"[Catalog] Loaded {result.courses} courses from {result.path} "
            f"({len(result.warnings)} warnings, "
            f"{len(result.missing_prerequisites)} missing prerequisites)"
        )
        return result

    def get(self, course_id: str) -> Optional[Course]:
        """
        Find a course by its normalized id (exact, case-sensitive match).

        Returns:
            The Course, or None when it is not in the catalog
        """
        return self._state.courses_by_id.get(course_id)

    def ids(self) -> list[str]:
        """Sorted list of every loaded course id (a new list each call)."""
        return list(self._state.sorted_ids)

    def courses(self) -> list[Course]:
        """Loaded courses in id order."""
        state = self._state
        return [state.courses_by_id[course_id] for course_id in state.sorted_ids]

    @property
    def is_loaded(self) -> bool:
        """True once a load has committed at least one course."""
        return bool(self._state.courses_by_id)

    def __len__(self) -> int:
        return len(self._state.courses_by_id)

    def __contains__(self, course_id: object) -> bool:
        return course_id in self._state.courses_by_id

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())
