"""
Catalog file discovery: finds a catalog file by name from the working
directory upward, so tools still work when run from a subfolder.
"""
from pathlib import Path
from typing import Optional

from ..config import SEARCH_DEPTH


def resolve_course_file(
    file_name: str,
    start: Optional[Path] = None,
    max_depth: int = SEARCH_DEPTH,
) -> Optional[Path]:
    """
    Locate a catalog file.

    Absolute names are used as-is. Relative names are tried in the start
    directory, then in each parent, checking at most max_depth directories.

    Args:
        file_name: File name or path as typed by the user
        start: Directory to start from (default: current working directory)
        max_depth: Maximum number of directories to check

    Returns:
        Absolute path of the first match, or None if not found
    """
    if not file_name:
        return None

    requested = Path(file_name)
    if requested.is_absolute():
        return requested if requested.exists() else None

    search_dir = (start or Path.cwd()).resolve()
    for _ in range(max_depth):
        candidate = search_dir / requested
        if candidate.exists():
            return candidate.resolve()

        if search_dir.parent == search_dir:  # Stop at filesystem root
            break
        search_dir = search_dir.parent

    return None
