"""
Catalog loader: reads the lines of a catalog text file.
"""
from pathlib import Path


def read_catalog_lines(path: str | Path) -> list[str]:
    """
    Read all lines from a catalog file.

    Opens exactly the given path; no searching is done here. Only "\\n" ends
    a line; a stray "\\r" stays in the line and is trimmed by the parser.
    Bytes that are not valid UTF-8 are replaced so one bad character cannot
    abort a load.

    Args:
        path: Path to the catalog file

    Returns:
        List of lines (line endings included)

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be opened or read
    """
    with open(Path(path), "r", encoding="utf-8", errors="replace", newline="\n") as f:
        return list(f)
