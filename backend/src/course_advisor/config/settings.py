"""
Course advisor settings: single source of truth for runtime options.

Reads environment variables (and a local .env file, if present) and defines
defaults for every option used by the CLI, terminal display and web surface.

Environment Variables:
    COURSE_ADVISOR_CATALOG: Default catalog file name (searched upward from cwd)
    COURSE_ADVISOR_SEARCH_DEPTH: How many directories to walk when searching
    COURSE_ADVISOR_THEME: dark | light | plain (also none/off)
    COURSE_ADVISOR_FRAME: ascii | unicode | none (also off)
    NO_COLOR: Any value turns colours off
    COURSE_ADVISOR_LOG_LEVEL: Python logging level name
    COURSE_ADVISOR_HOST / COURSE_ADVISOR_PORT: Web dashboard bind address
"""
import logging
import os

from dotenv import load_dotenv

# Load .env early; real environment variables win
load_dotenv(override=False)

# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------
DEFAULT_CATALOG_FILE = os.getenv("COURSE_ADVISOR_CATALOG", "data/courses.csv")
SEARCH_DEPTH = int(os.getenv("COURSE_ADVISOR_SEARCH_DEPTH", "10"))

# -----------------------------------------------------------------------------
# Terminal display
# -----------------------------------------------------------------------------
THEME = os.getenv("COURSE_ADVISOR_THEME", "dark").strip().lower()
FRAME = os.getenv("COURSE_ADVISOR_FRAME", "ascii").strip().lower()
NO_COLOR = os.getenv("NO_COLOR") is not None

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("COURSE_ADVISOR_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# Web dashboard
# -----------------------------------------------------------------------------
WEB_HOST = os.getenv("COURSE_ADVISOR_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("COURSE_ADVISOR_PORT", "8000"))


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for CLI and server entry points.

    Args:
        level: Level name (e.g. "INFO"); defaults to COURSE_ADVISOR_LOG_LEVEL
    """
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


if __name__ == "__main__":
    print(f"DEFAULT_CATALOG_FILE: {DEFAULT_CATALOG_FILE}")
    print(f"SEARCH_DEPTH: {SEARCH_DEPTH}")
    print(f"THEME: {THEME}")
    print(f"FRAME: {FRAME}")
    print(f"NO_COLOR: {NO_COLOR}")
    print(f"LOG_LEVEL: {LOG_LEVEL}")
    print(f"WEB: {WEB_HOST}:{WEB_PORT}")
