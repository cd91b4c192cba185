"""
Course catalog models: validated course records and load reports.
"""
from dataclasses import asdict, dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict


class Course(BaseModel):
    """A validated course record with its normalized id and prerequisites."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    course_id: str
    title: str
    prerequisites: tuple[str, ...] = ()


@dataclass
class LoadResult:
    """
    Outcome of one catalog load attempt.

    Warnings keep the order they were produced while reading the file.
    missing_prerequisites is sorted and holds "<ID> (referenced by <OWNER>)"
    entries for prerequisites that no loaded course defines.
    """
    ok: bool = False
    courses: int = 0
    warnings: list[str] = field(default_factory=list)
    missing_prerequisites: list[str] = field(default_factory=list)
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Export as a JSON-friendly dictionary."""
        return asdict(self)
