"""
FastAPI dashboard: browse a loaded catalog over HTTP.

Each app owns its own CourseDirectory. When started from the CLI, only the
resolved catalog path is handed over; the dashboard loads the file itself.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..catalog import CourseDirectory, normalize_course_id_input
from ..domain import LoadResult

logger = logging.getLogger(__name__)


class CourseSummary(BaseModel):
    course_id: str
    title: str


class PrerequisiteView(BaseModel):
    course_id: str
    title: Optional[str] = None
    missing: bool = False


class CourseDetail(BaseModel):
    course_id: str
    title: str
    prerequisites: list[PrerequisiteView] = Field(default_factory=list)


class DashboardState:
    """Catalog and last load result for one dashboard instance."""

    def __init__(self, catalog_path: Optional[str] = None):
        self.directory = CourseDirectory()
        self.catalog_path = catalog_path
        self.last_result = LoadResult()

    def reload(self) -> LoadResult:
        if not self.catalog_path:
            raise HTTPException(status_code=400, detail="No catalog file configured")
        self.last_result = self.directory.load(self.catalog_path)
        if self.last_result.ok:
            self.catalog_path = self.last_result.path
        else:
            logger.warning(f"[Dashboard] Unable to load catalog: {self.catalog_path}")
        return self.last_result


def create_app(catalog_path: Optional[str] = None) -> FastAPI:
    """
    Build the dashboard app.

    Args:
        catalog_path: Catalog file loaded on startup (optional)
    """
    state = DashboardState(catalog_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if state.catalog_path:
            state.reload()
        yield

    app = FastAPI(title="Course Advisor", version="0.1.0", lifespan=lifespan)
    app.state.dashboard = state

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get("/api/catalog")
    async def catalog_status():
        return state.last_result.to_dict()

    @app.post("/api/catalog/reload")
    async def reload_catalog():
        # Loads run on the event loop thread so a reload never overlaps a read
        return state.reload().to_dict()

    @app.get("/api/courses", response_model=list[CourseSummary])
    async def list_courses(search: Optional[str] = None):
        courses = state.directory.courses()

        if search:
            search_lower = search.strip().lower()
            courses = [
                c
                for c in courses
                if search_lower in c.course_id.lower() or search_lower in c.title.lower()
            ]

        return [CourseSummary(course_id=c.course_id, title=c.title) for c in courses]

    @app.get("/api/courses/{course_id}", response_model=CourseDetail)
    async def get_course(course_id: str):
        normalized = normalize_course_id_input(course_id)
        if normalized is None:
            raise HTTPException(
                status_code=400,
                detail="Course number must start with letters and end with digits.",
            )

        course = state.directory.get(normalized.course_id)
        if course is None:
            raise HTTPException(
                status_code=404, detail=f"Course not found: {normalized.course_id}"
            )

        prerequisites = []
        for prereq_id in course.prerequisites:
            prereq = state.directory.get(prereq_id)
            prerequisites.append(
                PrerequisiteView(
                    course_id=prereq_id,
                    title=prereq.title if prereq else None,
                    missing=prereq is None,
                )
            )

        return CourseDetail(
            course_id=course.course_id, title=course.title, prerequisites=prerequisites
        )

    return app
