"""FastAPI application entrypoint for authorcheck service mode."""

from __future__ import annotations

from typing import Any, Callable, List, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..checklist import CHECKLIST_ITEMS
from ..config import ConfigurationError, GitHubSettings, load_settings
from ..detector import ComponentDetector
from ..github.content import ContentFetcher
from ..models import ChangedFile, ChangeStatus


class ChangedFilePayload(BaseModel):
    filename: str
    status: str


class DetectRequest(BaseModel):
    files: List[ChangedFilePayload]
    head_ref: Optional[str] = None


class DetectResponse(BaseModel):
    matched: bool
    matched_file: Optional[str] = None
    checklist: List[str] = []


class ChecklistResponse(BaseModel):
    items: List[str]


class HealthResponse(BaseModel):
    status: str


def _detector_factory(settings: GitHubSettings) -> Callable[[], ComponentDetector]:
    def _factory() -> ComponentDetector:
        return ComponentDetector(ContentFetcher(settings))

    return _factory


def create_app(
    detector_factory: Callable[[], ComponentDetector] | None = None,
) -> FastAPI:
    """Create the FastAPI application exposing component detection.

    Without an explicit factory, GitHub settings are loaded once here and
    shared by every request.
    """
    if detector_factory is None:
        detector_factory = _detector_factory(load_settings())

    app = FastAPI(title="authorcheck", version="1.0.0")

    async def get_detector() -> ComponentDetector:
        return detector_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/checklist", response_model=ChecklistResponse)
    async def checklist() -> ChecklistResponse:
        return ChecklistResponse(items=list(CHECKLIST_ITEMS))

    @app.post("/detect", response_model=DetectResponse)
    async def detect(
        payload: DetectRequest,
        detector: ComponentDetector = Depends(get_detector),
    ) -> DetectResponse:
        changed_files = [
            ChangedFile(filename=entry.filename, status=ChangeStatus.parse(entry.status))
            for entry in payload.files
        ]
        result = await detector.detect(changed_files, payload.head_ref)
        return DetectResponse(
            matched=result.matched,
            matched_file=result.matched_file,
            checklist=list(CHECKLIST_ITEMS) if result.matched else [],
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        _: Any, exc: ConfigurationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000
) -> None:  # pragma: no cover - integration path
    app = create_app()
    uvicorn.run(app, host=host, port=port)
