"""
FastAPI application exposing local summarization and page extraction.
"""

from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional, cast
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError as RequestBodyError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from pagegist import __version__
from pagegist.config.config import Config, settings
from pagegist.extractor.soup_node import parse_html
from pagegist.observability import export_prometheus
from pagegist.pipeline import Pipeline
from pagegist.security.validation import InputValidator, RequestValidationError, ValidationRules
from pagegist.utils.text import count_words

logger = structlog.get_logger(__name__)

DEFAULT_TITLE = "Untitled"


# --- Request / response models ---


class SummaryRequest(BaseModel):
    content: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


class SummaryResponse(BaseModel):
    points: List[str]
    timestamp: str
    wordCount: int
    method: str = "local"


class ExtractRequest(BaseModel):
    html: str = Field(..., description="Raw HTML of the page; it is parsed, never fetched.")
    url: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# --- Application factory ---


def create_app(config: Optional[Config] = None) -> FastAPI:
    config = config if config is not None else cast(Config, settings)
    pipeline = Pipeline(config)
    validator = InputValidator(ValidationRules(max_content_length=config.web.max_content_length))

    app = FastAPI(title="PageGist", version=__version__)
    app.state.pipeline = pipeline
    app.state.validator = validator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.allowed_origins,
        allow_origin_regex=r"chrome-extension://.*",
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request.headers.get("X-Request-ID", str(uuid4())))
        start_time = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration=time.perf_counter() - start_time,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestBodyError)
    async def handle_malformed_body(request: Request, exc: RequestBodyError) -> JSONResponse:
        logger.info("Malformed request body", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"error": "Request body is malformed"})

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "PageGist - local key-point summaries of web pages"

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="OK", timestamp=_now())

    @app.get("/metrics")
    async def metrics() -> Response:
        return PlainTextResponse(export_prometheus(), media_type="text/plain")

    @app.post("/api/summarize", response_model=SummaryResponse)
    async def summarize(body: SummaryRequest) -> SummaryResponse:
        content = validator.validate_summary_request(body.content, body.title)
        points = await asyncio.to_thread(pipeline.summarize_locally, content, body.title or DEFAULT_TITLE)
        return SummaryResponse(points=list(points), timestamp=_now(), wordCount=count_words(content))

    @app.post("/api/extract")
    async def extract(body: ExtractRequest) -> Dict[str, Any]:
        url = validator.validate_url(body.url)

        def _run() -> Dict[str, Any]:
            document = parse_html(body.html)
            extracted = pipeline.extract_content(document, url)
            payload = extracted.to_dict()
            payload["isLongForm"] = pipeline.is_long_form(extracted)
            payload["shouldProcess"] = pipeline.should_process(url, document)
            return payload

        return await asyncio.to_thread(_run)

    return app


app = create_app()
