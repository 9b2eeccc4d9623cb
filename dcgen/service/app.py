"""FastAPI application entrypoint for dcgen service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..config import ConfigError
from ..errors import ConfigNotFound, MalformedDocument, NoTemplateMatch, TemplateNotFound
from ..models import thaw
from ..orchestrator import GenerationResult, Orchestrator

T = TypeVar("T")


class GenerateRequest(BaseModel):
    prompt: str
    workspace: str = "."
    template: Optional[str] = None
    dry_run: bool = False


class ModifyRequest(BaseModel):
    request: str
    workspace: str = "."
    dry_run: bool = False


class GenerationResponse(BaseModel):
    document: Dict[str, Any]
    path: str
    reasoning: str
    template: str
    features: Dict[str, Any]
    diff: str
    dry_run: bool


class TemplateSummary(BaseModel):
    name: str
    description: str
    languages: List[str]
    frameworks: List[str]
    features: List[str]
    category: str


class TemplateDetail(TemplateSummary):
    config: Dict[str, Any]


class TemplatesResponse(BaseModel):
    templates: List[TemplateSummary]
    categories: List[str]


class StatusResponse(BaseModel):
    config_exists: bool
    config_path: str
    name: Optional[str] = None
    image: Optional[str] = None
    features: List[str] = []
    forward_ports: List[Any] = []
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


async def _run_blocking(func: Callable[[], T]) -> T:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:  # pragma: no cover - fallback path when not in async context
        return func()
    return await loop.run_in_executor(None, func)


def _generation_response(result: GenerationResult) -> GenerationResponse:
    return GenerationResponse(
        document=result.document,
        path=str(result.path),
        reasoning=result.reasoning,
        template=result.template,
        features=result.features.to_dict(),
        diff=result.diff,
        dry_run=result.dry_run,
    )


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application exposing dcgen operations."""

    app = FastAPI(title="dcgen Service", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get("/templates", response_model=TemplatesResponse)
    async def list_templates(
        category: Optional[str] = None,
        workspace: str = ".",
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> TemplatesResponse:
        templates, categories = await _run_blocking(
            lambda: orchestrator.list_templates(workspace, category=category)
        )
        return TemplatesResponse(
            templates=[TemplateSummary(**template.summary()) for template in templates],
            categories=categories,
        )

    @app.get("/templates/{name}", response_model=TemplateDetail)
    async def get_template(
        name: str,
        workspace: str = ".",
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> TemplateDetail:
        templates, _ = await _run_blocking(lambda: orchestrator.list_templates(workspace))
        for template in templates:
            if template.name == name:
                return TemplateDetail(**template.summary(), config=thaw(template.base_config))
        raise TemplateNotFound(name)

    @app.post("/generate", response_model=GenerationResponse)
    async def generate(
        payload: GenerateRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerationResponse:
        result = await _run_blocking(
            lambda: orchestrator.run_generate(
                payload.prompt,
                payload.workspace,
                template=payload.template,
                dry_run=payload.dry_run,
            )
        )
        return _generation_response(result)

    @app.post("/modify", response_model=GenerationResponse)
    async def modify(
        payload: ModifyRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> GenerationResponse:
        result = await _run_blocking(
            lambda: orchestrator.run_modify(
                payload.request,
                payload.workspace,
                dry_run=payload.dry_run,
            )
        )
        return _generation_response(result)

    @app.get("/status", response_model=StatusResponse)
    async def status(
        workspace: str = ".",
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> StatusResponse:
        result = await _run_blocking(lambda: orchestrator.run_status(workspace))
        return StatusResponse(
            config_exists=result.config_exists,
            config_path=str(result.config_path),
            name=result.name,
            image=result.image,
            features=result.features,
            forward_ports=result.forward_ports,
            error=result.error,
        )

    @app.exception_handler(TemplateNotFound)
    async def template_not_found_handler(_: Any, exc: TemplateNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ConfigNotFound)
    async def config_not_found_handler(_: Any, exc: ConfigNotFound) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(MalformedDocument)
    async def malformed_document_handler(_: Any, exc: MalformedDocument) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(NoTemplateMatch)
    async def no_template_match_handler(
        _: Any, exc: NoTemplateMatch
    ) -> JSONResponse:  # pragma: no cover - simple mapping
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
