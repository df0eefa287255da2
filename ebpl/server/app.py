"""FastAPI application exposing the EBPL compile pipeline."""

from __future__ import annotations

import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request

from ebpl import __version__
from ebpl.config import CompilerConfig
from ebpl.examples import get_example, list_examples
from ebpl.lang import LANGUAGE_VERSION
from ebpl.observability.logging import get_logger
from ebpl.pipeline import compile_source

from .schemas import CompileRequest, CompileResponse, ExampleModel, HealthResponse

logger = get_logger("ebpl.server")


def _example_model(example) -> ExampleModel:
    return ExampleModel(
        slug=example.slug,
        name=example.name,
        category=example.category,
        description=example.description,
        source=example.source,
    )


def create_app(config: Optional[CompilerConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Authentication and snippet storage are provided by other services; this
    app only compiles programs and serves the example catalog.
    """
    compiler_config = config or CompilerConfig()

    app = FastAPI(
        title="EBPL Compiler",
        description="Translate EBPL programs into Python and preview their output",
        version=__version__,
    )
    app.state.compiler_config = compiler_config

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests and responses."""
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Response: %s %s status=%d duration=%.3fs",
            request.method,
            request.url.path,
            response.status_code,
            time.perf_counter() - started,
        )
        return response

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__, language_version=LANGUAGE_VERSION)

    @app.post("/api/compile", response_model=CompileResponse, response_model_exclude_none=True)
    def compile_program(payload: CompileRequest) -> CompileResponse:
        result = compile_source(payload.source, compiler_config)
        return CompileResponse(**result.to_dict())

    @app.get("/api/examples", response_model=List[ExampleModel])
    async def examples() -> List[ExampleModel]:
        return [_example_model(example) for example in list_examples()]

    @app.get("/api/examples/{name}", response_model=ExampleModel)
    async def example(name: str) -> ExampleModel:
        try:
            return _example_model(get_example(name))
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown example '{name}'") from exc

    return app
