"""Pydantic request/response models for the EBPL HTTP API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_SOURCE_LENGTH = 100_000


class CompileRequest(BaseModel):
    """Body of ``POST /api/compile``."""

    model_config = ConfigDict(extra="forbid")

    source: str = Field(..., max_length=MAX_SOURCE_LENGTH, description="EBPL program text")


class CompileResponse(BaseModel):
    """Compile result in the camelCase shape used by the web front end."""

    success: bool
    tokens: Optional[List[str]] = None
    generatedCode: Optional[str] = None
    executionOutput: Optional[str] = None
    executionError: Optional[str] = None
    error: Optional[str] = None
    errors: Optional[List[str]] = None


class ExampleModel(BaseModel):
    slug: str
    name: str
    category: str
    description: str
    source: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    language_version: str
