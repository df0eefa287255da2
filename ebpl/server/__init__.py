"""HTTP API around the EBPL compile pipeline."""

from .app import create_app
from .schemas import CompileRequest, CompileResponse

__all__ = ["create_app", "CompileRequest", "CompileResponse"]
