"""Request and response bodies for the HTTP API."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    source: str = Field(..., description="Flow program text")


class CompileResponse(BaseModel):
    cpp: str
    output: str
    success: bool
    compilation_id: int


class HealthResponse(BaseModel):
    status: str = "alive"
    service: str
    version: str
    phi: float
    compilations: int
    uptime_seconds: float
    ideas_in_stream: int


class IdeasResponse(BaseModel):
    ideas: List[Dict[str, Any]]
    total: int
