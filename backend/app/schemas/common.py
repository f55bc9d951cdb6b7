"""Common/shared schemas."""
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "ok"
    database: str = "ok"


class ValidationProblem(BaseModel):
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
    title: str = "One or more validation errors occurred."
    status: int = 400
    errors: Dict[str, List[str]]
