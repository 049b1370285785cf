from __future__ import annotations

from pydantic import BaseModel


# --- Response Models ---


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
