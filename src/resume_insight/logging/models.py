"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UsageLog(BaseModel):
    """Single usage log entry for one extraction call."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    session_id: str = "anonymous"
    timestamp: datetime = Field(default_factory=datetime.now)
    mode: str  # "resume" | "feedback" | "brief"
    model: str | None = None
    outcome: str = "decoded"  # "decoded" | "fallback"
    elapsed_seconds: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    estimated_cost_usd: float = 0.0
    success: bool = True
    error_message: str | None = None
