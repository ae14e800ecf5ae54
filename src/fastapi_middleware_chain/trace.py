"""ChainTrace and TraceEntry — debug execution recording."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from fastapi_middleware_chain.exceptions import ChainException


@dataclass(frozen=True)
class TraceEntry:
    """Single stage execution record, appended when the stage returns."""

    name: str
    duration_ms: float
    outcome: Literal["OK", "SHORT_CIRCUIT", "FAILED"]
    reason: str | None = None


@dataclass
class ChainTrace:
    """Structured record of a single chain execution."""

    entered: list[str] = field(default_factory=list)
    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    status_code: int | None = None
    error: ChainException | None = None

    @property
    def exited(self) -> list[str]:
        return [entry.name for entry in self.entries]
