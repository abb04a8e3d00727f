"""Result models for a grep run."""

from __future__ import annotations

from pydantic import BaseModel


class GrepSummary(BaseModel):
    """Per-outcome line counts of a processed stream."""

    passed: int = 0
    failed: int = 0
    errored: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errored


__all__ = ["GrepSummary"]
