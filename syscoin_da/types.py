"""Result types returned by DA clients."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionResult:
    """Opaque blob identifier assigned by the node on submission."""

    blob_id: str


@dataclass(frozen=True)
class InclusionRecord:
    """Raw bytes of a blob the node reports as available."""

    data: bytes


__all__ = ["SubmissionResult", "InclusionRecord"]
