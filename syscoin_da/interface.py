"""
Abstract data-availability client contract.

A host node framework holds a ``DataAvailabilityClient`` and calls it to post
batch data and later look it up. Implementations must be safe to call
concurrently and cheap to ``clone()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from .types import InclusionRecord, SubmissionResult


class DataAvailabilityClient(ABC):
    @abstractmethod
    async def submit(self, data: bytes, context: Any = None) -> SubmissionResult:
        """
        Post ``data`` to the DA layer and return its blob id.
        ``context`` is opaque host information (e.g. a batch number).
        Raises :class:`syscoin_da.errors.DAError` on failure.
        """

    @abstractmethod
    async def fetch(self, blob_id: str) -> Optional[InclusionRecord]:
        """
        Look up a previously submitted blob. ``None`` means the DA layer does
        not (yet) have data for it.
        Raises :class:`syscoin_da.errors.DAError` on failure.
        """

    @abstractmethod
    def clone(self) -> "DataAvailabilityClient":
        """Return an independent handle sharing the same transport."""

    @abstractmethod
    def size_limit(self) -> Optional[int]:
        """Maximum blob size in bytes, or None when unknown."""


__all__ = ["DataAvailabilityClient"]
