"""
Batch create result models

A batch create succeeds per item; failed items come back as BatchError
entries next to the created entities instead of failing the request.
"""
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar('T')


class BatchError(BaseModel):
    """One item of a batch create that the API rejected."""

    model_config = {"extra": "allow"}

    index: Optional[int] = None
    message: Optional[str] = None


class BatchResult(BaseModel, Generic[T]):
    """Per-item outcome of a batch create call."""

    successful: List[T] = []
    errors: List[BatchError] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def total(self) -> int:
        """Number of items the API reported on, successful or not."""
        return len(self.successful) + len(self.errors)
