# section state — tagged pending / success / failure payload
# every dashboard route and the search websocket return one of these

from enum import Enum
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class SectionStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class SectionState(BaseModel, Generic[T]):
    """what a dashboard section shows: still loading, data, or the no-data fallback"""
    status: SectionStatus
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def pending(cls) -> "SectionState[T]":
        return cls(status=SectionStatus.PENDING)

    @classmethod
    def success(cls, data: T) -> "SectionState[T]":
        return cls(status=SectionStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, error: str) -> "SectionState[T]":
        return cls(status=SectionStatus.FAILURE, error=error)

    @property
    def is_loaded(self) -> bool:
        return self.status != SectionStatus.PENDING
