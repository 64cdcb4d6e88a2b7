from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import StorefrontError

T = TypeVar("T")


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Результат шага: либо значение, либо ошибка"""

    value: Optional[T] = None
    error: Optional[StorefrontError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StepResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StorefrontError) -> "StepResult[T]":
        return cls(error=error)
