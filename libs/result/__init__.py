"""Result type shared by use cases

Use cases never raise for expected failures; they return a Result that is
either ok (carries a value) or err (carries an Error).
"""

from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class Error(BaseModel):
    """Typed failure payload returned by use cases"""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable message")
    reason: Optional[str] = Field(default=None, description="Underlying cause")
    issues: List[str] = Field(default_factory=list, description="Field level issues")


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None

    def map(self, fn):
        if self.is_err():
            return self
        return Return.ok(fn(self.value))

    def and_then(self, fn):
        """Chain a function that itself returns a Result"""
        if self.is_err():
            return self
        return fn(self.value)

    def __repr__(self):
        if self.is_err():
            return f"Result.err({self.error.code})"
        return f"Result.ok({self.value!r})"


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)


__all__ = ["Result", "Return", "Error"]
