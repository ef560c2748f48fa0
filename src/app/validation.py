"""Validation adapter

Turns Pydantic validation failures into VALIDATION_ERROR results so use
cases can accept untrusted input without raising.
"""

from typing import Any, Type, TypeVar
from pydantic import BaseModel, ValidationError
from libs.result import Result, Return, Error

T = TypeVar("T", bound=BaseModel)


def format_issues(exc: ValidationError) -> list[str]:
    """Render each Pydantic error as "<dotted.field>: <message>"."""
    issues = []
    for issue in exc.errors():
        field = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        issues.append(f"{field}: {message}" if field else message)
    return issues


def validate(schema: Type[T], data: Any, message: str = "Invalid request payload") -> Result[T]:
    """
    Validate data against a Pydantic model

    Args:
        schema: Pydantic model class
        data: Untrusted input (dict, model instance, ...)
        message: Error message used on failure

    Returns:
        Result[T]: The parsed model, or VALIDATION_ERROR with per-field issues
    """
    if data is None:
        data = {}

    try:
        return Return.ok(schema.model_validate(data))
    except ValidationError as e:
        issues = format_issues(e)
        return Return.err(
            Error(
                code="VALIDATION_ERROR",
                message=message,
                reason="; ".join(issues),
                issues=issues,
            )
        )
