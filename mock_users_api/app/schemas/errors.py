"""
Pydantic models for error payloads.

Every failed request is answered with ``{"error": ...}``.  The value
is either a human readable message or, for validation failures, the
list of violated field rules.
"""

from typing import List, Union

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A single failed validation rule."""

    field: str = Field(..., example="username")
    message: str = Field(..., example="Username can not be empty.")


class ErrorMessage(BaseModel):
    """Error body carrying a plain message."""

    error: Union[str, List[Violation]] = Field(..., example="User not found")
