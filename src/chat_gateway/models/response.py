"""
Uniform result model for the chat gateway.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, model_validator


class CompletionResult(BaseModel):
    """
    Outcome of one gateway call.

    Exactly one of ``content`` and ``error`` is set.
    """
    content: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> "CompletionResult":
        if (self.content is None) == (self.error is None):
            raise ValueError("exactly one of 'content' or 'error' must be set")
        return self

    @classmethod
    def success(cls, content: str) -> "CompletionResult":
        return cls(content=content)

    @classmethod
    def failure(cls, message: str) -> "CompletionResult":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize without the absent field."""
        return self.model_dump(exclude_none=True)
