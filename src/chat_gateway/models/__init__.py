"""
Request, result and prompt models.
"""

from .request import Message, Conversation, ProviderConfig, CompletionRequest
from .response import CompletionResult
from .prompt import SourceDocument, build_system_prompt

__all__ = [
    "Message",
    "Conversation",
    "ProviderConfig",
    "CompletionRequest",
    "CompletionResult",
    "SourceDocument",
    "build_system_prompt",
]
