"""
Chat Gateway

One completion operation over four LLM provider wire formats:
- Claude (Anthropic Messages API)
- OpenAI (Chat Completions)
- Gemini (Generative Language API)
- Llama (Together AI, OpenAI-compatible)
"""

from .core.interface import AbstractProvider
from .core.registry import ProviderRegistry, create_default_registry, get_registry
from .core.config import GatewaySettings, load_config
from .core.errors import (
    GatewayError,
    MalformedRequestError,
    UnsupportedProviderError,
    ProviderError,
    TransportError,
)
from .gateway import complete_conversation
from .models.request import Message, Conversation, ProviderConfig, CompletionRequest
from .models.response import CompletionResult

__all__ = [
    "AbstractProvider",
    "ProviderRegistry",
    "create_default_registry",
    "get_registry",
    "GatewaySettings",
    "load_config",
    "GatewayError",
    "MalformedRequestError",
    "UnsupportedProviderError",
    "ProviderError",
    "TransportError",
    "complete_conversation",
    "Message",
    "Conversation",
    "ProviderConfig",
    "CompletionRequest",
    "CompletionResult",
]
