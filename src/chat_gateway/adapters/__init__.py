"""
Provider adapters, one per supported wire format.
"""

from .anthropic_adapter import AnthropicAdapter
from .openai_adapter import OpenAIAdapter
from .gemini_adapter import GeminiAdapter
from .together_adapter import TogetherAdapter

__all__ = [
    "AnthropicAdapter",
    "OpenAIAdapter",
    "GeminiAdapter",
    "TogetherAdapter",
]
