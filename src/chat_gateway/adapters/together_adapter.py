"""
Together AI adapter for Llama models.

Together exposes an OpenAI-compatible chat endpoint; only the base URL and
the fixed sampling parameters differ.
"""

from typing import Any, Dict, Sequence

from ..models.request import Message
from .openai_adapter import OpenAIAdapter, to_chat_messages


class TogetherAdapter(OpenAIAdapter):
    """Llama models served by Together AI."""

    BASE_URL = "https://api.together.xyz/v1"
    MAX_TOKENS = 4096
    TEMPERATURE = 0.7

    SUGGESTED_MODELS = (
        "meta-llama/Meta-Llama-3.3-70B-Instruct-Turbo",
        "meta-llama/Llama-3.2-90B-Vision-Instruct-Turbo",
        "meta-llama/Llama-3.1-405B-Instruct-Turbo",
        "meta-llama/Llama-3.1-70B-Instruct-Turbo",
    )

    @property
    def provider_tag(self) -> str:
        return "llama"

    @property
    def display_name(self) -> str:
        return "Llama"

    def build_payload(
        self,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": to_chat_messages(system_prompt, messages),
            "max_tokens": self.MAX_TOKENS,
            "temperature": self.TEMPERATURE,
        }
