"""
Anthropic (Claude) Messages API adapter.

The system prompt travels in the dedicated top-level ``system`` field;
turns are sent unchanged.
"""

from typing import Any, Dict, Sequence

from ..core.interface import AbstractProvider
from ..models.request import Message


class AnthropicAdapter(AbstractProvider):
    """
    Direct Anthropic API adapter.

    Authenticates with the ``x-api-key`` header plus an explicit API version.
    """

    BASE_URL = "https://api.anthropic.com/v1"
    ANTHROPIC_VERSION = "2023-06-01"
    MAX_TOKENS = 4096

    SUGGESTED_MODELS = (
        "claude-sonnet-4-20250514",
        "claude-opus-4-20250514",
        "claude-3-5-sonnet-20241022",
    )

    @property
    def provider_tag(self) -> str:
        return "claude"

    @property
    def display_name(self) -> str:
        return "Claude"

    def build_payload(
        self,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> Dict[str, Any]:
        """Convert a conversation to Anthropic Messages format."""
        return {
            "model": model,
            "max_tokens": self.MAX_TOKENS,
            "system": system_prompt,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }

    async def complete(
        self,
        api_key: str,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> str:
        """Create a completion via the Anthropic Messages API."""
        self._check_roles(messages)

        data = await self._post(
            "/messages",
            self.build_payload(model, system_prompt, messages),
            headers={
                "x-api-key": api_key,
                "anthropic-version": self.ANTHROPIC_VERSION,
            },
        )

        return self._reply_text(data, "content", 0, "text")
