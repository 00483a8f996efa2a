"""
Direct OpenAI Chat Completions adapter.

The system prompt is injected as a leading ``system`` message.
"""

from typing import Any, Dict, List, Sequence

from ..core.interface import AbstractProvider
from ..models.request import Message


def to_chat_messages(system_prompt: str, messages: Sequence[Message]) -> List[Dict[str, str]]:
    """Build an OpenAI-style message list with the system prompt first."""
    chat_messages = [{"role": "system", "content": system_prompt}]
    chat_messages.extend({"role": m.role, "content": m.content} for m in messages)
    return chat_messages


class OpenAIAdapter(AbstractProvider):
    """
    Direct OpenAI API adapter.

    Authenticates with a bearer token.
    """

    BASE_URL = "https://api.openai.com/v1"

    SUGGESTED_MODELS = (
        "gpt-4-turbo-preview",
        "gpt-4",
        "gpt-3.5-turbo",
    )

    @property
    def provider_tag(self) -> str:
        return "openai"

    @property
    def display_name(self) -> str:
        return "OpenAI"

    def build_payload(
        self,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> Dict[str, Any]:
        """Convert a conversation to OpenAI chat format."""
        return {
            "model": model,
            "messages": to_chat_messages(system_prompt, messages),
        }

    async def complete(
        self,
        api_key: str,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> str:
        """Create a chat completion via the OpenAI API."""
        self._check_roles(messages)

        data = await self._post(
            "/chat/completions",
            self.build_payload(model, system_prompt, messages),
            headers={"Authorization": f"Bearer {api_key}"},
        )
        return self._reply_text(data, "choices", 0, "message", "content")
