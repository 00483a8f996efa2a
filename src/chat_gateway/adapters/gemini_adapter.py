"""
Google Gemini (Generative Language API) adapter.

Gemini has no system role, so the system prompt is merged into the text of
the first turn as ``"{system_prompt}\\n\\nUser: {first_message}"``. Every
later turn is sent unaltered, with ``assistant`` renamed to ``model``.
The model is chosen by URL path and the key goes in the ``key`` query
parameter.
"""

from typing import Any, Dict, List, Sequence

from ..core.errors import MalformedRequestError
from ..core.interface import AbstractProvider
from ..models.request import Message

ROLE_MAP = {
    "user": "user",
    "assistant": "model",
}


class GeminiAdapter(AbstractProvider):
    """
    Google Gemini adapter.

    Supports:
    - Gemini 1.5 Pro, Flash
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    SUGGESTED_MODELS = (
        "gemini-1.5-pro",
        "gemini-1.5-flash",
    )

    @property
    def provider_tag(self) -> str:
        return "gemini"

    @property
    def display_name(self) -> str:
        return "Gemini"

    def _map_role(self, role: str) -> str:
        try:
            return ROLE_MAP[role]
        except KeyError:
            raise MalformedRequestError(
                f"Unrecognized message role: {role!r}",
                provider=self.provider_tag,
            )

    def build_contents(
        self,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> List[Dict[str, Any]]:
        """Convert a conversation to Gemini ``contents``."""
        if not messages:
            raise MalformedRequestError(
                "Gemini requires at least one message to carry the system prompt",
                provider=self.provider_tag,
            )

        for m in messages:
            self._map_role(m.role)

        first, rest = messages[0], messages[1:]
        contents = [{
            "role": "user",
            "parts": [{"text": f"{system_prompt}\n\nUser: {first.content}"}],
        }]
        contents.extend(
            {"role": self._map_role(m.role), "parts": [{"text": m.content}]}
            for m in rest
        )
        return contents

    async def complete(
        self,
        api_key: str,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> str:
        """Generate content via the Gemini API."""
        contents = self.build_contents(system_prompt, messages)

        data = await self._post(
            f"/models/{model}:generateContent",
            {"contents": contents},
            params={"key": api_key},
        )

        return self._reply_text(data, "candidates", 0, "content", "parts", 0, "text")
