"""
Provider-agnostic request models for the chat gateway.

Field names follow the wire format of the inbound ``/complete`` body
(``systemPrompt``, ``apiKey``); snake_case names are accepted as well.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A single conversation turn."""
    role: Literal["user", "assistant"]
    content: str


class Conversation(BaseModel):
    """
    System prompt plus ordered turns.

    The system prompt is opaque to the gateway; ``messages`` may be empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: str = Field(default="", alias="systemPrompt")
    messages: List[Message] = Field(default_factory=list)


class ProviderConfig(BaseModel):
    """Provider selection and credentials for one call."""
    model_config = ConfigDict(populate_by_name=True)

    # Left as free text so unknown tags reach the router.
    provider: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1, alias="apiKey", repr=False)
    model: str = Field(..., min_length=1)


class CompletionRequest(Conversation):
    """Conversation plus provider configuration."""
    config: ProviderConfig
