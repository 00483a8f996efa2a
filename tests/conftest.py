"""Shared pytest fixtures."""

import json

import httpx
import pytest

from chat_gateway.adapters import AnthropicAdapter, GeminiAdapter, OpenAIAdapter, TogetherAdapter
from chat_gateway.core.registry import ProviderRegistry


class RecordingTransport(httpx.MockTransport):
    """
    Mock transport that records outbound requests.

    Replies are served in order; the last one repeats once the queue runs out.
    An exception instance in the queue is raised instead of answered.
    """

    def __init__(self, *replies):
        self.requests = []
        self._replies = list(replies)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.pop(0) if len(self._replies) > 1 else self._replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)


def claude_reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={
        "id": "msg_123",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
    })


def openai_reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": text}, "finish_reason": "stop"}
        ],
    })


def gemini_reply(text: str) -> httpx.Response:
    return httpx.Response(200, json={
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ],
    })


REPLY_BUILDERS = {
    "claude": claude_reply,
    "openai": openai_reply,
    "gemini": gemini_reply,
    "llama": openai_reply,
}

ADAPTER_CLASSES = {
    "claude": AnthropicAdapter,
    "openai": OpenAIAdapter,
    "gemini": GeminiAdapter,
    "llama": TogetherAdapter,
}


def build_registry(transport: httpx.MockTransport) -> ProviderRegistry:
    """Registry with all four adapters sharing one mock transport."""
    registry = ProviderRegistry()
    for adapter_class in ADAPTER_CLASSES.values():
        registry.register(adapter_class(transport=transport))
    return registry


@pytest.fixture
def cat_request() -> dict:
    """Wire-format request body for a one-turn OpenAI conversation."""
    return {
        "systemPrompt": "You are a cat.",
        "messages": [{"role": "user", "content": "Meow?"}],
        "config": {"provider": "openai", "apiKey": "k", "model": "gpt-4"},
    }
