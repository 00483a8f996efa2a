"""
Provider registry: maps provider tags to adapters and dispatches calls.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from .config import load_config
from .errors import UnsupportedProviderError
from .interface import AbstractProvider
from ..models.request import Message

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Registry of provider adapters.

    Adding a provider means writing one adapter and registering it here.
    """

    def __init__(self):
        """Initialize the registry."""
        self._adapters: Dict[str, AbstractProvider] = {}

    def register(self, adapter: AbstractProvider) -> None:
        """
        Register an adapter under its provider tag.

        Args:
            adapter: Adapter instance; replaces any adapter with the same tag
        """
        self._adapters[adapter.provider_tag] = adapter
        logger.info(f"Registered provider adapter: {adapter.provider_tag}")

    def unregister(self, provider: str) -> None:
        self._adapters.pop(provider, None)

    def get(self, provider: str) -> AbstractProvider:
        """
        Get the adapter for a provider tag.

        Raises:
            UnsupportedProviderError: If no adapter is registered for the tag
        """
        try:
            return self._adapters[provider]
        except KeyError:
            raise UnsupportedProviderError(provider) from None

    def list_providers(self) -> List[str]:
        return list(self._adapters)

    async def route(
        self,
        provider: str,
        api_key: str,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> str:
        """
        Forward a completion to the adapter selected by ``provider``.

        Args:
            provider: Provider tag
            api_key: Provider credential
            model: Provider model identifier
            system_prompt: Opaque system prompt text
            messages: Ordered conversation turns

        Returns:
            Reply text from the provider
        """
        adapter = self.get(provider)
        return await adapter.complete(api_key, model, system_prompt, messages)

    async def describe(self) -> List[Dict[str, Any]]:
        """List registered providers with their suggested models."""
        return [
            {
                "provider": tag,
                "models": [m["id"] for m in await adapter.list_models()],
            }
            for tag, adapter in self._adapters.items()
        ]

    async def connect_all(self) -> None:
        """Open HTTP clients for all adapters."""
        for adapter in self._adapters.values():
            await adapter.connect()

    async def disconnect_all(self) -> None:
        """Close HTTP clients for all adapters."""
        for adapter in self._adapters.values():
            try:
                await adapter.disconnect()
            except Exception as e:
                logger.error(f"Failed to disconnect {adapter.provider_tag}: {e}")

    async def __aenter__(self) -> "ProviderRegistry":
        await self.connect_all()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect_all()


def create_default_registry(timeout: float = 60.0) -> ProviderRegistry:
    """Build a registry with the four built-in adapters."""
    from ..adapters import AnthropicAdapter, GeminiAdapter, OpenAIAdapter, TogetherAdapter

    registry = ProviderRegistry()
    for adapter_class in (AnthropicAdapter, OpenAIAdapter, GeminiAdapter, TogetherAdapter):
        registry.register(adapter_class(timeout=timeout))
    return registry


# Global registry instance
_registry: Optional[ProviderRegistry] = None


def get_registry() -> ProviderRegistry:
    """
    Get the global provider registry.

    Adapter clients are bound to the event loop that opens them; callers
    sharing this registry own its lifecycle (``connect_all``/``disconnect_all``
    or ``async with``) and must stay on one loop.
    """
    global _registry
    if _registry is None:
        _registry = create_default_registry(timeout=load_config().timeout)
    return _registry
