"""
Abstract provider interface definition.

Defines the contract that all provider adapters must implement, plus the
shared HTTP plumbing (client lifecycle, status checking, transport errors).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from ..models.request import Message
from .errors import MalformedRequestError, ProviderError, TransportError

logger = logging.getLogger(__name__)

VALID_ROLES = ("user", "assistant")


class AbstractProvider(ABC):
    """
    Abstract base class for LLM provider adapters.

    An adapter owns one provider's wire format: it turns a system prompt
    and a list of turns into that provider's HTTP request and pulls the
    reply text out of the response. Credentials are passed per call and
    never stored on the adapter.
    """

    BASE_URL: str = ""
    SUGGESTED_MODELS: Tuple[str, ...] = ()

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the adapter.

        Args:
            base_url: Override for the provider API root (tests only)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    @abstractmethod
    def provider_tag(self) -> str:
        """
        Tag used by callers to select this adapter.

        Returns:
            Provider tag (e.g., "claude", "gemini")
        """
        pass

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable provider name used in error messages."""
        pass

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the pooled HTTP client."""
        if self._client is not None:
            return

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
            transport=self._transport,
        )
        logger.info(f"Connected {self.display_name} adapter to {self._base_url}")

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info(f"Disconnected {self.display_name} adapter")

    @abstractmethod
    async def complete(
        self,
        api_key: str,
        model: str,
        system_prompt: str,
        messages: Sequence[Message],
    ) -> str:
        """
        Get the assistant's next utterance.

        Args:
            api_key: Provider credential
            model: Provider model identifier
            system_prompt: Opaque system prompt text
            messages: Ordered conversation turns

        Returns:
            Reply text

        Raises:
            MalformedRequestError: If the turns cannot be expressed for this provider
            ProviderError: If the provider answers with a non-success status
            TransportError: If the provider cannot be reached
        """
        pass

    async def list_models(self) -> List[Dict[str, Any]]:
        """List suggested models for this provider."""
        return [{"id": model, "object": "model"} for model in self.SUGGESTED_MODELS]

    async def _post(
        self,
        path: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        POST a JSON payload and return the decoded JSON body.

        Non-2xx responses raise ``ProviderError`` with the raw body text.
        """
        if not self._client:
            await self.connect()

        try:
            response = await self._client.post(
                path,
                json=payload,
                headers=headers,
                params=params,
            )
        except httpx.RequestError as e:
            logger.warning(f"{self.display_name} transport failure: {e!r}")
            raise TransportError(
                f"{self.display_name} request failed: {str(e) or type(e).__name__}",
                provider=self.provider_tag,
            ) from e

        self._check_response_errors(response)

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(self.display_name, response.text, response.status_code) from e

    def _check_response_errors(self, response: httpx.Response) -> None:
        """Raise ProviderError for any non-success status."""
        if response.is_success:
            return

        logger.warning(
            f"{self.display_name} returned HTTP {response.status_code}"
        )
        raise ProviderError(self.display_name, response.text, response.status_code)

    def _reply_text(self, data: Any, *path: Union[str, int]) -> str:
        """
        Walk ``path`` through a decoded success body and return the reply text.

        Raises:
            ProviderError: If the path is missing or does not end in a string
        """
        node = data
        try:
            for key in path:
                node = node[key]
        except (KeyError, IndexError, TypeError):
            node = None

        if not isinstance(node, str):
            raise ProviderError(self.display_name, f"unexpected response shape: {data}")
        return node

    @staticmethod
    def _check_roles(messages: Sequence[Message]) -> None:
        for m in messages:
            if m.role not in VALID_ROLES:
                raise MalformedRequestError(f"Unrecognized message role: {m.role!r}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider={self.provider_tag!r}, base_url={self._base_url!r})"
