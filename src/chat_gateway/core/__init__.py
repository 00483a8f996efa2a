"""
Core gateway components.
"""

from .interface import AbstractProvider
from .registry import ProviderRegistry, create_default_registry, get_registry
from .config import GatewaySettings, load_config
from .errors import (
    GatewayError,
    MalformedRequestError,
    UnsupportedProviderError,
    ProviderError,
    TransportError,
)

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
]
