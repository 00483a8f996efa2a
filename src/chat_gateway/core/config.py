"""
Configuration loading for the chat gateway service.

Provider credentials are never part of this configuration; they arrive with
each request.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS = [
    Path("config/chat-gateway/gateway.yaml"),
    Path("/etc/chat-gateway/gateway.yaml"),
    Path.home() / ".config/chat-gateway/gateway.yaml",
]


@dataclass
class GatewaySettings:
    """Service-level settings."""
    timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    otel_endpoint: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GatewaySettings":
        """Build settings from a parsed YAML mapping."""
        defaults = cls()
        origins = data.get("cors_origins", defaults.cors_origins)
        if isinstance(origins, str):
            origins = _split_origins(origins)
        return cls(
            timeout=float(data.get("timeout", defaults.timeout)),
            host=data.get("host", defaults.host),
            port=int(data.get("port", defaults.port)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            cors_origins=list(origins),
            otel_endpoint=data.get("otel_endpoint") or None,
        )


def _split_origins(value: str) -> List[str]:
    return [o.strip() for o in value.split(",") if o.strip()]


def load_config(config_path: Optional[str] = None) -> GatewaySettings:
    """
    Load settings from YAML, then apply environment overrides.

    Args:
        config_path: Path to config file. If None, uses default locations.

    Returns:
        Loaded settings
    """
    if config_path is None:
        config_path = os.environ.get("CHAT_GATEWAY_CONFIG")

    if config_path is None:
        for p in DEFAULT_CONFIG_PATHS:
            if p.exists():
                config_path = str(p)
                break

    data: Dict[str, Any] = {}
    if config_path is None or not Path(config_path).exists():
        logger.warning("No chat gateway config file found, using defaults")
    else:
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config from {config_path}: {e}")
            data = {}

    settings = GatewaySettings.from_dict(data)
    _apply_env_overrides(settings)
    return settings


def _apply_env_overrides(settings: GatewaySettings) -> None:
    """Override settings from environment variables."""
    if os.environ.get("CHAT_GATEWAY_TIMEOUT"):
        settings.timeout = float(os.environ["CHAT_GATEWAY_TIMEOUT"])
    if os.environ.get("CHAT_GATEWAY_HOST"):
        settings.host = os.environ["CHAT_GATEWAY_HOST"]
    if os.environ.get("CHAT_GATEWAY_PORT"):
        settings.port = int(os.environ["CHAT_GATEWAY_PORT"])
    if os.environ.get("LOG_LEVEL"):
        settings.log_level = os.environ["LOG_LEVEL"].upper()
    if os.environ.get("CORS_ORIGINS"):
        settings.cors_origins = _split_origins(os.environ["CORS_ORIGINS"])
    if os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT"):
        settings.otel_endpoint = os.environ["OTEL_EXPORTER_OTLP_ENDPOINT"]
