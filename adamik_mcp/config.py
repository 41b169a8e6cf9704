"""
Configuration helpers for the Adamik MCP server.

This module centralizes base URL selection, API key loading, default timeouts,
and the supported chain allow-list. No secrets are stored in the repository;
the API key is read from environment or a local file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from adamik_mcp.chains import DEFAULT_SUPPORTED_CHAINS

# Default connection settings
DEFAULT_BASE_URL = os.getenv("ADAMIK_API_BASE_URL", "https://api.adamik.io/api")


def _load_timeout() -> float:
    raw_timeout = os.getenv("ADAMIK_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "ADAMIK_API_KEY"
API_KEY_FILE_ENV_VAR = "ADAMIK_API_KEY_FILE"
DEFAULT_API_KEY_FILE = "apikey.txt"
SIGNING_KEY_ENV_VAR = "STARKNET_PRIVATE_KEY"

USER_AGENT = "Adamik MCP Server"
LOG_LEVEL = os.getenv("ADAMIK_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("ADAMIK_MCP_LOG_FORMAT", "json")  # json or plain


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, problems: List[str]) -> None:
        super().__init__("; ".join(problems))
        self.problems = problems


def load_api_key() -> Optional[str]:
    """
    Load the Adamik API key from environment or a local file.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR, DEFAULT_API_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


def _parse_chain_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _load_supported_chains() -> List[str]:
    configured = _parse_chain_list(os.getenv("ADAMIK_SUPPORTED_CHAINS"))
    return configured or list(DEFAULT_SUPPORTED_CHAINS)


@dataclass(slots=True)
class AdamikConfig:
    """Runtime configuration for Adamik API access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = field(default_factory=load_api_key)
    starknet_private_key: Optional[str] = field(
        default_factory=lambda: os.getenv(SIGNING_KEY_ENV_VAR) or None
    )
    supported_chains: List[str] = field(default_factory=_load_supported_chains)
    user_agent: str = USER_AGENT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    @property
    def openapi_url(self) -> str:
        """URL of the OpenAPI document, served from the API host root."""
        base = self.base_url.rstrip("/")
        if base.endswith("/api"):
            base = base[: -len("/api")]
        return f"{base}/openapi.json"

    def is_supported_chain(self, chain_id: str) -> bool:
        return chain_id in self.supported_chains


def validate_config(config: AdamikConfig) -> AdamikConfig:
    """
    Check the settings the server cannot start without.

    Raises:
        ConfigError: listing every problem found.
    """
    problems: List[str] = []
    parsed = urlparse(config.base_url or "")
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        problems.append("ADAMIK_API_BASE_URL: must be a valid http(s) URL")
    if not config.api_key or not config.api_key.strip():
        problems.append("ADAMIK_API_KEY: must be set to a non-empty value")
    if config.timeout <= 0:
        problems.append("ADAMIK_HTTP_TIMEOUT: must be a positive number of seconds")
    if not config.supported_chains:
        problems.append("ADAMIK_SUPPORTED_CHAINS: at least one chain is required")
    if problems:
        raise ConfigError(problems)
    return config


default_config = AdamikConfig()
