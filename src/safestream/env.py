from __future__ import annotations

import os
from typing import Optional
from urllib.parse import urlparse

from eth_utils import to_checksum_address
from pydantic import BaseModel, field_validator

from .chain.addresses import is_well_formed_address


def _validate_http_url(name: str, v: str) -> str:
    if not v:
        raise ValueError(f"{name} cannot be empty")
    parsed = urlparse(v)
    if parsed.scheme not in {"http", "https"}:
        raise ValueError(f"{name} must start with http:// or https://")
    if not parsed.netloc:
        raise ValueError(f"{name} must include a host")
    return v


def _parse_rpc_urls(raw: str) -> dict[str, str]:
    """Parse ``network=url,network=url`` into a mapping."""
    urls: dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        network, sep, url = item.partition("=")
        if not sep or not network.strip():
            raise ValueError(f"RPC_URLS entry must look like network=url, got {item!r}")
        urls[network.strip().lower()] = url.strip()
    return urls


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # Wallet the streams are funded from
    safe_address: str
    safe_network: str = "mainnet"

    # Collaborators
    rpc_urls: dict[str, str] = {}
    submission_base_url: str
    network_config_file: Optional[str] = None
    http_timeout_seconds: float = 10.0

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "SafeStream"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    @field_validator("safe_address")
    @classmethod
    def validate_safe_address(cls, v: str) -> str:
        if not v:
            raise ValueError("Safe address cannot be empty")
        if not is_well_formed_address(v):
            raise ValueError(f"Invalid Safe address: {v}")
        return to_checksum_address(v)

    @field_validator("submission_base_url")
    @classmethod
    def validate_submission_base_url(cls, v: str) -> str:
        return _validate_http_url("Submission base URL", v)

    @field_validator("rpc_urls")
    @classmethod
    def validate_rpc_urls(cls, v: dict[str, str]) -> dict[str, str]:
        for network, url in v.items():
            _validate_http_url(f"RPC URL for '{network}'", url)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    safe_address = os.environ.get("SAFE_ADDRESS")
    submission_base_url = os.environ.get("SUBMISSION_BASE_URL")
    if not (safe_address and submission_base_url):
        raise ValueError("SAFE_ADDRESS and SUBMISSION_BASE_URL are required")
    return Settings(
        safe_address=safe_address,
        safe_network=os.environ.get("SAFE_NETWORK", "mainnet").lower(),
        rpc_urls=_parse_rpc_urls(os.environ.get("RPC_URLS", "")),
        submission_base_url=submission_base_url,
        network_config_file=os.environ.get("NETWORK_CONFIG_FILE") or None,
        http_timeout_seconds=float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10")),
        api_host=os.environ.get("API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("API_PORT", "8000")),
        api_debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        api_cors_origins=os.environ.get("API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("APP_NAME", "SafeStream"),
        app_version=os.environ.get("APP_VERSION", "1.0.0"),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )
