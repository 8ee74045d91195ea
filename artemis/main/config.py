"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from artemis.shared import EnumEnvironment, EnumLogLevel
from artemis.shared.env import load_secret_file_variables  # noqa: F401


class GatewaySettings(BaseSettings):
    """HTTP surface configuration settings."""

    title: str = Field(default="Artemis Gateway", description="Service title")
    description: str = Field(
        default="Unified API gateway for lights, TV remotes and cameras",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("GATEWAY_GIT_COMMIT", "GIT_COMMIT"),
    )
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8080, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    api_base_path: str = Field(default="/api", description="Prefix of every route")
    request_logging: bool = Field(
        default=True, description="Log one line per handled request"
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class GoveeSettings(BaseSettings):
    """Cloud light API settings; each key is one account."""

    api_key: Optional[str] = Field(default=None, description="Primary account key")
    api_key_secondary: Optional[str] = Field(
        default=None, description="Secondary account key"
    )
    base_url: str = Field(
        default="https://developer-api.govee.com", description="Cloud API base URL"
    )
    timeout: float = Field(default=10.0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="GOVEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class FireTVSettings(BaseSettings):
    """TV remote microservice settings."""

    service_url: str = Field(
        default="http://localhost:9090", description="Remote microservice URL"
    )
    timeout: float = Field(
        default=15.0, description="Request timeout; discovery scans take ~5s"
    )

    model_config = SettingsConfigDict(
        env_prefix="FIRETV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class WyzeSettings(BaseSettings):
    """Camera streaming bridge settings."""

    bridge_url: str = Field(
        default="http://localhost:5050", description="Bridge web UI / API URL"
    )
    bridge_api_key: Optional[str] = Field(
        default=None, description="Bridge API key, when the bridge requires one"
    )
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    hls_port: int = Field(default=8888, description="HLS re-stream port")
    rtsp_port: int = Field(default=8554, description="RTSP re-stream port")
    webrtc_port: int = Field(default=8889, description="WebRTC re-stream port")

    model_config = SettingsConfigDict(
        env_prefix="WYZE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    gateway: GatewaySettings = Field(default_factory=GatewaySettings)
    govee: GoveeSettings = Field(default_factory=GoveeSettings)
    firetv: FireTVSettings = Field(default_factory=FireTVSettings)
    wyze: WyzeSettings = Field(default_factory=WyzeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def collect_api_keys(*keys: Optional[str]) -> List[str]:
    """Configured keys in order, skipping unset or blank ones.

    >>> collect_api_keys("primary", None, " ")
    ['primary']
    """
    return [key.strip() for key in keys if key and key.strip()]


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
