"""Configuration management for Jaguar Image Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the JAGUAR_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (JAGUAR_* prefix)
2. .env file in the project root
3. Default values defined in JaguarConfig

Example .env file:
    JAGUAR_API_BASE_URL=https://username--shuttle-jaguar
    JAGUAR_GRADIO_SERVER_PORT=7860
    JAGUAR_DOWNLOADS_DIR=downloads

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from jaguar.core.config import config

    print(config.endpoint_domain_suffix)
    print(config.downloads_dir)

Remote Endpoint Addressing
--------------------------
The remote service is a Modal deployment. Each endpoint lives on its own
host, derived from the deployment base URL the user enters:

    <api_base_url>-<endpoint label><endpoint_domain_suffix>

e.g. ``https://username--shuttle-jaguar-shuttlejaguarmodel-generate-api.modal.run``.

Timeouts
--------
``request_timeout`` defaults to ``None``: the client waits for the remote
model however long it takes. Set it to a number of seconds to cap requests.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JaguarConfig(BaseSettings):
    """Main configuration for Jaguar Image Generator.

    Attributes
    ----------
    Remote API Settings:
        api_base_url : str
            Modal deployment base URL used to pre-fill the configuration screen
        endpoint_domain_suffix : str
            Domain appended after the endpoint label
        request_timeout : float | None
            Per-request timeout in seconds (None = wait indefinitely)

    Paths:
        downloads_dir : Path
            Directory where downloadable PNG files are written

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level used by the app entry point

    Examples
    --------
        >>> custom_config = JaguarConfig(
        ...     api_base_url="https://username--shuttle-jaguar",
        ...     request_timeout=120.0,
        ... )
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JAGUAR_",
        case_sensitive=False,
    )

    # Remote API settings
    api_base_url: str = Field(
        default="",
        description="Modal deployment base URL (without the endpoint suffix)",
    )
    endpoint_domain_suffix: str = Field(
        default=".modal.run",
        description="Domain appended to '<base>-<endpoint>' to form each endpoint host",
    )
    request_timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None disables the timeout)",
        gt=0,
    )

    # Paths
    downloads_dir: Path = Field(
        default=Path("downloads"),
        description="Directory for downloadable PNG files",
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the application",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the downloads directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.downloads_dir.mkdir(parents=True, exist_ok=True)


# Global configuration instance
# Loads values from environment variables (JAGUAR_* prefix) and .env file.
config = JaguarConfig()
