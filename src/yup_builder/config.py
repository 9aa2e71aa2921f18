"""
Configuration module for the Yup schema builder.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class BuilderConfig:
    """Configuration settings for the Yup schema builder."""

    # Browser UI settings
    ui_host: str = "0.0.0.0"
    ui_port: int = 7860
    ui_theme: str = "dark"  # light, dark or system

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # HTTP API URL used by the client
    api_url: str = "http://localhost:8080"

    # Logging
    log_level: str = "INFO"
    verbose_output: bool = False

    @classmethod
    def from_env(cls) -> "BuilderConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            ui_host=os.getenv("YUP_BUILDER_UI_HOST", _defaults.ui_host),
            ui_port=int(os.getenv("YUP_BUILDER_UI_PORT", str(_defaults.ui_port))),
            ui_theme=os.getenv("YUP_BUILDER_THEME", _defaults.ui_theme).lower(),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            api_url=os.getenv("YUP_BUILDER_API_URL", _defaults.api_url),
            log_level=os.getenv("YUP_BUILDER_LOG_LEVEL", _defaults.log_level).upper(),
            verbose_output=os.getenv("YUP_BUILDER_VERBOSE_OUTPUT", str(_defaults.verbose_output).lower()).lower() == "true",
        )


config = BuilderConfig.from_env()


def get_config() -> BuilderConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> BuilderConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
