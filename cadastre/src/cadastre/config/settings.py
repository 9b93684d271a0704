"""
Application settings with environment-based configuration.

Priority (highest to lowest):
1. Environment variables (from .env or system)
2. Environment-specific YAML config file (development.yaml, test.yaml, ...)
3. Default YAML config file (default.yaml)
4. Pydantic defaults
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from solders.pubkey import Pubkey  # type: ignore

from cadastre.domain.value_objects.program_registry import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    METADATA_PROGRAM_ID,
    PAYMENT_MINT,
    TOKEN_FACTORY_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    XYBER_PROGRAM_ID,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Program ids are protocol constants: overriding them is meant for
    localnet/devnet deployments and tests.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Application
    APP_NAME: str = "Cadastre"
    APP_VERSION: str = "0.1.0"
    ENV: str = Field(default="development", description="Environment name")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_DIR: Optional[str] = Field(
        default=None,
        description="Log directory (None = stdout only)",
    )
    VERBOSE: int = Field(default=1, ge=0, le=3, description="Reporter verbosity")

    # Solana programs
    XYBER_PROGRAM_ID: str = Field(
        default=XYBER_PROGRAM_ID,
        description="Xyber bonding-curve program",
    )
    TOKEN_FACTORY_PROGRAM_ID: str = Field(
        default=TOKEN_FACTORY_PROGRAM_ID,
        description="Token factory program owning the mint PDA",
    )
    METADATA_PROGRAM_ID: str = Field(
        default=METADATA_PROGRAM_ID,
        description="Metaplex token metadata program",
    )
    PAYMENT_MINT: str = Field(
        default=PAYMENT_MINT,
        description="Mint of the payment token",
    )
    TOKEN_PROGRAM_ID: str = Field(
        default=TOKEN_PROGRAM_ID,
        description="SPL Token program",
    )
    ASSOCIATED_TOKEN_PROGRAM_ID: str = Field(
        default=ASSOCIATED_TOKEN_PROGRAM_ID,
        description="SPL Associated Token Account program",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"Invalid LOG_LEVEL. Must be one of: {allowed}")
        return v_upper

    @field_validator(
        "XYBER_PROGRAM_ID",
        "TOKEN_FACTORY_PROGRAM_ID",
        "METADATA_PROGRAM_ID",
        "PAYMENT_MINT",
        "TOKEN_PROGRAM_ID",
        "ASSOCIATED_TOKEN_PROGRAM_ID",
    )
    @classmethod
    def validate_program_id(cls, v: str) -> str:
        """Validate base58 32-byte program id."""
        try:
            Pubkey.from_string(v)
        except (ValueError, TypeError):
            raise ValueError(f"Invalid program id: {v!r}")
        return v


def load_config(
    config_file: Optional[str] = None,
    env_file: Optional[str] = None,
    env: Optional[str] = None,
) -> Settings:
    """
    Load configuration from YAML files and environment variables.

    Priority: ENV vars > environment-specific YAML > default YAML > defaults

    Args:
        config_file: Optional YAML config filename override
        env_file: Optional .env filename (e.g., ".env.development")
        env: Optional environment name override (e.g., "development", "test")

    Returns:
        Settings instance

    Raises:
        ValidationError: If a configured value is invalid
    """
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent.parent
    config_dir = project_root / "config"

    environment = env or os.getenv("ENV", "production")

    env_map = {
        "production": (".env.production", "production.yaml"),
        "development": (".env.development", "development.yaml"),
        "test": (".env.test", "test.yaml"),
    }

    if env_file is None:
        default_env_file, default_config_file = env_map.get(
            environment, (".env.production", "production.yaml")
        )
        env_file = default_env_file
        if config_file is None:
            config_file = default_config_file

    env_file_path = project_root / env_file
    if env_file_path.exists():
        load_dotenv(env_file_path, override=True)

    default_config_path = config_dir / "default.yaml"
    merged_config = {}

    if default_config_path.exists():
        with open(default_config_path, "r") as f:
            loaded = yaml.safe_load(f)
            if loaded:
                merged_config = loaded

    if config_file:
        env_config_path = config_dir / config_file
        if env_config_path.exists():
            with open(env_config_path, "r") as f:
                loaded = yaml.safe_load(f)
                if loaded:
                    merged_config.update(loaded)

    # Environment variables win over YAML values
    for key in list(merged_config):
        if key in os.environ:
            merged_config.pop(key)

    return Settings(**merged_config)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or initialize global settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def override_settings(new_settings: Settings) -> None:
    """Override global settings (for testing)."""
    global _settings
    _settings = new_settings


def reset_settings() -> None:
    """Reset settings to force re-initialization (for testing)."""
    global _settings
    _settings = None
