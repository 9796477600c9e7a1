"""
Configuration management for the hangman client.

This module provides a typed interface to client configuration, loaded from
the [tool.hangman] table of pyproject.toml and HANGMAN_* environment variables.
"""

import tomllib
from typing import Optional
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


class HangmanConfiguration(BaseSettings):
    """
    Typed configuration object for the hangman client.

    Every value has a default, so an instance can be built without any
    TOML file. Command-line overrides are applied on top by the CLI.
    """

    # Server connection
    server_host: str = Field(
        default="erdos.dsm.fordham.edu", description="Host running the hangman server"
    )
    server_port: int = Field(
        default=9999, ge=1, le=65535, description="TCP port of the hangman server"
    )
    connect_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Seconds to wait for the connection to open"
    )
    read_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds to wait for a server line (None blocks indefinitely)",
    )
    encoding: str = Field(default="ascii", description="Wire protocol text encoding")

    # Gameplay
    guess_budget: int = Field(
        default=10, ge=1, description="Wrong guesses allowed per round"
    )
    preamble_lines: int = Field(
        default=2,
        ge=0,
        description="Banner lines the server sends before the first round's length",
    )
    unguessed_marker: str = Field(
        default="_", description="Character displayed for an unguessed slot"
    )

    # Logging
    debug: bool = Field(default=False, description="Trace protocol lines")
    json_log_file: Optional[str] = Field(
        default=None, description="Path to a JSON-lines structured log"
    )

    model_config = SettingsConfigDict(
        env_prefix="HANGMAN_",
        env_file=None,
        case_sensitive=False,
        extra="forbid",  # Catch typos in config early
    )

    @field_validator("unguessed_marker")
    @classmethod
    def validate_unguessed_marker(cls, value: str) -> str:
        """The marker must be one character that can never be a guessed letter."""
        if len(value) != 1:
            raise ValueError(
                f"unguessed_marker must be a single character, got {value!r}"
            )
        if value.isalpha():
            raise ValueError(
                f"unguessed_marker must not be a letter, got {value!r}"
            )
        return value

    @classmethod
    def from_toml(cls, config_file: Optional[Path] = None) -> "HangmanConfiguration":
        """
        Create HangmanConfiguration by loading the [tool.hangman] table.

        Args:
            config_file: Path to TOML file (defaults to pyproject.toml)

        Returns:
            HangmanConfiguration instance loaded from TOML

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If the [tool.hangman] section is missing
        """
        # Load .env file if it exists to populate environment variables
        load_dotenv()

        config_file = config_file or Path("pyproject.toml")

        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, "rb") as f:
            toml_data = tomllib.load(f)

        try:
            hangman_config = toml_data["tool"]["hangman"]
        except KeyError:
            raise KeyError(f"Missing [tool.hangman] section in {config_file}")

        server_config = hangman_config.get("server", {})
        gameplay_config = hangman_config.get("gameplay", {})
        logging_config = hangman_config.get("logging", {})

        config_dict = {
            # Server connection
            "server_host": server_config.get("host"),
            "server_port": server_config.get("port"),
            "connect_timeout_seconds": server_config.get("connect_timeout_seconds"),
            "read_timeout_seconds": server_config.get("read_timeout_seconds"),
            "encoding": server_config.get("encoding"),
            # Gameplay
            "guess_budget": gameplay_config.get("guess_budget"),
            "preamble_lines": gameplay_config.get("preamble_lines"),
            "unguessed_marker": gameplay_config.get("unguessed_marker"),
            # Logging
            "debug": logging_config.get("debug"),
            "json_log_file": logging_config.get("json_log_file"),
        }

        # Absent keys fall back to the field defaults
        config_dict = {k: v for k, v in config_dict.items() if v is not None}

        return cls(**config_dict)
