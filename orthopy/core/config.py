"""Configuration management for OrthoPy."""

from __future__ import annotations

import json
from argparse import ArgumentParser
import os

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from orthopy.utils import expand_file_path

DATA_DIR = os.path.join("~", ".orthopy")
DEFAULT_DICTIONARY_PATH = os.path.join(DATA_DIR, "words_alpha.txt")
DEFAULT_USER_DICTIONARY_PATH = os.path.join(DATA_DIR, "user_dictionary.txt")
DEFAULT_TEMP_OUTPUT_PATH = os.path.join(DATA_DIR, "temp_output.txt")
DEFAULT_SUGGESTION_COUNT = 10


class Config(BaseModel):
    """Configuration for a spell-checking session."""

    dictionary_path: str = Field(DEFAULT_DICTIONARY_PATH, description="Stock word list")
    user_dictionary_path: str = Field(
        DEFAULT_USER_DICTIONARY_PATH, description="Append-only learned words"
    )
    temp_output_path: str = Field(DEFAULT_TEMP_OUTPUT_PATH, description="Staged output document")
    output: str | None = None
    suggestion_count: int = Field(
        DEFAULT_SUGGESTION_COUNT, ge=1, description="Suggestions per error"
    )
    reports: str | None = None
    log_file: str | None = None
    seed_dictionary: bool = False
    reset_user_dictionary: bool = False
    verbose: bool = False
    debug: bool = False

    @field_validator(
        "dictionary_path",
        "user_dictionary_path",
        "temp_output_path",
        "output",
        "reports",
        "log_file",
    )
    @classmethod
    def expand_paths(cls, v):
        """Expand ~ in every path setting."""
        return expand_file_path(v) or v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        staging = os.path.abspath(self.temp_output_path)
        for name in ("dictionary_path", "user_dictionary_path"):
            if os.path.abspath(getattr(self, name)) == staging:
                raise ValueError(f"temp_output_path must differ from {name} ({staging})")
        return self

    model_config = {
        "validate_default": True,  # Expand ~ in the default paths too
    }


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "dictionary_path": get_value("dictionary_path", DEFAULT_DICTIONARY_PATH),
        "user_dictionary_path": get_value("user_dictionary_path", DEFAULT_USER_DICTIONARY_PATH),
        "temp_output_path": get_value("temp_output_path", DEFAULT_TEMP_OUTPUT_PATH),
        "output": get_value("output", None),
        "suggestion_count": get_value("suggestion_count", DEFAULT_SUGGESTION_COUNT),
        "reports": get_value("reports", None),
        "log_file": get_value("log_file", None),
        "seed_dictionary": cli_args.seed_dictionary or json_config.get("seed_dictionary", False),
        "reset_user_dictionary": cli_args.reset_user_dictionary
        or json_config.get("reset_user_dictionary", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
