"""Configuration management for concatwords."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from concatwords.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a composite word analysis run."""

    inputs: list[str] = Field(default_factory=list, description="Word list files")
    english_words: bool = Field(False, description="Use the english-words web2 list")
    test: bool = Field(False, description="Run on the built-in sample list")
    jobs: int = Field(1, ge=1, description="Parallel workers (1 = sequential)")
    chunk_size: int = Field(Constants.DEFAULT_CHUNK_SIZE, ge=1, description="Words per task")
    tie_break: Literal["scan", "lexicographic"] = Field(
        "scan", description="Order used to break length ties"
    )
    strict: bool = Field(False, description="Fail on malformed words instead of skipping")
    show_components: bool = False
    reports: str | None = None
    verbose: bool = False
    debug: bool = False

    @field_validator("inputs", mode="before")
    @classmethod
    def parse_inputs(cls, v):
        """Accept a single path or a list of paths."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [v]
        return v

    @model_validator(mode="after")
    def validate_sources(self):
        """Allow at most one word source."""
        sources = [bool(self.inputs), self.english_words, self.test]
        if sum(sources) > 1:
            raise ValueError("input files, english_words and test are mutually exclusive")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
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
        "inputs": get_value("inputs", []),
        "english_words": get_value("english_words", False),
        "test": get_value("test", False),
        "jobs": get_value("jobs", 1),
        "chunk_size": get_value("chunk_size", Constants.DEFAULT_CHUNK_SIZE),
        "tie_break": get_value("tie_break", "scan"),
        "strict": get_value("strict", False),
        "show_components": get_value("show_components", False),
        "reports": get_value("reports", None),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
