"""Configuration file loaders for JSON and TOML formats."""

import json
import tomllib
from pathlib import Path
from typing import Any

from .._logging import logger
from .models import Settings


class ConfigLoader:
    """Load and save analysis Settings as JSON or TOML files.

    Files may specify any subset of the settings; omitted fields keep their
    defaults. Nested sections map onto the nested models, e.g. in TOML:

        sentinel_mode = "strict"

        [thresholds]
        min_bpm_slow = 160.0

        [loader]
        on_malformed = "raise"

    Examples:
        settings = ConfigLoader.from_file("aed.toml")
        ConfigLoader.to_json(settings, "aed.json")
    """

    @staticmethod
    def from_json(path: str | Path) -> Settings:
        """Load settings from a JSON file.

        Raises:
            FileNotFoundError: If file does not exist
            json.JSONDecodeError: If file is not valid JSON
            pydantic.ValidationError: If config doesn't match schema
        """
        with Path(path).open("r", encoding="utf-8") as f:
            data = json.load(f)
        return ConfigLoader.from_dict(data, source=path)

    @staticmethod
    def from_toml(path: str | Path) -> Settings:
        """Load settings from a TOML file.

        Raises:
            FileNotFoundError: If file does not exist
            tomllib.TOMLDecodeError: If file is not valid TOML
            pydantic.ValidationError: If config doesn't match schema
        """
        with Path(path).open("rb") as f:
            data = tomllib.load(f)
        return ConfigLoader.from_dict(data, source=path)

    @staticmethod
    def from_dict(data: dict[str, Any], source: str | Path | None = None) -> Settings:
        """Validate a plain mapping into Settings."""
        settings = Settings.model_validate(data)
        if source is not None:
            logger.info(f"Loaded settings from {source}")
        return settings

    @staticmethod
    def from_file(path: str | Path) -> Settings:
        """Load settings from a file, auto-detecting format by extension.

        Args:
            path: Path to configuration file (.json or .toml)

        Raises:
            ValueError: If file extension is not .json or .toml
            FileNotFoundError: If file does not exist
        """
        path = Path(path)
        readers = {".json": ConfigLoader.from_json, ".toml": ConfigLoader.from_toml}
        reader = readers.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Unsupported config file format: {path.suffix!r}. Only .json and .toml are supported."
            )
        return reader(path)

    @staticmethod
    def to_json(settings: Settings, path: str | Path) -> Path:
        """Write settings to a JSON file and return its path."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Saved settings to {path}")
        return path
