"""Rendering settings shared by every validator.

Settings control how violations are rendered into the joined failure
message and how enum-membership failures list the valid labels. The
defaults produce ``"<key> - <message>"`` items joined with ``", "``.

Settings can be loaded from a dictionary, a YAML/JSON file or environment
variables of the form ``CHECKKNOBS_<ATTRIBUTE>``:

    CHECKKNOBS_KEY_SEPARATOR=": "
    CHECKKNOBS_VIOLATION_SEPARATOR="; "
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Union

import yaml  # type: ignore[import-untyped]

from checkknobs_common import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CHECKKNOBS_"


@dataclass(frozen=True)
class ValidatorSettings:
    """Rendering constants for violations and outcome messages."""

    key_separator: str = " - "
    violation_separator: str = ", "
    enum_values_prefix: str = " and valid values are "
    enum_values_separator: str = ", "

    def __post_init__(self) -> None:
        for setting in fields(self):
            value = getattr(self, setting.name)
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"Setting '{setting.name}' must be a string, got {type(value).__name__}",
                    context={"setting": setting.name, "value": value},
                )

    @classmethod
    def names(cls) -> list[str]:
        return [setting.name for setting in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidatorSettings:
        """Create settings from a dictionary, defaulting absent keys.

        Args:
            data: Mapping of setting names to values

        Returns:
            ValidatorSettings instance

        Raises:
            ConfigurationError: If the mapping contains unknown keys
        """
        unknown = sorted(set(data) - set(cls.names()))
        if unknown:
            raise ConfigurationError(
                f"Unknown validator settings: {', '.join(unknown)}",
                context={"unknown": unknown, "allowed": cls.names()},
            )
        return cls(**dict(data))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> ValidatorSettings:
        """Load settings from a YAML or JSON file.

        Args:
            path: Path to the settings file

        Returns:
            ValidatorSettings instance

        Raises:
            ConfigurationError: If the file is missing, has an unsupported
                extension or does not contain a mapping
        """
        path = Path(path).resolve()
        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f)
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(
                    f"Unsupported settings file format: {suffix}",
                    context={"path": str(path)},
                )

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )

        logger.info(f"Loaded validator settings from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        base: ValidatorSettings | None = None,
    ) -> ValidatorSettings:
        """Apply environment variable overrides on top of ``base``.

        Args:
            prefix: Environment variable prefix
            base: Settings to override (defaults to the built-in defaults)

        Returns:
            ValidatorSettings instance with overrides applied
        """
        overrides = {}
        for name in cls.names():
            env_var = f"{prefix}{name.upper()}"
            if env_var in os.environ:
                overrides[name] = os.environ[env_var]

        if overrides:
            logger.info(f"Applying validator settings from environment: {sorted(overrides)}")
        return replace(base or cls(), **overrides)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


_settings = ValidatorSettings()


def get_settings() -> ValidatorSettings:
    """Return the process-wide default settings."""
    return _settings


def configure(settings: ValidatorSettings | Mapping[str, Any]) -> ValidatorSettings:
    """Replace the process-wide default settings.

    Validators already constructed keep the settings they captured.

    Args:
        settings: Settings instance or a mapping accepted by ``from_dict``

    Returns:
        The settings now in effect
    """
    global _settings
    if not isinstance(settings, ValidatorSettings):
        settings = ValidatorSettings.from_dict(settings)
    _settings = settings
    return _settings


def reset_settings() -> ValidatorSettings:
    """Restore the built-in default settings."""
    return configure(ValidatorSettings())
