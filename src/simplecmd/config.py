"""
Parser configuration: prefixes, separators and scanning switches.

A `ParserConfig` can be built directly, from a named `OptionStyle` preset, or
from the settings section of a YAML or JSON configuration file. A field set
to None disables the corresponding feature.
"""

import dataclasses
import enum
import json
import logging
import os
from typing import Any, Optional, Union

try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False

logger = logging.getLogger(__name__)


class OptionStyle(enum.Enum):
    """Named configuration presets."""

    DEFAULT = "default"
    WINDOWS = "windows"
    POWERSHELL = "powershell"

    @classmethod
    def from_value(cls, style: Union["OptionStyle", str]) -> "OptionStyle":
        """Accept a member or its (case-insensitive) name."""
        if isinstance(style, cls):
            return style
        if isinstance(style, str):
            try:
                return cls(style.lower())
            except ValueError:
                pass
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown option style: {style!r}. Must be one of: {choices}")


_STRING_FIELDS = ("long_prefix", "long_value_separator", "short_prefix", "stop_trigger")
_BOOL_FIELDS = ("cluster_short_options", "stop_on_first_positional")


def _strict_bool(value: Any, field_name: str) -> bool:
    """
    Interpret a configuration value as a boolean strictly.

    Accepts real booleans and the strings 'True', 'true', '1', 'False',
    'false', '0'. Raises TypeError for anything else.
    """
    if isinstance(value, bool):
        return value
    if value in ("True", "true", "1"):
        return True
    elif value in ("False", "false", "0"):
        return False
    else:
        raise TypeError(
            f"Field '{field_name}' expects bool, got {type(value).__name__}: {value!r}"
        )


@dataclasses.dataclass
class ParserConfig:
    """
    Tunable settings that control how tokens are classified.

    Attributes:
        long_prefix: Prefix of long options (e.g. "--"). None disables long options.
        long_value_separator: Separator between a long option and an inline
            value (e.g. "="). None means values must be separate tokens.
        short_prefix: Prefix of short options (e.g. "-"). None disables short options.
        stop_trigger: Token that ends option scanning (e.g. "--"). None disables it.
        cluster_short_options: Whether "-abc" means "-a -b -c".
        stop_on_first_positional: Whether the first positional argument ends
            option scanning.
    """

    long_prefix: Optional[str] = "--"
    long_value_separator: Optional[str] = "="
    short_prefix: Optional[str] = "-"
    stop_trigger: Optional[str] = "--"
    cluster_short_options: bool = True
    stop_on_first_positional: bool = False

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Check that every enabled prefix and separator is a non-empty string.

        Raises:
            TypeError: If a field holds a value of the wrong type.
            ValueError: If an enabled prefix or separator is empty.
        """
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise TypeError(
                    f"Field '{name}' expects str or None, got {type(value).__name__}: {value!r}"
                )
            if not value:
                raise ValueError(f"Field '{name}' must not be empty; use None to disable it")
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"Field '{name}' expects bool, got {type(value).__name__}: {value!r}"
                )

    @classmethod
    def for_style(cls, style: Union[OptionStyle, str]) -> "ParserConfig":
        """Return a new configuration for a named preset."""
        style = OptionStyle.from_value(style)
        if style is OptionStyle.WINDOWS:
            return cls(
                long_prefix="/",
                long_value_separator=":",
                short_prefix=None,
                stop_trigger=None,
                cluster_short_options=False,
            )
        if style is OptionStyle.POWERSHELL:
            return cls(
                long_prefix="-",
                long_value_separator=None,
                short_prefix=None,
                stop_trigger=None,
                cluster_short_options=False,
            )
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParserConfig":
        """
        Build a configuration from a mapping, as found in a configuration file.

        An optional "style" key selects the preset the remaining keys override.

        Raises:
            ValueError: For unknown keys or an unknown style.
            TypeError: For values of the wrong type.
        """
        data = dict(data)
        config = cls.for_style(data.pop("style", OptionStyle.DEFAULT))

        known = set(_STRING_FIELDS) | set(_BOOL_FIELDS)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown parser settings: {', '.join(unknown)}")

        for name, value in data.items():
            if name in _BOOL_FIELDS:
                value = _strict_bool(value, name)
            setattr(config, name, value)
        config.validate()
        return config


def load_config_file(config_path: str) -> dict[str, Any]:
    """
    Load configuration from a YAML or JSON file.

    Args:
        config_path (str): Path to the configuration file.

    Returns:
        dict[str, Any]: Dictionary containing the configuration data.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValueError: If the file format is not supported or invalid.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    file_ext = os.path.splitext(config_path)[1].lower()
    logger.debug("Loading parser configuration from %s", config_path)

    with open(config_path, "r") as f:
        if file_ext in [".yaml", ".yml"]:
            if not HAS_YAML:
                raise ValueError(
                    "YAML support not available. Please install PyYAML: pip install PyYAML"
                )
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML file: {e}")
        elif file_ext == ".json":
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON file: {e}")
        else:
            raise ValueError(
                f"Unsupported file format: {file_ext}. "
                "Supported formats are: .yaml, .yml, .json"
            )

    # An empty YAML document loads as None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )
    return data
