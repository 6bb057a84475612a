"""
Function Configuration Management

Manages settings of the geohash function: output length, missing-value
sentinels and the policy for out-of-range coordinates.

Settings are resolved in this order (first wins):
1. Explicit overrides passed to ``load_config``
2. Environment variables (``GEOHASH_UDF_*``, ``.env`` files are honored by the CLI)
3. The JSON config file in ``~/.config/geohash-udf/``
4. Built-in defaults
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any

import deal

from geohash_udf.api.core.constants import DEFAULT_OUTPUT_LENGTH, FUNCTION_NAME, MISSING_SENTINELS
from geohash_udf.api.core.exceptions import InvalidConfigurationError


logger = logging.getLogger(__name__)


__all__ = [
    "ENV_MISSING_SENTINELS",
    "ENV_OUTPUT_LENGTH",
    "ENV_STRICT_RANGE",
    "FunctionConfig",
    "clear_config",
    "get_config_path",
    "load_config",
    "parse_sentinels",
    "save_config",
]


ENV_OUTPUT_LENGTH = "GEOHASH_UDF_OUTPUT_LENGTH"
ENV_MISSING_SENTINELS = "GEOHASH_UDF_MISSING_SENTINELS"
ENV_STRICT_RANGE = "GEOHASH_UDF_STRICT_RANGE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class FunctionConfig:
    """
    Settings of the geohash function.

    Attributes:
        output_length: Number of geohash characters returned per row
        missing_sentinels: String values treated as missing data
        name: Name the function is registered under
        strict_range: Raise on out-of-range coordinates instead of returning None
    """

    output_length: int = DEFAULT_OUTPUT_LENGTH
    missing_sentinels: tuple[str, ...] = field(default=MISSING_SENTINELS)
    name: str = FUNCTION_NAME
    strict_range: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.output_length, bool) or not isinstance(self.output_length, int):
            raise InvalidConfigurationError(f"output_length must be an integer, got {self.output_length!r}")
        if self.output_length < 1:
            raise InvalidConfigurationError(f"output_length must be at least 1, got {self.output_length}")
        if not self.name:
            raise InvalidConfigurationError("Function name must not be empty")
        if isinstance(self.missing_sentinels, str) or not all(
            isinstance(sentinel, str) for sentinel in self.missing_sentinels
        ):
            raise InvalidConfigurationError(
                f"missing_sentinels must be a list of strings, got {self.missing_sentinels!r}"
            )
        # Accept lists from JSON and keep the dataclass hashable; cell values
        # are stripped before comparison, so sentinels are too
        object.__setattr__(self, "missing_sentinels", tuple(s.strip() for s in self.missing_sentinels))

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["missing_sentinels"] = list(self.missing_sentinels)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FunctionConfig:
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)


@deal.post(lambda result: result is not None, message="Must return valid path")
def get_config_path() -> Path:
    """Get path to the function config file."""
    config_dir = Path.home() / ".config" / "geohash-udf"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "config.json"


def parse_sentinels(text: str) -> tuple[str, ...]:
    """
    Split a comma-separated sentinel list.

    Whitespace around each entry is dropped, so ``"NA, -999"`` gives
    ``("NA", "-999")``. Empty entries stay, which is how the empty
    string is listed (``",NA"``).
    """
    return tuple(part.strip() for part in text.split(","))


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"{name} must be a boolean, got {value!r}")


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    length = os.environ.get(ENV_OUTPUT_LENGTH)
    if length is not None:
        try:
            overrides["output_length"] = int(length)
        except ValueError as e:
            raise InvalidConfigurationError(f"{ENV_OUTPUT_LENGTH} must be an integer, got {length!r}") from e

    sentinels = os.environ.get(ENV_MISSING_SENTINELS)
    if sentinels is not None:
        overrides["missing_sentinels"] = parse_sentinels(sentinels)

    strict = os.environ.get(ENV_STRICT_RANGE)
    if strict is not None:
        overrides["strict_range"] = _parse_bool(ENV_STRICT_RANGE, strict)

    return overrides


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        logger.debug(f"No saved configuration found at {config_path}")
        return {}

    try:
        with config_path.open() as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidConfigurationError(f"Config file {config_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Config file {config_path} must contain a JSON object")
    return data


@deal.post(lambda result: result.output_length >= 1, message="Output length must be positive")
def load_config(*, use_env: bool = True, **overrides: Any) -> FunctionConfig:
    """
    Load the function configuration.

    Args:
        use_env: Apply ``GEOHASH_UDF_*`` environment variables. Pass False
            to get the saved settings, e.g. before editing and saving them.
        **overrides: Explicit values that take precedence over everything else.
            ``None`` values are ignored.

    Returns:
        Resolved configuration

    Raises:
        InvalidConfigurationError: If any source holds an invalid value
    """
    config = FunctionConfig.from_dict(_read_config_file(get_config_path()))

    env = _env_overrides() if use_env else {}
    if env:
        logger.debug(f"Applying environment overrides: {sorted(env)}")
        config = replace(config, **env)

    explicit = {key: value for key, value in overrides.items() if value is not None}
    if explicit:
        config = replace(config, **explicit)

    return config


@deal.post(lambda result: result is None, message="Save must complete")
def save_config(config: FunctionConfig) -> None:
    """
    Save the function configuration to the config file.

    Args:
        config: Configuration to save
    """
    config_path = get_config_path()
    logger.info(f"Saving geohash function configuration (output length {config.output_length}) to {config_path}")

    with config_path.open("w") as f:
        json.dump(config.to_dict(), f, indent=2)


def clear_config() -> bool:
    """
    Delete the saved configuration file.

    Returns:
        True if a file was removed
    """
    config_path = get_config_path()
    if config_path.exists():
        config_path.unlink()
        logger.info(f"Removed configuration file {config_path}")
        return True
    return False
