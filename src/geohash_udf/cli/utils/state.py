"""
CLI State Management

Holds global CLI options shared across commands.
"""

from typing import Any

from geohash_udf.api.config import FunctionConfig, load_config


_cli_state: dict[str, Any] = {
    "length": None,
    "verbose": False,
}


def set_state(**values: Any) -> None:
    """Update global CLI options."""
    _cli_state.update(values)


def get_state(key: str) -> Any:
    """Get a global CLI option."""
    return _cli_state.get(key)


def get_function_config(**overrides: Any) -> FunctionConfig:
    """Resolve the function configuration, honoring the global --length option."""
    return load_config(output_length=_cli_state.get("length"), **overrides)
