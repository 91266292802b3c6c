"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_flag, env_float, env_int, env_str, read_dotenv, reset_default_values

__all__ = [
    "ConfigurationError",
    "env_flag",
    "env_float",
    "env_int",
    "env_str",
    "read_dotenv",
    "reset_default_values",
]
