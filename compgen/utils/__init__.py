"""Logging utilities shared by the generator and the CLI."""

from .logger import CLI_LEVEL, logger, setup_log_level

__all__ = [
    "CLI_LEVEL",
    "logger",
    "setup_log_level",
]
