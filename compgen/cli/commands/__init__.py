"""CLI command implementations"""

from .create_command import create_command

__all__ = ["create_command"]
