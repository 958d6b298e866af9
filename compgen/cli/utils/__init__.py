"""CLI Utilities Module"""

from .header import print_command_header, print_divider, print_item, print_section, version_callback

__all__ = [
    "print_command_header",
    "print_divider",
    "print_item",
    "print_section",
    "version_callback",
]
