"""Component generation: templates, file writes, post-generate hooks and index patching."""

from .component import (
    ComponentSpec,
    GeneratedComponent,
    capitalize_first_letter,
    create_component,
)
from .hooks import CommandResult, PostGenerateHook, default_hooks, run_command
from .index_updater import export_line, update_parent_index
from .template_engine import TemplateEngine

__all__ = [
    "ComponentSpec",
    "GeneratedComponent",
    "capitalize_first_letter",
    "create_component",
    "CommandResult",
    "PostGenerateHook",
    "default_hooks",
    "run_command",
    "export_line",
    "update_parent_index",
    "TemplateEngine",
]
