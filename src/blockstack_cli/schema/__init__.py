from blockstack_cli.schema.commands import COMMANDS, build_default_registry
from blockstack_cli.schema.models import CommandRegistry, CommandSpec, ParameterSpec

__all__ = [
    "COMMANDS",
    "build_default_registry",
    "CommandRegistry",
    "CommandSpec",
    "ParameterSpec",
]
