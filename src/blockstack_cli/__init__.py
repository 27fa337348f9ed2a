"""blockstack-cli public surface."""

from blockstack_cli.errors import (
    ArgumentError,
    BlockstackCLIError,
    DuplicateArgumentError,
    InvalidArgumentsError,
    MissingValueError,
    NoCommandError,
    SchemaDefinitionError,
    UnknownArgumentError,
    UnrecognizedCommandError,
    UnrecognizedNetworkError,
)
from blockstack_cli.help import HelpFormatter, format_command_help_lines, format_help_string
from blockstack_cli.options import DEFAULT_OPTION_SPEC, OptionParser, ParsedOptions, parse_cli_options
from blockstack_cli.resolver import ArgumentResolver
from blockstack_cli.schema import (
    COMMANDS,
    CommandRegistry,
    CommandSpec,
    ParameterSpec,
    build_default_registry,
)
from blockstack_cli.validator import ArgumentValidator, CheckResult, check_args

__all__ = [
    "BlockstackCLIError",
    "ArgumentError",
    "NoCommandError",
    "UnrecognizedCommandError",
    "DuplicateArgumentError",
    "MissingValueError",
    "UnknownArgumentError",
    "InvalidArgumentsError",
    "SchemaDefinitionError",
    "UnrecognizedNetworkError",
    "COMMANDS",
    "CommandRegistry",
    "CommandSpec",
    "ParameterSpec",
    "build_default_registry",
    "DEFAULT_OPTION_SPEC",
    "OptionParser",
    "ParsedOptions",
    "parse_cli_options",
    "ArgumentResolver",
    "ArgumentValidator",
    "CheckResult",
    "check_args",
    "HelpFormatter",
    "format_help_string",
    "format_command_help_lines",
]
