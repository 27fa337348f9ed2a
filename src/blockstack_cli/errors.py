"""Error types for the blockstack-cli front end."""

from __future__ import annotations


class BlockstackCLIError(RuntimeError):
    """Base CLI error."""


class SchemaDefinitionError(BlockstackCLIError):
    """The command registry itself is malformed."""


class UnrecognizedNetworkError(BlockstackCLIError, ValueError):
    """Network selector is not one of mainnet, testnet or regtest."""

    def __init__(self, network: str) -> None:
        super().__init__(f"unrecognized network: {network!r}")
        self.network = network


class ArgumentError(BlockstackCLIError):
    """Command-line input could not be turned into a valid invocation.

    These are user-input errors: the caller recovers them into a usage
    result instead of letting them escape as a process failure.
    """

    def __init__(self, message: str, *, command: str = "", argument: str | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.argument = argument


class NoCommandError(ArgumentError):
    """No command token was supplied."""

    def __init__(self) -> None:
        super().__init__("no command given")


class UnrecognizedCommandError(ArgumentError):
    """Command token is not in the registry."""

    def __init__(self, command: str) -> None:
        super().__init__(f"unrecognized command '{command}'", command=command)


class DuplicateArgumentError(ArgumentError):
    """The same --name was supplied more than once."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"duplicate argument --{argument}", command=command, argument=argument)


class MissingValueError(ArgumentError):
    """A --name flag had no following token."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"no value for argument --{argument}", command=command, argument=argument)


class UnknownArgumentError(ArgumentError):
    """A --name flag names no declared parameter."""

    def __init__(self, command: str, argument: str) -> None:
        super().__init__(f"no such argument --{argument}", command=command, argument=argument)


class InvalidArgumentsError(ArgumentError):
    """Resolved arguments fail the arity bounds or a value pattern."""

    def __init__(self, command: str) -> None:
        super().__init__("invalid command arguments", command=command)
