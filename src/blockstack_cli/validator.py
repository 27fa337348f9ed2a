"""Validate resolved command arguments against the command registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from jsonschema import Draft202012Validator

from blockstack_cli.errors import (
    ArgumentError,
    InvalidArgumentsError,
    NoCommandError,
    UnrecognizedCommandError,
)
from blockstack_cli.resolver import ArgumentResolver
from blockstack_cli.schema.models import CommandRegistry

logger = logging.getLogger(__name__)


class ArgumentValidator:
    """Structural check of ``{command: args}`` against the registry schema.

    The registry is rendered to a single JSON Schema document and compiled
    once; every call reuses the same validator.
    """

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry
        schema = registry.to_json_schema()
        Draft202012Validator.check_schema(schema)
        self._validator = Draft202012Validator(schema)

    def is_valid(self, command: str, args: Sequence[str]) -> bool:
        if command not in self.registry:
            return False
        return self._validator.is_valid({command: list(args)})

    def validate(self, command: str, args: Sequence[str]) -> None:
        if command not in self.registry:
            raise UnrecognizedCommandError(command)
        if not self._validator.is_valid({command: list(args)}):
            raise InvalidArgumentsError(command)


@dataclass(frozen=True)
class CheckResult:
    success: bool
    command: str
    args: list[str] = field(default_factory=list)
    error: ArgumentError | None = None
    usage: bool = False

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""


def check_args(
    tokens: Sequence[str],
    registry: CommandRegistry,
    *,
    resolver: ArgumentResolver | None = None,
    validator: ArgumentValidator | None = None,
) -> CheckResult:
    """Turn ``[command, *command_args]`` into a validated argument vector.

    Every input error is recovered into a failed result flagged for usage
    output; nothing here raises for bad user input.
    """
    resolver = resolver or ArgumentResolver(registry)
    validator = validator or ArgumentValidator(registry)

    command = tokens[0] if tokens else ""
    try:
        if not tokens:
            raise NoCommandError()
        args = resolver.resolve(command, tokens[1:])
        validator.validate(command, args)
    except ArgumentError as exc:
        logger.debug("argument check failed for %r: %s", command, exc)
        return CheckResult(success=False, command=command, error=exc, usage=True)

    logger.debug("resolved %s with %d argument(s)", command, len(args))
    return CheckResult(success=True, command=command, args=args)
