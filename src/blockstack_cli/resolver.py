"""Merge positional and ``--name value`` command arguments into schema order."""

from __future__ import annotations

from typing import Sequence

from blockstack_cli.errors import (
    DuplicateArgumentError,
    MissingValueError,
    UnknownArgumentError,
    UnrecognizedCommandError,
)
from blockstack_cli.schema.models import CommandRegistry, CommandSpec

KEYWORD_PREFIX = "--"


def split_arguments(spec: CommandSpec, tokens: Sequence[str]) -> tuple[dict[str, str], list[str]]:
    """Separate ``--name value`` pairs from bare positional tokens.

    Returns ``(keywords, positionals)``; both keep the order in which the
    tokens appeared.
    """
    keywords: dict[str, str] = {}
    positionals: list[str] = []
    declared = set(spec.parameter_names())

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if not token.startswith(KEYWORD_PREFIX):
            positionals.append(token)
            i += 1
            continue

        arg_name = token[len(KEYWORD_PREFIX):]
        # duplicate, then unknown, then missing value: a trailing unknown name reports as unknown
        if arg_name in keywords:
            raise DuplicateArgumentError(spec.name, arg_name)
        if arg_name not in declared:
            raise UnknownArgumentError(spec.name, arg_name)
        if i + 1 >= len(tokens):
            raise MissingValueError(spec.name, arg_name)

        keywords[arg_name] = tokens[i + 1]
        i += 2

    return keywords, positionals


def merge_arguments(
    spec: CommandSpec, keywords: dict[str, str], positionals: Sequence[str]
) -> list[str]:
    """Lay keyword and positional values out in declared parameter order.

    A keyword-supplied parameter takes its own slot; every other slot takes
    the next unused positional. Emission stops at the first slot that needs a
    positional when none are left.
    """
    merged: list[str] = []
    remaining = iter(positionals)
    for parameter in spec.parameters:
        if parameter.name is not None and parameter.name in keywords:
            merged.append(keywords[parameter.name])
            continue
        value = next(remaining, None)
        if value is None:
            break
        merged.append(value)
    return merged


class ArgumentResolver:
    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def command_spec(self, command: str) -> CommandSpec:
        try:
            return self.registry[command]
        except KeyError:
            raise UnrecognizedCommandError(command) from None

    def resolve(self, command: str, tokens: Sequence[str]) -> list[str]:
        spec = self.command_spec(command)
        keywords, positionals = split_arguments(spec, tokens)
        return merge_arguments(spec, keywords, positionals)
