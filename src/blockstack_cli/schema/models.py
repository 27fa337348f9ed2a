"""Command registry schemas."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from blockstack_cli.errors import SchemaDefinitionError

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


class ParameterSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Optional[str] = None
    realtype: str
    pattern: Optional[str] = None

    @field_validator("pattern")
    @classmethod
    def _pattern_compiles(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid pattern {value!r}: {exc}") from exc
        return value

    @property
    def is_keyword(self) -> bool:
        return self.name is not None

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": "string"}
        if self.pattern is not None:
            schema["pattern"] = self.pattern
        return schema


class CommandSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    group: str
    min_arity: int = Field(..., ge=0)
    max_arity: int = Field(..., ge=0)
    parameters: Tuple[ParameterSpec, ...] = ()
    help_text: str = ""

    @model_validator(mode="after")
    def _check_definition(self) -> "CommandSpec":
        if self.min_arity > self.max_arity:
            raise SchemaDefinitionError(
                f"{self.name}: min_arity {self.min_arity} exceeds max_arity {self.max_arity}"
            )
        seen: set[str] = set()
        for parameter in self.parameters:
            if parameter.name is None:
                continue
            if parameter.name in seen:
                raise SchemaDefinitionError(
                    f"{self.name}: duplicate parameter name {parameter.name!r}"
                )
            seen.add(parameter.name)
        return self

    def parameter_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.name is not None)

    def find_parameter(self, name: str) -> ParameterSpec | None:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def is_required(self, index: int) -> bool:
        return index < self.min_arity

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "type": "array",
            "prefixItems": [p.to_json_schema() for p in self.parameters],
            "minItems": self.min_arity,
            "maxItems": self.max_arity,
        }


class CommandRegistry(Mapping[str, CommandSpec]):
    """Read-only table of command definitions keyed by command name.

    Built once and shared by reference; there is no way to add or replace
    a command after construction.
    """

    def __init__(self, commands: Iterable[CommandSpec]) -> None:
        table: dict[str, CommandSpec] = {}
        for command in commands:
            if command.name in table:
                raise SchemaDefinitionError(f"duplicate command {command.name!r}")
            table[command.name] = command
        self._commands = MappingProxyType(table)

    def __getitem__(self, name: str) -> CommandSpec:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __repr__(self) -> str:
        return f"CommandRegistry({len(self)} commands)"

    def groups(self) -> dict[str, list[CommandSpec]]:
        grouped: dict[str, list[CommandSpec]] = {}
        for command in self._commands.values():
            grouped.setdefault(command.group, []).append(command)
        return grouped

    def group_names(self) -> list[str]:
        return sorted(self.groups())

    def to_json_schema(self) -> dict[str, Any]:
        return {
            "$schema": JSON_SCHEMA_DIALECT,
            "type": "object",
            "properties": {name: spec.to_json_schema() for name, spec in self._commands.items()},
            "additionalProperties": False,
        }
