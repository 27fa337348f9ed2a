from __future__ import annotations

import pytest

from blockstack_cli.schema import CommandRegistry, CommandSpec, ParameterSpec, build_default_registry
from blockstack_cli.schema.patterns import PRIVATE_KEY_UNCOMPRESSED_PATTERN, URL_PATTERN


@pytest.fixture(scope="session")
def registry() -> CommandRegistry:
    return build_default_registry()


@pytest.fixture
def demo_registry() -> CommandRegistry:
    return CommandRegistry(
        [
            CommandSpec(
                name="demo",
                group="Testing",
                min_arity=0,
                max_arity=3,
                parameters=(
                    ParameterSpec(name="x", realtype="string"),
                    ParameterSpec(name="y", realtype="string"),
                    ParameterSpec(name="z", realtype="string"),
                ),
                help_text="Demonstrate argument merging.",
            ),
            CommandSpec(
                name="sign",
                group="Testing",
                min_arity=1,
                max_arity=2,
                parameters=(
                    ParameterSpec(
                        name="key", realtype="private_key", pattern=PRIVATE_KEY_UNCOMPRESSED_PATTERN
                    ),
                    ParameterSpec(name="hub", realtype="url", pattern=URL_PATTERN),
                ),
                help_text="Sign something.",
            ),
            CommandSpec(
                name="raw",
                group="Other",
                min_arity=1,
                max_arity=2,
                parameters=(
                    ParameterSpec(realtype="blob"),
                    ParameterSpec(name="label", realtype="string"),
                ),
            ),
        ]
    )
