from __future__ import annotations

import pytest

from blockstack_cli.errors import (
    DuplicateArgumentError,
    MissingValueError,
    UnknownArgumentError,
    UnrecognizedCommandError,
)
from blockstack_cli.resolver import ArgumentResolver, merge_arguments, split_arguments


def test_keyword_fills_its_slot_and_positionals_fill_the_rest(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["a", "--y", "b", "c"]) == ["a", "b", "c"]


def test_all_positional(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["a", "b", "c"]) == ["a", "b", "c"]


def test_all_keyword_in_any_order(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["--z", "3", "--x", "1", "--y", "2"]) == ["1", "2", "3"]


def test_keyword_slot_is_skipped_not_reassigned(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["p", "--x", "k"]) == ["k", "p"]


def test_emission_stops_when_positionals_run_out(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    # x needs a positional and there is none, so the keyword for z is not reached
    assert resolver.resolve("demo", ["--z", "c"]) == []
    assert resolver.resolve("demo", ["a"]) == ["a"]


def test_extra_positionals_are_dropped(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["a", "b", "c", "d"]) == ["a", "b", "c"]


@pytest.mark.parametrize(
    "tokens",
    [
        ["--x", "1", "--x", "2"],
        ["a", "--y", "b", "--y", "c"],
        ["--y", "b", "--y"],
    ],
)
def test_duplicate_keyword_always_fails(demo_registry, tokens) -> None:
    resolver = ArgumentResolver(demo_registry)
    with pytest.raises(DuplicateArgumentError) as excinfo:
        resolver.resolve("demo", tokens)
    assert excinfo.value.argument in {"x", "y"}
    assert excinfo.value.command == "demo"


def test_keyword_without_value_fails(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    with pytest.raises(MissingValueError) as excinfo:
        resolver.resolve("demo", ["a", "--y"])
    assert excinfo.value.argument == "y"


def test_undeclared_keyword_fails(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    with pytest.raises(UnknownArgumentError):
        resolver.resolve("demo", ["--w", "1"])
    with pytest.raises(UnknownArgumentError):
        resolver.resolve("demo", ["--w"])


def test_nameless_parameter_is_positional_only(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("raw", ["data", "--label", "tag"]) == ["data", "tag"]
    with pytest.raises(UnknownArgumentError):
        resolver.resolve("raw", ["--blob", "data"])


def test_unknown_command_is_rejected(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    with pytest.raises(UnrecognizedCommandError):
        resolver.resolve("nope", [])


def test_keyword_value_may_look_like_a_flag(demo_registry) -> None:
    resolver = ArgumentResolver(demo_registry)
    assert resolver.resolve("demo", ["--x", "--y"]) == ["--y"]


def test_split_then_merge_matches_resolve(demo_registry) -> None:
    spec = demo_registry["demo"]
    keywords, positionals = split_arguments(spec, ["a", "--y", "b", "c"])
    assert keywords == {"y": "b"}
    assert positionals == ["a", "c"]
    assert merge_arguments(spec, keywords, positionals) == ["a", "b", "c"]


def test_resolves_against_the_shipped_registry(registry) -> None:
    resolver = ArgumentResolver(registry)
    args = resolver.resolve(
        "gaia_getfile",
        ["--app_origin", "https://app.example", "example.id", "hello.txt"],
    )
    assert args == ["example.id", "https://app.example", "hello.txt"]
