from __future__ import annotations

import pytest

from blockstack_cli.errors import (
    DuplicateArgumentError,
    InvalidArgumentsError,
    MissingValueError,
    NoCommandError,
    UnknownArgumentError,
    UnrecognizedCommandError,
)
from blockstack_cli.validator import ArgumentValidator, check_args

HEX64 = "a" * 64
ADDRESS = "1EyuZ8qxdhHjcnTChwQLyQaN3cmdK55DkH"


def test_private_key_of_64_hex_characters_is_accepted(demo_registry) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("sign", [HEX64]) is True
    assert validator.is_valid("sign", ["0123456789abcdef" * 4]) is True


@pytest.mark.parametrize("value", ["a" * 63, "g" + "a" * 63, "A" * 64, "a" * 65, "", HEX64 + "\n"])
def test_malformed_private_key_is_rejected(demo_registry, value) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("sign", [value]) is False
    with pytest.raises(InvalidArgumentsError):
        validator.validate("sign", [value])


def test_arity_bounds_are_enforced(demo_registry) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("sign", []) is False
    assert validator.is_valid("sign", [HEX64, "https://hub.example"]) is True
    assert validator.is_valid("sign", [HEX64, "https://hub.example", "extra"]) is False


def test_every_supplied_value_is_pattern_checked(demo_registry) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("sign", [HEX64, "ftp://hub.example"]) is False


def test_parameters_without_pattern_accept_anything(demo_registry) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("demo", ["", "any thing", "--x"]) is True


def test_unknown_command_is_not_valid(demo_registry) -> None:
    validator = ArgumentValidator(demo_registry)
    assert validator.is_valid("nope", []) is False
    with pytest.raises(UnrecognizedCommandError):
        validator.validate("nope", [])


def test_check_args_success(registry) -> None:
    result = check_args(["get_address", HEX64], registry)
    assert result.success is True
    assert result.command == "get_address"
    assert result.args == [HEX64]
    assert result.error is None
    assert result.usage is False


def test_check_args_merges_keywords(registry) -> None:
    result = check_args(["send_btc", "--payment_key", HEX64, ADDRESS, "1000"], registry)
    assert result.success is True
    assert result.args == [ADDRESS, "1000", HEX64]


@pytest.mark.parametrize(
    ("tokens", "error_type", "command"),
    [
        ([], NoCommandError, ""),
        (["frobnicate"], UnrecognizedCommandError, "frobnicate"),
        (["lookup", "--blockstack_id", "a.id", "--blockstack_id", "b.id"], DuplicateArgumentError, "lookup"),
        (["lookup", "--blockstack_id"], MissingValueError, "lookup"),
        (["lookup", "--name", "a.id"], UnknownArgumentError, "lookup"),
        (["lookup"], InvalidArgumentsError, "lookup"),
        (["lookup", "Not A Name"], InvalidArgumentsError, "lookup"),
        (["get_confirmations", "a" * 63], InvalidArgumentsError, "get_confirmations"),
    ],
)
def test_check_args_failures_request_usage(registry, tokens, error_type, command) -> None:
    result = check_args(tokens, registry)
    assert result.success is False
    assert result.usage is True
    assert result.command == command
    assert isinstance(result.error, error_type)
    assert result.message


def test_invalid_arguments_do_not_leak_field_detail(registry) -> None:
    result = check_args(["get_address", "not-a-key"], registry)
    assert result.message == "invalid command arguments"


def test_boolean_parameters(registry) -> None:
    base = ["gaia_getfile", "example.id", "https://app.example", "file.txt", HEX64]
    assert check_args(base + ["true"], registry).success is True
    assert check_args(base + ["1", "0"], registry).success is True
    assert check_args(base + ["yes"], registry).success is False


def test_subdomain_names_are_accepted(registry) -> None:
    assert check_args(["whois", "alice.example.id"], registry).success is True
    assert check_args(["whois", "alice_example_id"], registry).success is True
    assert check_args(["whois", "ab"], registry).success is False


def test_help_takes_an_optional_command(registry) -> None:
    assert check_args(["help"], registry).args == []
    assert check_args(["help", "lookup"], registry).args == ["lookup"]


@pytest.mark.parametrize(
    "tokens",
    [
        ["get_address", HEX64 + "\n"],
        ["get_confirmations", "b" * 64 + "\n"],
        ["lookup", "example.id\n"],
        ["gaia_getfile", "example.id", "https://app.example", "file.txt", HEX64, "true\n"],
    ],
)
def test_trailing_newline_is_rejected(registry, tokens) -> None:
    result = check_args(tokens, registry)
    assert result.success is False
    assert result.message == "invalid command arguments"


def test_port_must_be_all_digits(registry) -> None:
    validator = ArgumentValidator(registry)
    base = ["http://localhost:4000", "phrase", "https://hub.example"]
    assert validator.is_valid("authenticator", base + ["8888"]) is True
    assert validator.is_valid("authenticator", base + ["8888x"]) is False
