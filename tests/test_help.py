from __future__ import annotations

from blockstack_cli.help import (
    HelpFormatter,
    format_command_help_lines,
    format_help_string,
)

PROSE = (
    "Register a name to someone's ID-address.  After successfully running this command "
    "and waiting a couple of hours, the name will be registered on-chain and have a zone "
    "file with a URL to where the owner's profile should be.\n"
    "\n"
    "Example:\n"
    "\n"
    "    $ export PAYMENT=\"bfeffdf57f29b0cc1fab9ea197bb1413da2561fe4b83e962c7f02fbbe2b1cd5401\"\n"
    "$ blockstack-cli register_addr example.id \"$ID_ADDRESS\" \"$PAYMENT\" https://gaia.blockstack.org/hub\n"
    "Trailing paragraph that is long enough that it will certainly need to be wrapped somewhere."
)


def test_wraps_prose_at_limit() -> None:
    out = format_help_string(2, 40, PROSE)
    literal = {line for line in PROSE.split("\n") if line.startswith(("$", "    "))}
    for line in out.split("\n"):
        if line in literal:
            continue
        assert len(line) <= 40, line


def test_prose_lines_are_indented() -> None:
    out = format_help_string(4, 30, "alpha beta gamma delta epsilon zeta eta theta")
    lines = [line for line in out.split("\n") if line]
    assert len(lines) > 1
    assert all(line.startswith("    ") for line in lines)
    assert " ".join(" ".join(lines).split()) == "alpha beta gamma delta epsilon zeta eta theta"


def test_example_lines_are_never_wrapped() -> None:
    out = format_help_string(2, 20, PROSE)
    assert (
        "    $ export PAYMENT=\"bfeffdf57f29b0cc1fab9ea197bb1413da2561fe4b83e962c7f02fbbe2b1cd5401\"\n"
        in out
    )
    assert (
        "\n$ blockstack-cli register_addr example.id \"$ID_ADDRESS\" \"$PAYMENT\" "
        "https://gaia.blockstack.org/hub\n" in out
    )


def test_blank_lines_are_preserved() -> None:
    assert format_help_string(2, 78, "a\n\nb") == "  a \n\n  b \n"
    assert format_help_string(2, 78, "a\n\n\nb").count("\n\n\n") == 1


def test_breaks_before_word_that_would_overflow() -> None:
    assert format_help_string(2, 20, "aaa bbb ccc ddd eee fff") == "  aaa bbb ccc ddd \n  eee fff \n"


def test_word_longer_than_limit_gets_its_own_line() -> None:
    word = "x" * 30
    assert format_help_string(2, 10, f"{word} y") == f"  {word} \n  y \n"


def test_required_and_optional_synopsis(registry) -> None:
    lines = format_command_help_lines(registry["announce"])
    assert lines.raw == "  announce MESSAGE_HASH OWNER_KEY"
    assert lines.keyword == (
        "  announce --message_hash ZONEFILE_HASH\n"
        "           --owner_key PRIVATE_KEY"
    )

    optional = format_command_help_lines(registry["make_keychain"])
    assert optional.raw == "  make_keychain [BACKUP_PHRASE]"
    assert optional.keyword == "  make_keychain [--backup_phrase 12_WORDS_OR_CIPHERTEXT]"


def test_nameless_parameter_renders_its_type(demo_registry) -> None:
    lines = format_command_help_lines(demo_registry["raw"])
    assert lines.raw == "  raw BLOB [LABEL]"
    assert lines.keyword == "  raw BLOB\n      [--label STRING]"


def test_command_usage_layout(registry) -> None:
    formatter = HelpFormatter(registry)
    text = formatter.command_usage("get_confirmations")
    assert text == (
        "Command: get_confirmations\n"
        "Usage:\n"
        "  get_confirmations TXID\n"
        "  get_confirmations --txid TRANSACTION_ID\n"
        "\n"
        "  Get the number of confirmations for a transaction. \n"
    )


def test_command_usage_is_idempotent(registry) -> None:
    formatter = HelpFormatter(registry)
    assert formatter.command_usage("register_addr") == formatter.command_usage("register_addr")
    assert formatter.usage_string() == HelpFormatter(registry).usage_string()


def test_unknown_command_falls_back_to_index(registry) -> None:
    formatter = HelpFormatter(registry)
    assert formatter.command_usage("nope") == formatter.all_commands_list()
    assert formatter.command_usage("help") == formatter.all_commands_list()
    assert formatter.command_usage("") == formatter.all_commands_list()


def test_index_groups_are_sorted_and_comma_separated(registry) -> None:
    index = HelpFormatter(registry).all_commands_list()
    assert index.startswith("All commands (run 'blockstack-cli help COMMAND' for details):\n")
    headers = [line.strip()[:-1] for line in index.split("\n") if line.startswith("  ") and line.endswith(":")]
    assert headers == sorted(headers)
    assert "CLI" in headers
    assert (
        "  Account Management:\n"
        "    balance, convert_address, get_account_history, get_account_at\n"
        "    send_btc, send_tokens\n" in index
    )


def test_program_name_is_configurable(demo_registry) -> None:
    index = HelpFormatter(demo_registry, program="bsk").all_commands_list()
    assert index == (
        "All commands (run 'bsk help COMMAND' for details):\n"
        "  Other:\n"
        "    raw\n"
        "\n"
        "  Testing:\n"
        "    demo, sign"
    )


def test_usage_string_lists_options_and_every_command(registry) -> None:
    text = HelpFormatter(registry).usage_string()
    assert text.startswith("Usage: blockstack-cli [options] command [command arguments]\n")
    assert "    -T URL" in text
    assert "Command reference\n" in text
    for group in registry.group_names():
        assert f"Command group: {group}\n" in text
    for name in registry:
        assert f"  {name} " in text or f"  {name}\n" in text


def test_command_groups_follow_registry_order(demo_registry) -> None:
    groups = HelpFormatter(demo_registry).command_groups()
    assert list(groups) == ["Testing", "Other"]
    assert [spec.name for spec in groups["Testing"]] == ["demo", "sign"]
