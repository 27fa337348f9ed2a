"""Usage and help text rendered from the command registry."""

from __future__ import annotations

from typing import NamedTuple

from blockstack_cli.schema.models import CommandRegistry, CommandSpec, ParameterSpec

DEFAULT_PROGRAM = "blockstack-cli"
DEFAULT_CONFIG_PATH_HINT = "~/.blockstack-cli.conf"

COMMAND_HELP_INDENT = 2
COMMAND_HELP_LIMIT = 78
REFERENCE_HELP_INDENT = 4
REFERENCE_HELP_LIMIT = 76
INDEX_INDENT = 4
INDEX_LIMIT = 70

LITERAL_INDENT = "    "
PROMPT_MARKER = "$"

OPTIONS_USAGE = """Usage: {program} [options] command [command arguments]
Options can be:
    -c                  Path to a config file (defaults to
                        {config_path})

    -d                  Print verbose debugging output

    -e                  Estimate the BTC cost of an transaction (in satoshis).
                        Do not generate or send any transactions.

    -t                  Use the public testnet instead of mainnet.

    -i                  Use integration test framework instead of mainnet.

    -U                  Unsafe mode.  No safety checks will be performed.

    -x                  Do not broadcast a transaction.  Only generate and
                        print them to stdout.

    -B BURN_ADDR        Use the given namespace burn address instead of the one
                        obtained from the Blockstack network (DANGEROUS)

    -D DENOMINATION     Denominate the price to pay in the given units
                        (DANGEROUS)

    -C CONSENSUS_HASH   Use the given consensus hash instead of one obtained
                        from the network

    -F FEE_RATE         Use the given transaction fee rate instead of the one
                        obtained from the Bitcoin network

    -G GRACE_PERIOD     Number of blocks in which a name can be renewed after it
                        expires (DANGEROUS)

    -H URL              Use an alternative Blockstack Core API endpoint.

    -I URL              Use an alternative Blockstack Core Indexer endpoint.

    -N PAY2NS_PERIOD    Number of blocks in which a namespace receives the registration
                        and renewal fees after it is created (DANGEROUS)

    -P PRICE            Use the given price to pay for names or namespaces
                        (DANGEROUS)

    -T URL              Use an alternative Blockstack transaction broadcaster.
"""


def _is_literal_line(line: str, words: list[str]) -> bool:
    return line.startswith((PROMPT_MARKER, LITERAL_INDENT)) or words[0] == PROMPT_MARKER


def format_help_string(indent: int, limit: int, text: str) -> str:
    """Word-wrap ``text`` to ``limit`` columns with ``indent`` spaces of padding.

    Lines are handled one at a time. Blank lines stay blank, and example
    lines (starting with ``$`` or four spaces) are copied through unwrapped.
    """
    pad = " " * indent
    out: list[str] = []
    for line in text.split("\n"):
        words = [word for word in line.split(" ") if word]
        if not words:
            out.append("\n")
            continue
        if _is_literal_line(line, words):
            out.append(line + "\n")
            continue

        wrapped = [pad]
        for word in words:
            current = wrapped[-1]
            if len(current) > len(pad) and len(current) + 1 + len(word) > limit:
                wrapped.append(pad)
            wrapped[-1] += word + " "
        out.append("\n".join(wrapped) + "\n")
    return "".join(out)


class CommandUsageLines(NamedTuple):
    raw: str
    keyword: str


def _raw_placeholder(parameter: ParameterSpec) -> str:
    return (parameter.name or parameter.realtype).upper()


def _keyword_placeholder(parameter: ParameterSpec) -> str:
    if parameter.name is None:
        return parameter.realtype.upper()
    return f"--{parameter.name} {parameter.realtype.upper()}"


def format_command_help_lines(spec: CommandSpec) -> CommandUsageLines:
    """Render the two synopsis forms of a command.

    raw::

        COMMAND ARG_NAME ARG_NAME [OPTIONAL_ARG_NAME]

    keyword::

        COMMAND --arg_name TYPE
                --arg_name TYPE
                [--arg_name TYPE]
    """
    raw_parts = [f"  {spec.name}"]
    keyword_parts: list[str] = []
    for index, parameter in enumerate(spec.parameters):
        raw = _raw_placeholder(parameter)
        keyword = _keyword_placeholder(parameter)
        if not spec.is_required(index):
            raw = f"[{raw}]"
            keyword = f"[{keyword}]"
        raw_parts.append(raw)
        keyword_parts.append(keyword)

    keyword_pad = "\n" + " " * (len(spec.name) + 3)
    keyword_usage = f"  {spec.name}"
    if keyword_parts:
        keyword_usage += " " + keyword_pad.join(keyword_parts)
    return CommandUsageLines(raw=" ".join(raw_parts), keyword=keyword_usage)


class HelpFormatter:
    def __init__(self, registry: CommandRegistry, *, program: str = DEFAULT_PROGRAM) -> None:
        self.registry = registry
        self.program = program

    def command_help_lines(self, command: str) -> CommandUsageLines:
        return format_command_help_lines(self.registry[command])

    def command_groups(self) -> dict[str, list[CommandSpec]]:
        return self.registry.groups()

    def all_commands_list(self) -> str:
        groups = self.command_groups()
        res = f"All commands (run '{self.program} help COMMAND' for details):\n"
        for group_name in sorted(groups):
            names = " ".join(spec.name for spec in groups[group_name])
            wrapped = format_help_string(INDEX_INDENT, INDEX_LIMIT, names)
            csv_lines = [
                " " * INDEX_INDENT + line.strip().replace(" ", ", ")
                for line in wrapped.split("\n")
                if line.strip()
            ]
            res += f"  {group_name}:\n" + "\n".join(csv_lines) + "\n\n"
        return res.strip()

    def command_usage(self, command: str) -> str:
        spec = self.registry.get(command)
        if spec is None or command == "help":
            return self.all_commands_list()

        lines = format_command_help_lines(spec)
        res = f"Command: {command}\n"
        res += "Usage:\n"
        res += f"{lines.raw}\n"
        res += f"{lines.keyword}\n\n"
        res += format_help_string(COMMAND_HELP_INDENT, COMMAND_HELP_LIMIT, spec.help_text)
        return res

    def options_usage(self) -> str:
        return OPTIONS_USAGE.format(program=self.program, config_path=DEFAULT_CONFIG_PATH_HINT)

    def usage_string(self) -> str:
        """Full reference manual: global options, then every command by group."""
        res = f"{self.options_usage()}\n\nCommand reference\n"
        groups = self.command_groups()
        for group_name in sorted(groups):
            res += f"Command group: {group_name}\n\n"
            for spec in groups[group_name]:
                lines = format_command_help_lines(spec)
                res += f"{lines.raw}\n"
                res += f"{lines.keyword}\n"
                res += format_help_string(REFERENCE_HELP_INDENT, REFERENCE_HELP_LIMIT, spec.help_text)
                res += "\n"
            res += "\n"
        return res
