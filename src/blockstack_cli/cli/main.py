"""Command-line interface for blockstack-cli."""

from __future__ import annotations

import json
import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

from blockstack_cli.cli.config import (
    apply_option_overrides,
    default_config_path,
    load_config,
    network_from_options,
)
from blockstack_cli.cli.logs import configure_logging
from blockstack_cli.errors import BlockstackCLIError, UnrecognizedNetworkError
from blockstack_cli.help import DEFAULT_PROGRAM, HelpFormatter
from blockstack_cli.options import ParsedOptions, parse_cli_options
from blockstack_cli.schema import CommandRegistry, build_default_registry
from blockstack_cli.validator import check_args

EXIT_SUCCESS = 0
EXIT_USAGE = 1
EXIT_CONFIG_ERROR = 2
EXIT_EXECUTION_ERROR = 3

HELP_COMMAND = "help"

_SENSITIVE_FIELDS = (
    "private_key",
    "owner_key",
    "payment_key",
    "reveal_key",
    "app_private_key",
    "backup_phrase",
    "password",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandInvocation:
    """A validated command, ready to hand to an executor."""

    command: str
    args: tuple[str, ...]
    options: ParsedOptions
    network: str
    config: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "args": list(self.args),
            "network": self.network,
            "options": {k: v for k, v in self.options.flags.items() if v not in (None, False)},
        }


Executor = Callable[[CommandInvocation], int]


def _sanitize_error_text(value: str) -> str:
    redacted = value
    for name in _SENSITIVE_FIELDS:
        redacted = re.sub(
            rf"(?i)({name}\s*[=:]\s*)([^,\s]+)",
            r"\1[REDACTED]",
            redacted,
        )
    redacted = re.sub(r"(?i)\b[0-9a-f]{64,66}\b", "[REDACTED]", redacted)
    return redacted


def _print_error(stderr, prefix: str, message: str, *, code: int) -> int:
    print(f"{prefix}: {_sanitize_error_text(message)}", file=stderr)
    return code


def _config_error_reporter(*, debug: bool, stderr) -> Callable[[Path, Exception], None]:
    def report(path: Path, exc: Exception) -> None:
        if debug and path.exists():
            print(f"config warning: ignoring {path}: {exc}", file=stderr)

    return report


def _run_help(*, args: Sequence[str], formatter: HelpFormatter, stdout) -> int:
    if args:
        print(formatter.command_usage(args[0]), file=stdout)
    else:
        print(formatter.usage_string(), file=stdout)
    return EXIT_SUCCESS


def _run_executor(*, invocation: CommandInvocation, executor: Executor | None, stdout, stderr) -> int:
    if executor is None:
        print(json.dumps(invocation.to_dict(), sort_keys=True), file=stdout)
        return EXIT_SUCCESS
    try:
        return int(executor(invocation))
    except BlockstackCLIError as exc:
        return _print_error(stderr, "execution error", str(exc), code=EXIT_EXECUTION_ERROR)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdout=sys.stdout,
    stderr=sys.stderr,
    executor: Executor | None = None,
    registry: CommandRegistry | None = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    options = parse_cli_options(argv)
    debug = options.is_set("d")

    network = network_from_options(options)
    config_file = options.get("c")
    try:
        config_path = config_file if isinstance(config_file, str) else default_config_path(network)
        config = load_config(
            config_path,
            network,
            on_error=_config_error_reporter(debug=debug, stderr=stderr),
        )
    except UnrecognizedNetworkError as exc:
        return _print_error(stderr, "config error", str(exc), code=EXIT_CONFIG_ERROR)
    apply_option_overrides(config, options)
    configure_logging(config.get("log_config"), debug=debug, stream=stderr)
    logger.debug("network %s, config file %s", network, config_path)

    registry = registry if registry is not None else build_default_registry()
    formatter = HelpFormatter(registry, program=DEFAULT_PROGRAM)
    result = check_args(options.remainder, registry)
    if not result.success:
        _print_error(stderr, "error", result.message, code=EXIT_USAGE)
        print(formatter.command_usage(result.command), file=stderr)
        return EXIT_USAGE

    if result.command == HELP_COMMAND:
        return _run_help(args=result.args, formatter=formatter, stdout=stdout)

    invocation = CommandInvocation(
        command=result.command,
        args=tuple(result.args),
        options=options,
        network=network,
        config=config,
    )
    return _run_executor(invocation=invocation, executor=executor, stdout=stdout, stderr=stderr)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
