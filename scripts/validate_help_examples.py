#!/usr/bin/env python3
from __future__ import annotations

import argparse
import re
import shlex
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from blockstack_cli.errors import ArgumentError  # noqa: E402
from blockstack_cli.options import parse_cli_options  # noqa: E402
from blockstack_cli.resolver import ArgumentResolver  # noqa: E402
from blockstack_cli.schema import build_default_registry  # noqa: E402

PROGRAM = "blockstack-cli"


def _extract_help_examples(text: str) -> list[str]:
    commands: list[str] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(f"$ {PROGRAM} "):
            commands.append(stripped[2:])
    return commands


def _extract_markdown_examples(text: str) -> list[str]:
    pattern = re.compile(r"```(?:bash|console|shell)\s*(.*?)```", re.DOTALL | re.IGNORECASE)
    commands: list[str] = []
    for block in pattern.findall(text):
        for line in block.splitlines():
            stripped = line.strip().removeprefix("$ ")
            if stripped.startswith(f"{PROGRAM} "):
                commands.append(stripped)
    return commands


def _check(resolver: ArgumentResolver, example: str) -> str | None:
    argv = shlex.split(example)[1:]
    remainder = parse_cli_options(argv).remainder
    if not remainder:
        return "no command"
    try:
        resolver.resolve(remainder[0], remainder[1:])
    except ArgumentError as exc:
        return str(exc)
    return None


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check that usage examples name real commands and real --arguments"
    )
    parser.add_argument(
        "--paths",
        nargs="*",
        default=["README.md"],
        help="Markdown files whose shell blocks are checked as well",
    )
    args = parser.parse_args()

    registry = build_default_registry()
    resolver = ArgumentResolver(registry)
    errors: list[str] = []
    checked = 0

    for name, spec in registry.items():
        for example in _extract_help_examples(spec.help_text):
            checked += 1
            problem = _check(resolver, example)
            if problem:
                errors.append(f"help for {name}: {problem}: {example}")

    for raw in args.paths:
        path = Path(raw)
        if not path.exists():
            errors.append(f"{path}: not found")
            continue
        for example in _extract_markdown_examples(path.read_text(encoding="utf-8")):
            checked += 1
            problem = _check(resolver, example)
            if problem:
                errors.append(f"{path}: {problem}: {example}")

    if errors:
        print("help example validation failed:")
        for item in errors:
            print(f"- {item}")
        return 1

    print(f"help example validation passed ({checked} examples)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
