"""Short global flag parsing for blockstack-cli.

Just enough getopt(3) to be useful: single-letter flags only, each looked up
independently. A spec string lists the flag letters; a letter followed by
``:`` takes a value from the next token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Union

FlagValue = Union[bool, str, None]

DEFAULT_OPTION_SPEC = "deitUxc:C:F:B:P:D:G:N:H:T:I:"

END_OF_OPTIONS = "--"


@dataclass(frozen=True)
class ParsedOptions:
    flags: dict[str, FlagValue] = field(default_factory=dict)
    remainder: list[str] = field(default_factory=list)

    def get(self, letter: str) -> FlagValue:
        return self.flags.get(letter)

    def is_set(self, letter: str) -> bool:
        value = self.flags.get(letter)
        return value is not None and value is not False


def parse_option_spec(spec: str) -> dict[str, bool]:
    """Map each flag letter in ``spec`` to whether it takes a value."""
    table: dict[str, bool] = {}
    for i, letter in enumerate(spec):
        if letter == ":":
            continue
        table[letter] = i + 1 < len(spec) and spec[i + 1] == ":"
    return table


class OptionParser:
    def __init__(self, spec: str = DEFAULT_OPTION_SPEC) -> None:
        self.spec = spec
        self._takes_value = parse_option_spec(spec)

    @property
    def letters(self) -> tuple[str, ...]:
        return tuple(self._takes_value)

    def parse(self, argv: Sequence[str]) -> ParsedOptions:
        flags: dict[str, FlagValue] = {
            letter: (None if takes_value else False)
            for letter, takes_value in self._takes_value.items()
        }
        # consumed positions are blanked with None so genuine empty tokens survive
        buffer: list[str | None] = list(argv)

        for letter, takes_value in self._takes_value.items():
            token = f"-{letter}"
            i = 0
            while i < len(buffer):
                if buffer[i] == END_OF_OPTIONS:
                    break
                if buffer[i] == token:
                    buffer[i] = None
                    if not takes_value:
                        flags[letter] = True
                    elif i + 1 < len(buffer):
                        flags[letter] = buffer[i + 1]
                        buffer[i + 1] = None
                        i += 1
                    else:
                        flags[letter] = None
                i += 1

        remainder = [t for t in buffer if t is not None and t != END_OF_OPTIONS]
        return ParsedOptions(flags=flags, remainder=remainder)


def parse_cli_options(argv: Sequence[str], spec: str = DEFAULT_OPTION_SPEC) -> ParsedOptions:
    return OptionParser(spec).parse(argv)
