"""Split a raw argument vector into control flags and field assignments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from rankconf.options.registry import OptionRegistry

HELP_FLAGS: tuple[str, str] = ("-h", "--help")
RESET_FLAGS: tuple[str, str] = ("-r", "--reset")
IGNORE_FLAGS: tuple[str, str] = ("-i", "--ignore")


@dataclass
class ParsedArguments:
    """Result of tokenizing one argument vector.

    Attributes:
        assignments: Field name to raw string value, in command-line order.
            A field given twice keeps the last value.
        help_requested: ``-h``/``--help`` was present
        reset_requested: ``-r``/``--reset`` was present
        ignore_requested: ``-i``/``--ignore`` was present
        ignored: Tokens that were not recognized
    """

    assignments: dict[str, str] = field(default_factory=dict)
    help_requested: bool = False
    reset_requested: bool = False
    ignore_requested: bool = False
    ignored: list[str] = field(default_factory=list)

    @property
    def has_assignments(self) -> bool:
        return bool(self.assignments)


def tokenize(argv: Sequence[str], registry: OptionRegistry) -> ParsedArguments:
    """Parse ``argv`` against ``registry``.

    Accepts ``--flag value``, ``--flag=value`` and the short forms. Unknown
    tokens and a trailing flag without a value are dropped, never raised.

    Args:
        argv: Raw arguments, without the program name
        registry: Flag spellings to recognize

    Returns:
        The parsed control flags and assignments
    """
    parsed = ParsedArguments()
    i = 0
    while i < len(argv):
        token = argv[i]
        i += 1

        if token in HELP_FLAGS:
            parsed.help_requested = True
            continue
        if token in RESET_FLAGS:
            parsed.reset_requested = True
            continue
        if token in IGNORE_FLAGS:
            parsed.ignore_requested = True
            continue

        if "=" in token:
            name, _, value = token.partition("=")
            field_name = registry.lookup(name.lstrip("-"))
            if field_name is not None:
                parsed.assignments[field_name] = value
                continue
        elif token.startswith("-"):
            field_name = registry.lookup(token.lstrip("-"))
            if field_name is not None and i < len(argv):
                parsed.assignments[field_name] = argv[i]
                i += 1
                continue

        parsed.ignored.append(token)

    return parsed
