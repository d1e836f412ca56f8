"""Command-line option registry and tokenizer."""

from .registry import OptionEntry, OptionRegistry, OptionsMap
from .tokenizer import HELP_FLAGS, IGNORE_FLAGS, RESET_FLAGS, ParsedArguments, tokenize

__all__ = [
    "HELP_FLAGS",
    "IGNORE_FLAGS",
    "RESET_FLAGS",
    "OptionEntry",
    "OptionRegistry",
    "OptionsMap",
    "ParsedArguments",
    "tokenize",
]
