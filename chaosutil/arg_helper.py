"""Minimal command-line option matching with per-option callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

ArgHandler = Callable[[int, str, Optional[str]], None]

_SHOW_BEGIN = "---------------- show args begin ----------------\n"
_SHOW_END = "---------------- show args end ----------------\n\n"


@dataclass(frozen=True)
class ArgOption:
    """One accepted option, written on the command line as ``-name``."""

    name: str
    description: str = ""
    has_val: bool = False
    handler: Optional[ArgHandler] = None


@dataclass(frozen=True)
class ArgPair:
    """A matched option: its position in the option list and its value, if any."""

    index: int
    value: Optional[str] = None


@dataclass
class ParseResult:
    """Matched options in command-line order plus arguments that matched nothing."""

    pairs: list[ArgPair] = field(default_factory=list)
    unmatched: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when every argument matched an option."""
        return not self.unmatched


class ArgParseError(ValueError):
    """Raised for a malformed argument or an option missing its value."""

    def __init__(self, message: str, pairs: Iterable[ArgPair] = ()) -> None:
        super().__init__(message)
        self.pairs = list(pairs)


def parse_args(options: Optional[Sequence[ArgOption]], argv: Iterable[str]) -> ParseResult:
    """Match ``argv`` (without the program name) against ``options``.

    Each option's handler, if set, is called as it is matched. Arguments that
    match no option are collected in ``ParseResult.unmatched``. A malformed
    argument or a missing value raises :class:`ArgParseError`, which carries
    the pairs matched before the failure.
    """
    if options is None:
        raise ArgParseError("no options given")
    options = list(options)

    result = ParseResult()
    args = iter(argv)
    for arg in args:
        if options and (len(arg) <= 1 or not arg.startswith("-")):
            raise ArgParseError(f"malformed argument {arg!r}", result.pairs)

        matched = False
        arg_value: Optional[str] = None
        for index, option in enumerate(options):
            if arg[1:] != option.name:
                continue
            if option.has_val and arg_value is None:
                arg_value = next(args, None)
                if arg_value is None:
                    raise ArgParseError(f"option {arg!r} needs a value", result.pairs)
            value = arg_value if option.has_val else None
            result.pairs.append(ArgPair(index, value))
            matched = True
            if option.handler is not None:
                option.handler(index, option.name, value)
                break

        if not matched:
            result.unmatched.append(arg)
    return result


def format_args(options: Iterable[ArgOption]) -> str:
    """Return the listing of options that :func:`show_args` prints."""
    lines = "".join(f"-{opt.name}         {opt.description}\n" for opt in options)
    return f"{_SHOW_BEGIN}{lines}{_SHOW_END}"


def show_args(options: Iterable[ArgOption]) -> None:
    """Print every option with its description."""
    print(format_args(options), end="")