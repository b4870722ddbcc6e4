"""A reentrant getopt-style command-line option parser with long options."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

MSG_INVALID = "invalid option"
MSG_MISSING = "option requires an argument"
MSG_TOOMANY = "option takes no arguments"

_MAX_MESSAGE = 64


class ArgType(IntEnum):
    """Whether an option takes an argument."""

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


@dataclass(frozen=True)
class LongOption:
    """A GNU-style long option, optionally paired with a short name."""

    longname: str | None
    shortname: str | None = None
    argtype: ArgType = ArgType.NONE


class OptionError(Exception):
    """An option was unknown, lacked its argument or had one it must not."""

    def __init__(self, reason: str, option: str) -> None:
        prefix = f"{reason} -- '"
        room = max(0, _MAX_MESSAGE - 2 - len(prefix))
        message = f"{prefix}{option[:room]}'"
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.option = option


def _is_dashdash(arg: str | None) -> bool:
    return arg == "--"


def _is_shortopt(arg: str | None) -> bool:
    return arg is not None and len(arg) >= 2 and arg[0] == "-" and arg[1] != "-"


def _is_longopt(arg: str | None) -> bool:
    return arg is not None and len(arg) >= 3 and arg.startswith("--")


def _argtype(optstring: str, char: str) -> int:
    if char == ":":
        return -1
    index = optstring.find(char)
    if index == -1:
        return -1
    count = ArgType.NONE
    if optstring[index + 1:index + 2] == ":":
        count += 2 if optstring[index + 2:index + 3] == ":" else 1
    return count


def _optstring_from_long(longopts: Sequence[LongOption]) -> str:
    return "".join(
        opt.shortname + ":" * int(opt.argtype)
        for opt in longopts
        if opt.shortname
    )


def _long_matches(longname: str | None, option: str) -> bool:
    if longname is None:
        return False
    return option.split("=", 1)[0] == longname


def _long_argument(option: str) -> str | None:
    _, sep, value = option.partition("=")
    return value if sep else None


class OptParser:
    """Walks an argument vector, returning one option per call.

    ``argv[0]`` is the program name and is skipped. With ``permute``
    non-option arguments are moved behind the options as parsing goes.
    """

    def __init__(self, argv: Sequence[str], permute: bool = True) -> None:
        self.argv = list(argv)
        self.permute = permute
        self.optind = 1
        self.optopt: str | None = None
        self.optarg: str | None = None
        self._subopt = 0

    def _at(self, index: int) -> str | None:
        return self.argv[index] if index < len(self.argv) else None

    def _move_behind(self, index: int) -> None:
        self.argv.insert(self.optind - 1, self.argv.pop(index))

    def parse(self, optstring: str) -> tuple[str, str | None] | None:
        """Return the next ``(option, argument)`` or None when done.

        Raises OptionError for an unknown option or a missing argument;
        parsing may continue afterwards.
        """
        option = self._at(self.optind)
        self.optopt = None
        self.optarg = None
        if option is None:
            return None
        if _is_dashdash(option):
            self.optind += 1
            return None
        if not _is_shortopt(option):
            if not self.permute:
                return None
            index = self.optind
            self.optind += 1
            try:
                return self.parse(optstring)
            finally:
                self._move_behind(index)
                self.optind -= 1

        rest = option[self._subopt + 1:]
        char = rest[0]
        self.optopt = char
        kind = _argtype(optstring, char)
        following = self._at(self.optind + 1)

        if kind == -1:
            self._subopt = 0
            self.optind += 1
            raise OptionError(MSG_INVALID, char)
        if kind == ArgType.NONE:
            if rest[1:]:
                self._subopt += 1
            else:
                self._subopt = 0
                self.optind += 1
            return char, None
        self._subopt = 0
        self.optind += 1
        if kind == ArgType.REQUIRED:
            if rest[1:]:
                self.optarg = rest[1:]
            elif following is not None:
                self.optarg = following
                self.optind += 1
            else:
                raise OptionError(MSG_MISSING, char)
            return char, self.optarg
        self.optarg = rest[1:] or None
        return char, self.optarg

    def parse_long(self, longopts: Sequence[LongOption]) -> tuple[LongOption, str | None] | None:
        """Return the next ``(LongOption, argument)`` or None when done.

        Short options are looked up by the short names of ``longopts``.
        Raises OptionError on a bad option.
        """
        option = self._at(self.optind)
        if option is None:
            return None
        if _is_dashdash(option):
            self.optind += 1
            return None
        if _is_shortopt(option):
            return self._long_fallback(longopts)
        if not _is_longopt(option):
            if not self.permute:
                return None
            index = self.optind
            self.optind += 1
            try:
                return self.parse_long(longopts)
            finally:
                self._move_behind(index)
                self.optind -= 1

        self.optopt = None
        self.optarg = None
        body = option[2:]
        self.optind += 1
        for longopt in longopts:
            if not _long_matches(longopt.longname, body):
                continue
            self.optopt = longopt.shortname
            value = _long_argument(body)
            if longopt.argtype == ArgType.NONE and value is not None:
                raise OptionError(MSG_TOOMANY, longopt.longname or "")
            if value is not None:
                self.optarg = value
            elif longopt.argtype == ArgType.REQUIRED:
                self.optarg = self._at(self.optind)
                if self.optarg is None:
                    raise OptionError(MSG_MISSING, longopt.longname or "")
                self.optind += 1
            return longopt, self.optarg
        raise OptionError(MSG_INVALID, body)

    def _long_fallback(self, longopts: Sequence[LongOption]) -> tuple[LongOption, str | None] | None:
        result = self.parse(_optstring_from_long(longopts))
        if result is None:
            return None
        char, value = result
        matches = [opt for opt in longopts if opt.shortname == char]
        return matches[-1], value

    def arg(self) -> str | None:
        """Step over and return the next argument, or None if none is left."""
        option = self._at(self.optind)
        self._subopt = 0
        if option is not None:
            self.optind += 1
        return option