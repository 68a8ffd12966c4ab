"""Command-line option scanning with short options, long options and argument permutation.

A ``GetOpt`` holds the scanning state for one argument vector. Each call to
``getopt``, ``getopt_long`` or ``getopt_long_only`` returns the next option.
It returns ``None`` once the options run out. ``optarg``, ``optind`` and
``optopt`` describe the option just returned.

Return values:

* a short option returns its character;
* a long option returns its ``val``, or ``0`` after storing ``val`` in
  ``flags[flag]`` when the option has a ``flag``;
* an unknown option or an ambiguous abbreviation returns ``"?"``;
* a missing or unexpected argument returns ``":"`` if the option string
  begins with ``":"``, and ``"?"`` otherwise;
* with an option string beginning with ``"-"``, a non-option returns
  ``INORDER`` and is stored in ``optarg``.

Non-options are permuted to the end of ``argv`` by the long-option scanners
unless ``POSIXLY_CORRECT`` is set or the option string begins with ``"+"``.
"""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

INORDER = "\x01"
BADCH = "?"

OptionResult = Optional[Union[str, int, Hashable]]


class HasArg(enum.IntEnum):
    """Whether a long option takes an argument."""

    NO_ARGUMENT = 0
    REQUIRED_ARGUMENT = 1
    OPTIONAL_ARGUMENT = 2


@dataclass(frozen=True)
class LongOption:
    """A long option: its name, argument kind, returned value and optional flag key."""

    name: str
    has_arg: HasArg = HasArg.NO_ARGUMENT
    val: Hashable = 0
    flag: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "has_arg", HasArg(self.has_arg))


class _Mode(enum.IntFlag):
    NONE = 0
    PERMUTE = 0x01
    ALLARGS = 0x02
    LONGONLY = 0x04


_NOT_LONG = object()


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` (``b`` must be non-zero)."""
    c = a % b
    while c != 0:
        a, b = b, c
        c = a % b
    return b


def permute_args(argv: list, nonopt_start: int, nonopt_end: int, opt_end: int) -> None:
    """Swap ``argv[nonopt_start:nonopt_end]`` with ``argv[nonopt_end:opt_end]`` in place.

    Each block keeps its own order.
    """
    argv[nonopt_start:opt_end] = argv[nonopt_end:opt_end] + argv[nonopt_start:nonopt_end]


class GetOpt:
    """Scanning state over one argument vector; ``argv[0]`` is the program name."""

    def __init__(self, argv: Iterable[str], opterr: bool = True) -> None:
        self.argv: list[str] = list(argv)
        self.opterr = bool(opterr)
        self.optind = 1
        self.optarg: Optional[str] = None
        self.optopt: Hashable = BADCH
        self.optreset = False
        self.longindex: Optional[int] = None
        self.flags: dict[str, Hashable] = {}
        self.errmsg = ""
        self._arg = ""
        self._pos = 0
        self._nonopt_start = -1
        self._nonopt_end = -1
        self._posixly_correct = "POSIXLY_CORRECT" in os.environ

    def reset(self) -> None:
        """Restart scanning from ``argv[1]``."""
        self.optind = 1
        self.optreset = True
        self.optarg = None
        self._clear_place()

    def getopt(self, options: str) -> OptionResult:
        """Return the next short option; stops at the first non-option."""
        return self._scan(options, None, _Mode.NONE)

    def getopt_long(self, options: str, long_options: Sequence[LongOption]) -> OptionResult:
        """Return the next short or ``--long`` option, permuting non-options."""
        return self._scan(options, list(long_options), _Mode.PERMUTE)

    def getopt_long_only(
        self, options: str, long_options: Sequence[LongOption]
    ) -> OptionResult:
        """Like ``getopt_long``, but ``-name`` is tried as a long option first."""
        return self._scan(options, list(long_options), _Mode.PERMUTE | _Mode.LONGONLY)

    def _clear_place(self) -> None:
        self._arg = ""
        self._pos = 0

    def _current(self) -> str:
        return self._arg[self._pos : self._pos + 1]

    def _warn(self, options: str, message: str) -> None:
        if self.opterr and not options.startswith(":"):
            self.errmsg = message
            print(message, file=sys.stderr)

    @staticmethod
    def _badarg(options: str) -> str:
        return ":" if options.startswith(":") else BADCH

    def _permute(self, opt_end: int) -> None:
        permute_args(self.argv, self._nonopt_start, self._nonopt_end, opt_end)

    def _parse_long(
        self, options: str, long_options: list[LongOption], short_too: bool
    ) -> object:
        current = self._arg[self._pos :]
        self.optind += 1

        name_part, equals, value = current.partition("=")
        has_equal = value if equals else None

        match: Optional[int] = None
        for index, option in enumerate(long_options):
            if not option.name.startswith(name_part):
                continue
            if len(option.name) == len(name_part):
                match = index
                break
            if short_too and len(name_part) == 1:
                continue
            if match is None:
                match = index
            else:
                self._warn(options, f"ambiguous option -- {name_part}")
                self.optopt = 0
                return BADCH

        if match is None:
            if short_too:
                self.optind -= 1
                return _NOT_LONG
            self._warn(options, f"unknown option -- {current}")
            self.optopt = 0
            return BADCH

        option = long_options[match]
        if option.has_arg is HasArg.NO_ARGUMENT and has_equal is not None:
            self._warn(options, f"option doesn't take an argument -- {name_part}")
            self.optopt = option.val if option.flag is None else 0
            return self._badarg(options)

        if option.has_arg in (HasArg.REQUIRED_ARGUMENT, HasArg.OPTIONAL_ARGUMENT):
            if has_equal is not None:
                self.optarg = has_equal
            elif option.has_arg is HasArg.REQUIRED_ARGUMENT:
                self.optarg = (
                    self.argv[self.optind] if self.optind < len(self.argv) else None
                )
                self.optind += 1

        if option.has_arg is HasArg.REQUIRED_ARGUMENT and self.optarg is None:
            self._warn(options, f"option requires an argument -- {current}")
            self.optopt = option.val if option.flag is None else 0
            self.optind -= 1
            return self._badarg(options)

        self.longindex = match
        if option.flag is not None:
            self.flags[option.flag] = option.val
            return 0
        return option.val

    def _next_argument(self, options: str, mode: _Mode) -> tuple[bool, OptionResult]:
        """Move to the next argument; return (done, result) when scanning stops here."""
        while True:
            self.optreset = False
            if self.optind >= len(self.argv):
                self._clear_place()
                if self._nonopt_end != -1:
                    self._permute(self.optind)
                    self.optind -= self._nonopt_end - self._nonopt_start
                elif self._nonopt_start != -1:
                    self.optind = self._nonopt_start
                self._nonopt_start = self._nonopt_end = -1
                return True, None

            arg = self.argv[self.optind]
            self._arg, self._pos = arg, 0
            if arg[:1] != "-" or (len(arg) == 1 and "-" not in options):
                self._clear_place()
                if mode & _Mode.ALLARGS:
                    self.optarg = arg
                    self.optind += 1
                    return True, INORDER
                if not mode & _Mode.PERMUTE:
                    return True, None
                if self._nonopt_start == -1:
                    self._nonopt_start = self.optind
                elif self._nonopt_end != -1:
                    self._permute(self.optind)
                    self._nonopt_start = self.optind - (
                        self._nonopt_end - self._nonopt_start
                    )
                    self._nonopt_end = -1
                self.optind += 1
                continue

            if self._nonopt_start != -1 and self._nonopt_end == -1:
                self._nonopt_end = self.optind

            if len(arg) > 1:
                self._pos = 1
                if arg == "--":
                    self.optind += 1
                    self._clear_place()
                    if self._nonopt_end != -1:
                        self._permute(self.optind)
                        self.optind -= self._nonopt_end - self._nonopt_start
                    self._nonopt_start = self._nonopt_end = -1
                    return True, None
            return False, None

    def _scan(
        self,
        options: Optional[str],
        long_options: Optional[list[LongOption]],
        mode: _Mode,
    ) -> OptionResult:
        if options is None:
            return None

        if self._posixly_correct or options.startswith("+"):
            mode &= ~_Mode.PERMUTE
        elif options.startswith("-"):
            mode |= _Mode.ALLARGS
        if options[:1] in ("+", "-"):
            options = options[1:]

        if self.optind == 0:
            self.optind = 1
            self.optreset = True

        self.optarg = None
        if self.optreset:
            self._nonopt_start = self._nonopt_end = -1

        if self.optreset or not self._current():
            done, result = self._next_argument(options, mode)
            if done:
                return result

        cur = self._current()
        if (
            long_options is not None
            and self._pos != 0
            and (cur == "-" or mode & _Mode.LONGONLY)
        ):
            short_too = False
            if cur == "-":
                self._pos += 1
            elif cur and cur != ":" and cur in options:
                short_too = True
            result = self._parse_long(options, long_options, short_too)
            if result is not _NOT_LONG:
                self._clear_place()
                return result

        optchar = self._current()
        self._pos += 1
        rest = self._current()

        if optchar == ":" or (optchar == "-" and rest) or optchar not in options:
            if optchar == "-" and not rest:
                return None
            if not rest:
                self.optind += 1
            self._warn(options, f"unknown option -- {optchar}")
            self.optopt = optchar
            return BADCH

        oli = options.index(optchar)
        spec = options[oli + 1 : oli + 3]

        if long_options is not None and optchar == "W" and spec[:1] == ";":
            if not rest:
                self.optind += 1
                if self.optind >= len(self.argv):
                    self._clear_place()
                    self._warn(options, f"option requires an argument -- {optchar}")
                    self.optopt = optchar
                    return self._badarg(options)
                self._arg, self._pos = self.argv[self.optind], 0
            result = self._parse_long(options, long_options, False)
            self._clear_place()
            return result

        if spec[:1] != ":":
            if not rest:
                self.optind += 1
        else:
            self.optarg = None
            if rest:
                self.optarg = self._arg[self._pos :]
            elif spec[1:2] != ":":
                self.optind += 1
                if self.optind >= len(self.argv):
                    self._clear_place()
                    self._warn(options, f"option requires an argument -- {optchar}")
                    self.optopt = optchar
                    return self._badarg(options)
                self.optarg = self.argv[self.optind]
            self._clear_place()
            self.optind += 1
        return optchar