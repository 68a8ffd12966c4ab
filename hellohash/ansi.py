"""ANSI colour escape emulation over a console attribute word.

The emulator follows the SGR (``m``) and erase-in-line (``K``) sequences and
keeps a console text attribute up to date. ``emulate`` splits text into runs,
and each run carries the attribute it would be written with.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable


class ConsoleAttr(enum.IntFlag):
    """Console character attribute bits."""

    FOREGROUND_BLUE = 0x0001
    FOREGROUND_GREEN = 0x0002
    FOREGROUND_RED = 0x0004
    FOREGROUND_INTENSITY = 0x0008
    BACKGROUND_BLUE = 0x0010
    BACKGROUND_GREEN = 0x0020
    BACKGROUND_RED = 0x0040
    BACKGROUND_INTENSITY = 0x0080


ESCAPE = "\x1b["

FOREGROUND_ALL = int(
    ConsoleAttr.FOREGROUND_RED | ConsoleAttr.FOREGROUND_GREEN | ConsoleAttr.FOREGROUND_BLUE
)
BACKGROUND_ALL = int(
    ConsoleAttr.BACKGROUND_RED | ConsoleAttr.BACKGROUND_GREEN | ConsoleAttr.BACKGROUND_BLUE
)

_WORD = 0xFFFF
_PARAM_CHARS = "0123456789;"

_R, _G, _B = 4, 2, 1  # foreground bit values; background is the same shifted by 4
_COLOURS = {0: 0, 1: _R, 2: _G, 3: _R | _G, 4: _B, 5: _R | _B, 6: _G | _B}

_SWAP_PAIRS = (
    (ConsoleAttr.FOREGROUND_RED, ConsoleAttr.BACKGROUND_RED),
    (ConsoleAttr.FOREGROUND_GREEN, ConsoleAttr.BACKGROUND_GREEN),
    (ConsoleAttr.FOREGROUND_BLUE, ConsoleAttr.BACKGROUND_BLUE),
)


class AnsiEmulator:
    """Tracks the console attribute that a stream of ANSI escapes selects."""

    def __init__(self, plain_attr: int = FOREGROUND_ALL) -> None:
        self.plain_attr = int(plain_attr) & _WORD
        self.attr = self.plain_attr
        self.negative = False

    def reset(self) -> None:
        """Return to the plain attribute with negative video off."""
        self.attr = self.plain_attr
        self.negative = False

    def apply_sgr(self, params: Iterable[int]) -> None:
        """Apply a sequence of Select Graphic Rendition parameters."""
        for code in params:
            self._apply_one(int(code))

    def _apply_one(self, code: int) -> None:
        fg_intensity = int(ConsoleAttr.FOREGROUND_INTENSITY)
        bg_intensity = int(ConsoleAttr.BACKGROUND_INTENSITY)
        if code == 0:
            self.reset()
        elif code == 1:
            self.attr |= fg_intensity
        elif code in (2, 22):
            self.attr &= ~fg_intensity
        elif code in (5, 6):
            self.attr |= bg_intensity
        elif code == 25:
            self.attr &= ~bg_intensity
        elif code == 7:
            self.negative = True
        elif code == 27:
            self.negative = False
        elif 30 <= code <= 36:
            self.attr = (self.attr & ~FOREGROUND_ALL) | _COLOURS[code - 30]
        elif code == 37:
            self.attr |= FOREGROUND_ALL
        elif code == 39:
            self.attr = (self.attr & ~FOREGROUND_ALL) | (self.plain_attr & FOREGROUND_ALL)
        elif 40 <= code <= 46:
            self.attr = (self.attr & ~BACKGROUND_ALL) | (_COLOURS[code - 40] << 4)
        elif code == 47:
            self.attr |= BACKGROUND_ALL
        elif code == 49:
            self.attr = (self.attr & ~BACKGROUND_ALL) | (self.plain_attr & BACKGROUND_ALL)
        # Italic, underline, conceal, extended colours and the rest are ignored.
        self.attr &= _WORD

    def effective_attr(self) -> int:
        """Return the attribute to write with, colours swapped under negative video."""
        if not self.negative:
            return self.attr
        result = self.attr & ~(FOREGROUND_ALL | BACKGROUND_ALL)
        for fg, bg in _SWAP_PAIRS:
            if self.attr & fg:
                result |= bg
            if self.attr & bg:
                result |= fg
        return result & _WORD

    def set_attr(self, text: str) -> tuple[int, str]:
        """Interpret the escape body at the start of ``text`` (after ``ESC [``).

        Returns the number of characters consumed and the function character,
        which is empty if the text ends before one.
        """
        span = len(text) - len(text.lstrip(_PARAM_CHARS))
        func = text[span : span + 1]
        if func == "m":
            params = [int(part) if part else 0 for part in text[:span].split(";")]
            self.apply_sgr(params)
        return span + len(func), func

    def emulate(self, text: str) -> list[tuple[str | None, int]]:
        """Split ``text`` into ``(run, attr)`` pairs, applying escapes in order.

        A run of ``None`` stands for an erase to the end of the line.
        """
        runs: list[tuple[str | None, int]] = []
        rest = text
        while rest:
            head, sep, tail = rest.partition(ESCAPE)
            if head:
                runs.append((head, self.effective_attr()))
            if not sep:
                break
            consumed, func = self.set_attr(tail)
            if func == "K":
                runs.append((None, self.effective_attr()))
            rest = tail[consumed:]
        return runs