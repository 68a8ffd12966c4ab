import pytest

from hellohash.ansi import (
    BACKGROUND_ALL,
    ESCAPE,
    FOREGROUND_ALL,
    AnsiEmulator,
    ConsoleAttr,
)

RED = ConsoleAttr.FOREGROUND_RED
GREEN = ConsoleAttr.FOREGROUND_GREEN
BLUE = ConsoleAttr.FOREGROUND_BLUE
BG_RED = ConsoleAttr.BACKGROUND_RED
BG_GREEN = ConsoleAttr.BACKGROUND_GREEN
BG_BLUE = ConsoleAttr.BACKGROUND_BLUE


@pytest.fixture
def emulator():
    return AnsiEmulator(FOREGROUND_ALL)


def test_initial_attr_is_plain(emulator):
    assert emulator.effective_attr() == FOREGROUND_ALL
    assert emulator.negative is False


def test_bold_sets_foreground_intensity(emulator):
    emulator.apply_sgr([1])
    assert emulator.attr == FOREGROUND_ALL | ConsoleAttr.FOREGROUND_INTENSITY
    emulator.apply_sgr([22])
    assert emulator.attr == FOREGROUND_ALL


def test_faint_clears_intensity(emulator):
    emulator.apply_sgr([1, 2])
    assert emulator.attr == FOREGROUND_ALL


def test_red_replaces_foreground_keeps_background():
    em = AnsiEmulator(FOREGROUND_ALL | BG_BLUE)
    em.apply_sgr([31])
    assert em.attr == RED | BG_BLUE


@pytest.mark.parametrize(
    "code, colour",
    [(30, 0), (32, GREEN), (33, RED | GREEN), (34, BLUE), (35, RED | BLUE), (36, GREEN | BLUE)],
)
def test_foreground_colours(emulator, code, colour):
    emulator.apply_sgr([code])
    assert emulator.attr == colour


@pytest.mark.parametrize(
    "code, colour",
    [(40, 0), (41, BG_RED), (42, BG_GREEN), (43, BG_RED | BG_GREEN), (44, BG_BLUE),
     (45, BG_RED | BG_BLUE), (46, BG_GREEN | BG_BLUE)],
)
def test_background_colours(emulator, code, colour):
    emulator.apply_sgr([code])
    assert emulator.attr == FOREGROUND_ALL | colour


def test_white_ors_rather_than_replaces():
    em = AnsiEmulator(RED | BG_BLUE)
    em.apply_sgr([37])
    assert em.attr == FOREGROUND_ALL | BG_BLUE
    em.apply_sgr([47])
    assert em.attr == FOREGROUND_ALL | BACKGROUND_ALL


def test_default_colour_codes_restore_plain():
    em = AnsiEmulator(GREEN | BG_RED)
    em.apply_sgr([34, 44])
    assert em.attr == BLUE | BG_BLUE
    em.apply_sgr([39])
    assert em.attr == GREEN | BG_BLUE
    em.apply_sgr([49])
    assert em.attr == GREEN | BG_RED


def test_blink_uses_background_intensity(emulator):
    emulator.apply_sgr([5])
    assert emulator.attr == FOREGROUND_ALL | ConsoleAttr.BACKGROUND_INTENSITY
    emulator.apply_sgr([25])
    assert emulator.attr == FOREGROUND_ALL


def test_negative_swaps_colours_without_changing_attr():
    em = AnsiEmulator(RED | BG_BLUE | ConsoleAttr.FOREGROUND_INTENSITY)
    em.apply_sgr([7])
    assert em.negative is True
    assert em.effective_attr() == BG_RED | BLUE | ConsoleAttr.FOREGROUND_INTENSITY
    assert em.attr == RED | BG_BLUE | ConsoleAttr.FOREGROUND_INTENSITY
    em.apply_sgr([27])
    assert em.effective_attr() == em.attr


def test_zero_and_reset_restore_plain(emulator):
    emulator.apply_sgr([31, 7, 1])
    emulator.apply_sgr([0])
    assert emulator.attr == FOREGROUND_ALL
    assert emulator.negative is False
    emulator.apply_sgr([41, 7])
    emulator.reset()
    assert (emulator.attr, emulator.negative) == (FOREGROUND_ALL, False)


def test_unsupported_codes_are_ignored(emulator):
    emulator.apply_sgr([3, 4, 8, 21, 24, 28, 38, 48, 99])
    assert emulator.attr == FOREGROUND_ALL


def test_set_attr_parses_parameters(emulator):
    body = "1;31m"
    consumed, func = emulator.set_attr(body + "rest")
    assert (consumed, func) == (len(body), "m")
    assert emulator.attr == RED | ConsoleAttr.FOREGROUND_INTENSITY


def test_set_attr_empty_parameter_means_reset(emulator):
    emulator.apply_sgr([31])
    consumed, func = emulator.set_attr("m")
    assert (consumed, func) == (1, "m")
    assert emulator.attr == FOREGROUND_ALL


def test_set_attr_erase_leaves_attr(emulator):
    consumed, func = emulator.set_attr("2Kxyz")
    assert (consumed, func) == (len("2K"), "K")
    assert emulator.attr == FOREGROUND_ALL


def test_set_attr_unterminated_consumes_rest(emulator):
    consumed, func = emulator.set_attr("12")
    assert (consumed, func) == (len("12"), "")
    assert emulator.attr == FOREGROUND_ALL


def test_set_attr_unknown_function_is_skipped(emulator):
    consumed, func = emulator.set_attr("31H")
    assert (consumed, func) == (len("31H"), "H")
    assert emulator.attr == FOREGROUND_ALL


def test_emulate_splits_runs_by_attribute(emulator):
    text = f"plain {ESCAPE}31mred{ESCAPE}0m done"
    assert emulator.emulate(text) == [
        ("plain ", FOREGROUND_ALL),
        ("red", RED),
        (" done", FOREGROUND_ALL),
    ]


def test_emulate_reports_erase_in_line(emulator):
    runs = emulator.emulate(f"abc{ESCAPE}K")
    assert runs == [("abc", FOREGROUND_ALL), (None, FOREGROUND_ALL)]


def test_emulate_plain_text_and_empty(emulator):
    assert emulator.emulate("hello") == [("hello", FOREGROUND_ALL)]
    assert emulator.emulate("") == []


def test_emulate_text_reassembles(emulator):
    text = f"a{ESCAPE}1;32mb{ESCAPE}7mc{ESCAPE}mdef"
    runs = emulator.emulate(text)
    assert "".join(run for run, _ in runs if run is not None) == "abcdef"
    assert runs[2] == ("c", BG_GREEN | ConsoleAttr.FOREGROUND_INTENSITY)


def test_emulate_state_persists_between_calls(emulator):
    emulator.emulate(f"{ESCAPE}34m")
    assert emulator.emulate("x") == [("x", BLUE)]