import pytest

from termcli import color
from termcli.color import (
    Bg,
    BgBright,
    Fg,
    FgBright,
    Style,
    after_input,
    after_prompt,
    before_input,
    before_prompt,
    color_enabled,
    set_color,
    set_no_color,
    sgr,
    supports_color,
)


@pytest.fixture(autouse=True)
def _restore_color():
    was_on = color.color_enabled()
    yield
    if was_on:
        set_color()
    else:
        set_no_color()


def test_sgr_format():
    assert sgr(Fg.GREEN) == "\033[32m"
    assert sgr(Style.RESET) == "\033[0m"


def test_sgr_uses_enum_value():
    for value in (Bg.RED, BgBright.CYAN, FgBright.GRAY, Style.BOLD):
        assert sgr(value) == f"\033[{value.value}m"


@pytest.mark.parametrize("term", ["xterm-256color", "linux", "screen", "vt100"])
def test_supports_color_known_terms(term):
    assert supports_color(term) is True


@pytest.mark.parametrize("term", [None, "dumb", ""])
def test_supports_color_unknown_terms(term):
    assert supports_color(term) is False


def test_toggle_flag():
    set_color()
    assert color_enabled() is True
    set_no_color()
    assert color_enabled() is False


def test_no_color_emits_nothing():
    set_no_color()
    assert before_prompt() + after_prompt() + before_input() + after_input() == ""


def test_color_prompt_sequences():
    set_color()
    assert before_prompt() == sgr(Fg.GREEN) + sgr(Style.BOLD)
    assert after_prompt() == sgr(Style.RESET)


def test_color_input_sequences():
    set_color()
    assert before_input() == sgr(FgBright.GRAY)
    assert after_input() == sgr(Style.RESET)