import io
import sys
import pytest
import tracelog
from tracelog.core.flags import LogFlag
from tracelog.ui.colors import BLUE, GREEN, RED, RESET, WHITE, YELLOW


@pytest.fixture
def captured():
    log = tracelog.default()
    old_out, old_flags, old_prefix = log.writer(), log.flags(), log.prefix()
    out = io.StringIO()
    tracelog.set_output(out)
    tracelog.set_flags(LogFlag.SHORT_FILE)
    tracelog.set_prefix("")
    yield out
    log.set_output(old_out)
    log.set_flags(old_flags)
    log.set_prefix(old_prefix)


def test_default_is_a_single_instance():
    assert tracelog.default() is tracelog.default()


def test_package_functions_report_their_caller(captured):
    expected = sys._getframe().f_lineno + 1
    tracelog.info("hello")
    text = captured.getvalue()
    assert text.startswith(BLUE + f"TIME: test_levels.py:{expected}: ")
    assert f"\nLOG LINE: {expected}\n" in text
    assert ".test_package_functions_report_their_caller\n" in text


def test_each_level_colors_its_line(captured):
    tracelog.println("p")
    tracelog.info("i")
    tracelog.warning("w")
    tracelog.error("e")
    tracelog.error("e", RuntimeError("cause"))
    lines = [chunk for chunk in captured.getvalue().split(RESET) if chunk]
    colors = [line[:len(GREEN)] for line in lines]
    assert colors == [WHITE, BLUE, YELLOW, GREEN, RED]
    assert "\nERROR: cause\n" in lines[-1]
    assert "\nERROR: NO ERROR\n" in lines[-2]


def test_set_output_discard_silences(captured):
    tracelog.set_output(tracelog.DISCARD)
    tracelog.warning("nobody hears this")
    assert captured.getvalue() == ""


def test_new_builds_independent_logger(captured):
    other = io.StringIO()
    log = tracelog.new(other, "x ", LogFlag(0))
    log.info("mine")
    assert other.getvalue().startswith(BLUE + "TIME: x \nPATH: ")
    assert captured.getvalue() == ""
