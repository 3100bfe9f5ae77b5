import io
import sys

import pytest

from lvhost.log import Log, LogLevel, ansi_reset, ansi_start, log_message
from lvhost.mapper import Mapper
from lvhost.urids import init_urids


class TtyStream(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def log():
    return Log(init_urids(Mapper()))


def test_error_prefix(capsys):
    n = log_message(LogLevel.ERR, "bad %s\n", "thing")
    assert capsys.readouterr().err == "error: bad thing\n"
    assert n == len("bad thing\n")


def test_warning_and_debug_prefixes(capsys):
    log_message(LogLevel.WARNING, "w\n")
    log_message(LogLevel.DEBUG, "d\n")
    assert capsys.readouterr().err == "warning: w\ntrace: d\n"


def test_info_has_no_prefix(capsys):
    log_message(LogLevel.INFO, "%d items\n", 3)
    assert capsys.readouterr().err == "3 items\n"


def test_ansi_start_on_terminal():
    stream = TtyStream()
    assert ansi_start(stream, 31) is True
    assert stream.getvalue() == "\033[0;31m"


def test_ansi_start_not_terminal():
    stream = io.StringIO()
    assert ansi_start(stream, 31) is False
    assert stream.getvalue() == ""


def test_ansi_reset_only_on_terminal():
    tty = TtyStream()
    plain = io.StringIO()
    ansi_reset(tty)
    ansi_reset(plain)
    assert tty.getvalue() == "\033[0m"
    assert plain.getvalue() == ""


def test_coloured_output_on_terminal(monkeypatch):
    stream = TtyStream()
    monkeypatch.setattr(sys, "stderr", stream)
    log_message(LogLevel.ERR, "x")
    assert stream.getvalue() == "\033[0;31merror: x\033[0m"


def test_trace_suppressed_without_tracing(log, capsys):
    assert log.printf(log.urids.log_Trace, "hidden\n") == 0
    assert capsys.readouterr().err == ""


def test_trace_shown_with_tracing(log, capsys):
    log.tracing = True
    log.printf(log.urids.log_Trace, "seen\n")
    assert capsys.readouterr().err == "trace: seen\n"


def test_printf_dispatch(log, capsys):
    log.printf(log.urids.log_Error, "e\n")
    log.printf(log.urids.log_Warning, "w\n")
    log.printf(log.urids.atom_Int, "plain %s\n", "text")
    assert capsys.readouterr().err == "error: e\nwarning: w\nplain text\n"