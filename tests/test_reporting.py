import io
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from lox.reporting import CollectingReporter, ConsoleReporter, Diagnostic  # noqa: E402


def test_diagnostic_with_line():
    assert str(Diagnostic("Unterminated string literal", 3)) == (
        "[Line 3]: Unterminated string literal"
    )


def test_diagnostic_without_line():
    assert str(Diagnostic("something odd")) == "something odd"
    # zero reads as "no line"
    assert str(Diagnostic("something odd", 0)) == "something odd"


def test_console_reporter_writes_to_stream():
    out = io.StringIO()
    reporter = ConsoleReporter(out)
    reporter.report('Unrecognized character "$"', 2)
    reporter.report("no line here")
    assert out.getvalue() == '[Line 2]: Unrecognized character "$"\nno line here\n'
    assert reporter.error_count == 2


def test_console_reporter_defaults_to_stderr(capsys):
    ConsoleReporter().report("oops", 1)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "[Line 1]: oops\n"


def test_collecting_reporter():
    reporter = CollectingReporter()
    assert not reporter.had_error
    reporter.report("first", 1)
    reporter.report("second")
    assert reporter.had_error
    assert reporter.diagnostics == [Diagnostic("first", 1), Diagnostic("second", None)]


def test_collecting_reporter_forwards():
    out = io.StringIO()
    reporter = CollectingReporter(forward=ConsoleReporter(out))
    reporter.report("bad", 5)
    assert len(reporter.diagnostics) == 1
    assert out.getvalue() == "[Line 5]: bad\n"
