import io

import pytest

from fifocache.reporting import Reporter


def test_log_writes_to_stream_and_file(tmp_path):
    out = tmp_path / "out.txt"
    stream = io.StringIO()
    with Reporter(str(out), stream) as reporter:
        reporter.log("End of unit tests")
    assert stream.getvalue() == "End of unit tests\n"
    assert out.read_text(encoding="utf-8") == "End of unit tests\n"


def test_log_without_file_uses_stream_only():
    stream = io.StringIO()
    reporter = Reporter(stream=stream)
    reporter.log("first")
    reporter.log("second")
    assert stream.getvalue().splitlines() == ["first", "second"]
    assert reporter.is_open is False


def test_open_switches_files(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    stream = io.StringIO()
    reporter = Reporter(str(first), stream)
    reporter.log("one")
    reporter.open(str(second))
    reporter.log("two")
    reporter.close()
    assert first.read_text(encoding="utf-8") == "one\n"
    assert second.read_text(encoding="utf-8") == "two\n"


def test_close_stops_file_output(tmp_path):
    out = tmp_path / "out.txt"
    stream = io.StringIO()
    reporter = Reporter(str(out), stream)
    reporter.log("kept")
    reporter.close()
    reporter.log("console only")
    assert out.read_text(encoding="utf-8") == "kept\n"
    assert stream.getvalue().splitlines() == ["kept", "console only"]


def test_exit_closes_file(tmp_path):
    with Reporter(str(tmp_path / "x.txt"), io.StringIO()) as reporter:
        assert reporter.is_open
    assert reporter.is_open is False


def test_default_stream_is_stdout(capsys):
    reporter = Reporter()
    reporter.log("hello")
    assert capsys.readouterr().out == "hello\n"


def test_open_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        Reporter(str(tmp_path / "missing" / "out.txt"), io.StringIO())