import sys

from pmcputemp.sensors import BUFFER_SIZE, NO_DATA, read_sensors


def _python(code):
    return [sys.executable, "-c", code]


def test_reads_command_output():
    text = read_sensors(_python("print('temp1: +40.0 C')"))
    assert text == "temp1: +40.0 C\n"


def test_empty_output_gives_no_data():
    assert read_sensors(_python("pass")) == "No data"


def test_missing_command_gives_no_data():
    assert read_sensors(["pmcputemp-command-that-does-not-exist"]) == NO_DATA


def test_stderr_is_discarded():
    code = "import sys; sys.stderr.write('noise'); print('ok')"
    assert read_sensors(_python(code)) == "ok\n"


def test_large_output_is_truncated(capsys):
    text = read_sensors(_python("print('x' * 2000, end='')"))
    assert len(text) == BUFFER_SIZE
    assert set(text) == {"x"}
    assert "Too big to read" in capsys.readouterr().err


def test_small_output_gives_no_warning(capsys):
    read_sensors(_python("print('fan1: 1200 RPM')"))
    assert "Too big to read" not in capsys.readouterr().err