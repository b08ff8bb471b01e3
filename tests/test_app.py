import pytest

from pmcputemp.app import DEFAULT_INTERVAL, Options, parse_args
from pmcputemp.icon import Style


def test_defaults():
    options = parse_args([])
    assert options == Options()
    assert options.style is Style.DEFAULT
    assert options.interval == 5000
    assert options.module is None


@pytest.mark.parametrize(
    "arg, style",
    [("d", Style.DARK), ("l", Style.LIGHT), ("dark", Style.DARK), ("light", Style.LIGHT)],
)
def test_style_from_first_letter(arg, style):
    assert parse_args([arg]).style is style


@pytest.mark.parametrize("seconds", range(1, 10))
def test_interval_in_range(seconds):
    assert parse_args([str(seconds)]).interval == seconds * 1000


@pytest.mark.parametrize("arg", ["0", "x", ""])
def test_interval_out_of_range_uses_default(arg, capsys):
    assert parse_args([arg]).interval == DEFAULT_INTERVAL
    assert "Polling interval out of range" in capsys.readouterr().err


def test_module_from_longer_argument():
    assert parse_args(["k10temp"]).module == "k10temp"


def test_second_module_is_rejected(capsys):
    options = parse_args(["k10temp", "coretemp"])
    assert options.module == "k10temp"
    assert "kernel module k10temp is already specified" in capsys.readouterr().err


def test_combined_arguments():
    options = parse_args(["d", "7", "k10temp"])
    assert options == Options(style=Style.DARK, interval=7000, module="k10temp")


def test_too_many_arguments_loads_defaults(capsys):
    options = parse_args(["d", "3", "k10temp", "coretemp"])
    assert options == Options()
    assert "Too many arguments" in capsys.readouterr().err


def test_three_arguments_are_accepted():
    options = parse_args(["l", "2", "coretemp"])
    assert options.style is Style.LIGHT
    assert options.module == "coretemp"
    assert options.interval == 2 * 1000