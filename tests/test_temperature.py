import subprocess
from unittest import mock

import pytest

from pmcputemp.temperature import TemperatureError, TemperatureSource, parse_millidegrees


def _sensor(tmp_path, value):
    sensor = tmp_path / "temp1_input"
    sensor.write_text(value)
    config = tmp_path / "pmcputemprc"
    config.write_text(f"{sensor}\n")
    return config


def test_parse_millidegrees_plain():
    assert parse_millidegrees("45000\n") == 45000


def test_parse_millidegrees_leading_space_and_sign():
    assert parse_millidegrees("  -3 rest") == -3


def test_parse_millidegrees_rejects_text():
    with pytest.raises(TemperatureError):
        parse_millidegrees("abc")


def test_read_converts_to_degrees(tmp_path):
    config = _sensor(tmp_path, "45000\n")
    assert TemperatureSource(config).read() == 45


def test_read_truncates(tmp_path):
    config = _sensor(tmp_path, "125000\n")
    assert TemperatureSource(config).read() == 125


@pytest.mark.parametrize("value", ["5000", "9999", "125001"])
def test_read_out_of_range(tmp_path, value):
    config = _sensor(tmp_path, value)
    with pytest.raises(TemperatureError):
        TemperatureSource(config).read()


def test_read_unparseable_sensor(tmp_path):
    config = _sensor(tmp_path, "garbage")
    with pytest.raises(TemperatureError):
        TemperatureSource(config).read()


def test_empty_config_gives_up(tmp_path):
    config = tmp_path / "pmcputemprc"
    config.write_text("")
    with pytest.raises(TemperatureError):
        TemperatureSource(config, max_tries=2).read()
    assert config.exists()


@mock.patch("pmcputemp.temperature.subprocess.run")
def test_missing_sensor_deletes_config(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 1)
    config = tmp_path / "pmcputemprc"
    config.write_text(str(tmp_path / "nowhere"))
    with pytest.raises(TemperatureError):
        TemperatureSource(config).read()
    assert not config.exists()
    assert run.call_count == 1


@mock.patch("pmcputemp.temperature.subprocess.run")
def test_make_config_command_with_module(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 0)
    source = TemperatureSource(tmp_path / "rc", module="it87")
    assert source.make_config() == 0
    assert run.call_args.args[0] == ["bash", "-c", "pmcputemp-sh", "it87"]
    assert source.config_created is True


@mock.patch("pmcputemp.temperature.subprocess.run")
def test_make_config_command_without_module(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 3)
    assert TemperatureSource(tmp_path / "rc").make_config() == 3
    assert run.call_args.args[0] == ["bash", "-c", "pmcputemp-sh"]


@mock.patch("pmcputemp.temperature.subprocess.run")
def test_read_creates_config(run, tmp_path):
    sensor = tmp_path / "temp1_input"
    sensor.write_text("52000\n")
    config = tmp_path / "pmcputemprc"

    def create(*args, **kwargs):
        config.write_text(str(sensor))
        return subprocess.CompletedProcess([], 0)

    run.side_effect = create
    source = TemperatureSource(config)
    assert source.read() == 52
    assert source.config_created is True


@mock.patch("pmcputemp.temperature.subprocess.run")
def test_helper_succeeds_but_writes_nothing(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 0)
    with pytest.raises(TemperatureError):
        TemperatureSource(tmp_path / "rc", max_tries=3).read()
    assert run.call_count == 4