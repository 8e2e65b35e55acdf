import logging

import pytest
from typer.testing import CliRunner

from planar.infrastructure.random.seeded import SeededRandomSource
from planar.presentation.cli.main import app


@pytest.fixture
def runner(monkeypatch):
    for name in ("PLANAR_DISPLAY_PRECISION", "PLANAR_RANDOM_SEED", "PLANAR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def test_version(runner):
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "planar v1.0.0" in result.output


@pytest.mark.parametrize(
    "args, expected",
    [
        (["scale", "3", "4", "2"], "(6.000000, 8.000000)"),
        (["scale", "-3", "4", "2"], "(-6.000000, 8.000000)"),
        (["rotate", "1", "0", "0", "0", "90", "--degrees"], "(0.000000, 1.000000)"),
        (["middle", "0", "0", "4", "2"], "(2.000000, 1.000000)"),
        (["hsym", "1", "5", "0"], "(1.000000, -5.000000)"),
        (["csym", "1", "1", "0", "0"], "(-1.000000, -1.000000)"),
        (["translate", "0", "0", "1", "1"], "(1.000000, 1.000000)"),
    ],
)
def test_point_commands(runner, args, expected):
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert expected in result.output


def test_angle(runner):
    result = runner.invoke(app, ["angle", "0", "0", "0", "1"])
    assert result.exit_code == 0
    assert "1.570796 rad" in result.output
    assert "90.000000 deg" in result.output


def test_random_with_seed(runner):
    result = runner.invoke(app, ["random", "--seed", "5"])
    assert result.exit_code == 0
    x = SeededRandomSource(5).next_int()
    y = SeededRandomSource(6).next_int()
    assert f"({x:.6f}, {y:.6f})" in result.output


def test_precision_from_environment(runner, monkeypatch):
    monkeypatch.setenv("PLANAR_DISPLAY_PRECISION", "2")
    result = runner.invoke(app, ["scale", "3", "4", "2"])
    assert result.exit_code == 0
    assert "(6.00, 8.00)" in result.output


def test_config(runner):
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "random.seed" in result.output
    assert "display.precision" in result.output


def test_non_numeric_argument_is_rejected(runner):
    result = runner.invoke(app, ["scale", "abc", "4", "2"])
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "name, value",
    [("PLANAR_DISPLAY_PRECISION", "99"), ("PLANAR_LOG_LEVEL", "LOUD")],
)
def test_invalid_configuration_exits_with_message(runner, monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    result = runner.invoke(app, ["scale", "3", "4", "2"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_verbose_enables_debug_logging(runner):
    result = runner.invoke(app, ["-v", "scale", "3", "4", "2"])
    assert result.exit_code == 0
    assert logging.getLogger("planar").level == logging.DEBUG


def test_default_log_level(runner):
    result = runner.invoke(app, ["scale", "3", "4", "2"])
    assert result.exit_code == 0
    assert logging.getLogger("planar").level == logging.WARNING
