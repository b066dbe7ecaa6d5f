import runpy

import pytest

from weatherwire import cli
from weatherwire.registry import Registry
from weatherwire.weather import WEATHER_PROVIDER, StubWeatherProvider


def test_main_prints_temperature_line(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "The temperature in Pune is 32.5\n"
    assert captured.err == ""


def test_main_builder_prints_temperature_line(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main_builder()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "The temperature in Pune is 32.5\n"


def test_run_with_empty_registry_fails_with_message(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.run(lambda: Registry().build())

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert captured.err == "error: Dependency 'WeatherService' is not registered.\n"


def test_run_with_missing_provider_names_provider(capsys: pytest.CaptureFixture[str]) -> None:
    def build_without_provider():  # type: ignore[no-untyped-def]
        registry = Registry()
        registry.register(cli.WEATHER_SERVICE, cli.WeatherService)
        return registry.build()

    exit_code = cli.run(build_without_provider)

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "'WeatherProvider' is not registered" in captured.err


def test_run_closes_resolver() -> None:
    registry = Registry()
    registry.register(WEATHER_PROVIDER, StubWeatherProvider)
    registry.register(cli.WEATHER_SERVICE, cli.WeatherService)
    resolver = registry.build()

    assert cli.run(lambda: resolver) == 0
    assert resolver.is_closed


def test_format_temperature_uses_default_float_formatting() -> None:
    assert cli.format_temperature("Pune", 32.5) == "The temperature in Pune is 32.5"
    assert cli.format_temperature("Oslo", 10.0) == "The temperature in Oslo is 10.0"


def test_module_entry_point_exits_with_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("weatherwire", run_name="__main__")

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "The temperature in Pune is 32.5\n"
