from __future__ import annotations

import pytest

from msbuild_console import config
from msbuild_console.config import ConsoleSettings, Settings, configure_settings, get_settings
from msbuild_console.core.exceptions import EncodingConfigError


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "_settings", None)
    for name in (
        "MSBUILD_CONSOLE_ENCODING",
        "MSBUILD_CONSOLE_CHUNK_SIZE",
        "MSBUILD_CONSOLE_UNSTABLE_IF_WARNINGS",
        "MSBUILD_CONSOLE_CONTINUE_ON_BUILD_FAILURE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = ConsoleSettings()

    assert settings.encoding == "utf-8"
    assert settings.chunk_size == 8192
    assert not settings.unstable_if_warnings
    assert not settings.continue_on_build_failure


def test_encoding_normalised() -> None:
    assert ConsoleSettings(encoding="Windows-1252").encoding == "cp1252"


def test_unknown_encoding_rejected() -> None:
    with pytest.raises(EncodingConfigError):
        ConsoleSettings(encoding="not-a-codec")


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MSBUILD_CONSOLE_ENCODING", "cp850")
    monkeypatch.setenv("MSBUILD_CONSOLE_UNSTABLE_IF_WARNINGS", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.console.encoding == "cp850"
    assert settings.console.unstable_if_warnings
    assert settings.logging.level == "DEBUG"


def test_configure_settings_overrides_global() -> None:
    custom = Settings(console=ConsoleSettings(chunk_size=16))

    configure_settings(custom)

    assert get_settings() is custom
