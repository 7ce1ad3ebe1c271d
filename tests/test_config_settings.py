from pathlib import Path

from exprlang.config.settings import Settings, load_settings
from exprlang.eval.format import OutputFormat


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("EXPRLANG_HOME", raising=False)
    settings = Settings()
    assert settings.output_format is OutputFormat.DECIMAL
    assert settings.show_type is False
    assert settings.resolve_home() == (Path.home() / ".exprlang").resolve()


def test_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EXPRLANG_OUTPUT_FORMAT", "binary")
    monkeypatch.setenv("EXPRLANG_SHOW_TYPE", "true")
    settings = Settings()
    assert settings.output_format is OutputFormat.BINARY
    assert settings.show_type is True
    assert settings.history_file() == (tmp_path / "home").resolve() / "history"


def test_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("EXPRLANG_OUTPUT_FORMAT=hex\n", encoding="utf-8")
    assert Settings().output_format is OutputFormat.HEX


def test_home_expands_user(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("EXPRLANG_HOME", "~/calc")
    assert Settings().resolve_home() == (tmp_path / "calc").resolve()


def test_overrides_win_and_none_falls_through(monkeypatch) -> None:
    monkeypatch.setenv("EXPRLANG_OUTPUT_FORMAT", "binary")
    monkeypatch.setenv("EXPRLANG_SHOW_TYPE", "true")
    settings = load_settings(output_format=OutputFormat.HEX, show_type=None)
    assert settings.output_format is OutputFormat.HEX
    assert settings.show_type is True
