"""Settings resolution from the environment and dotenv files."""

from pathlib import Path

import pytest

from common import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for key in (
        "CPQUOTE_ENV",
        "CPQUOTE_FEE_NUMERATOR",
        "CPQUOTE_FEE_DENOMINATOR",
        "CPQUOTE_SLIPPAGE_BPS",
        "CPQUOTE_TRANSCRIPTS_DIR",
        "CPQUOTE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults_without_environment() -> None:
    settings = Settings.from_env()

    assert settings == Settings()
    assert (settings.fee_numerator, settings.fee_denominator) == (30, 10_000)
    assert settings.transcripts_dir == Path("transcripts")


def test_env_file_values_are_loaded(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "CPQUOTE_ENV=staging\nCPQUOTE_SLIPPAGE_BPS=75\nCPQUOTE_LOG_LEVEL=debug\n",
        encoding="utf-8",
    )

    settings = Settings.from_env(env_files=[str(env_file), str(tmp_path / "missing.env")])

    assert settings.environment == "staging"
    assert settings.slippage_bps == 75
    assert settings.log_level == "DEBUG"


def test_process_environment_wins_over_env_file(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("CPQUOTE_FEE_NUMERATOR=5\n", encoding="utf-8")
    monkeypatch.setenv("CPQUOTE_FEE_NUMERATOR", "25")

    settings = Settings.from_env(env_files=[str(env_file)])

    assert settings.fee_numerator == 25
