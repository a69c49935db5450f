"""Unit tests for cpquote CLI entrypoints."""

import json

import pytest

from cpquote.cli import run_cli


SMALL_POOL = [
    "--reserve-in",
    "1000",
    "--reserve-out",
    "1000",
    "--fee-numerator",
    "3",
    "--fee-denominator",
    "1000",
]


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


def test_forward_command_prints_quote(capsys) -> None:
    exit_code = run_cli(["forward", *SMALL_POOL, "--amount-in", "100"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "amount_out: 90" in captured.out
    assert "min_amount_out (50 bps): 89" in captured.out


def test_reverse_command_prints_required_input(capsys) -> None:
    exit_code = run_cli(["reverse", *SMALL_POOL, "--amount-out", "90"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "amount_in: 100" in captured.out


def test_reverse_command_reports_insufficient_liquidity(capsys) -> None:
    exit_code = run_cli(["reverse", *SMALL_POOL, "--amount-out", "1000"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error: InsufficientLiquidity" in captured.out


def test_invalid_pool_reports_config_error(capsys) -> None:
    exit_code = run_cli(
        ["forward", "--reserve-in", "-1", "--reserve-out", "10", "--amount-in", "1"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error: InvalidPoolConfig" in captured.out


def test_fee_defaults_come_from_env_file(tmp_path, capsys) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("CPQUOTE_FEE_NUMERATOR=3\nCPQUOTE_FEE_DENOMINATOR=1000\n", encoding="utf-8")

    exit_code = run_cli(
        [
            "--env-file",
            str(env_file),
            "forward",
            "--reserve-in",
            "1000",
            "--reserve-out",
            "1000",
            "--amount-in",
            "100",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "amount_out: 90" in captured.out


def test_simulate_command_chains_swaps_and_writes_transcript(tmp_path, capsys) -> None:
    transcript = tmp_path / "run.json"

    exit_code = run_cli(
        [
            "simulate",
            *SMALL_POOL,
            "--amount-in",
            "100",
            "--amount-in",
            "100",
            "--transcript",
            str(transcript),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "[1] in=100 | out=90" in captured.out
    assert "reserves=(1100, 910)" in captured.out
    lines = [l for l in captured.out.splitlines() if l.strip().startswith("[")]
    assert len(lines) == 2

    payload = json.loads(transcript.read_text(encoding="utf-8"))
    assert payload["initial"]["reserve_in"] == "1000"
    assert [step["amount_out"] for step in payload["steps"]] == ["90", "75"]
