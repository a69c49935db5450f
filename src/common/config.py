"""Configuration helpers for the pool quote engine runtime."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from dotenv import dotenv_values


DEFAULT_ENVIRONMENT = "development"
DEFAULT_FEE_NUMERATOR = 30
DEFAULT_FEE_DENOMINATOR = 10_000
DEFAULT_SLIPPAGE_BPS = 50
DEFAULT_TRANSCRIPTS_DIR = "transcripts"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Container for environment-derived configuration."""

    environment: str = DEFAULT_ENVIRONMENT
    fee_numerator: int = DEFAULT_FEE_NUMERATOR
    fee_denominator: int = DEFAULT_FEE_DENOMINATOR
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS
    transcripts_dir: Path = Path(DEFAULT_TRANSCRIPTS_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, *, env_files: Iterable[str] | None = None) -> "Settings":
        """Build settings from environment variables, optionally loading dotenv files."""

        env_overrides: dict[str, str] = {}
        if env_files:
            for candidate in env_files:
                candidate_path = os.path.abspath(candidate)
                if os.path.isfile(candidate_path):
                    values = {
                        key: value
                        for key, value in dotenv_values(candidate_path).items()
                        if value is not None
                    }
                    env_overrides.update(values)

        def get_override(key: str) -> Optional[str]:
            if key in os.environ:
                return os.environ[key]
            return env_overrides.get(key)

        def lookup(key: str, default: str) -> str:
            value = get_override(key)
            if value is None:
                return default
            stripped = value.strip()
            return stripped or default

        return cls(
            environment=lookup("CPQUOTE_ENV", DEFAULT_ENVIRONMENT),
            fee_numerator=int(lookup("CPQUOTE_FEE_NUMERATOR", str(DEFAULT_FEE_NUMERATOR))),
            fee_denominator=int(lookup("CPQUOTE_FEE_DENOMINATOR", str(DEFAULT_FEE_DENOMINATOR))),
            slippage_bps=int(lookup("CPQUOTE_SLIPPAGE_BPS", str(DEFAULT_SLIPPAGE_BPS))),
            transcripts_dir=Path(lookup("CPQUOTE_TRANSCRIPTS_DIR", DEFAULT_TRANSCRIPTS_DIR)),
            log_level=lookup("CPQUOTE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
