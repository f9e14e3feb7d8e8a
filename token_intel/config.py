"""Environment-based configuration with validation."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the package directory or cwd
_env_path = Path(__file__).resolve().parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)
else:
    load_dotenv()

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int = 0) -> int:
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer, using %d", key, raw, default)
        return default


def _env_bool(key: str, default: bool = False) -> bool:
    return os.getenv(key, str(default)).lower() in ("1", "true", "yes")


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Tunables for the token extractor."""

    # EVM addresses do not reveal which EVM chain they live on
    evm_default_chain: str = field(
        default_factory=lambda: _env("EVM_DEFAULT_CHAIN", "eth").strip().lower()
    )
    log_preview_chars: int = field(
        default_factory=lambda: _env_int("LOG_PREVIEW_CHARS", 80)
    )


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    extractor: ExtractorConfig = field(default_factory=ExtractorConfig)
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_json: bool = field(default_factory=lambda: _env_bool("LOG_JSON", False))

    def validate(self) -> None:
        """Validate settings; exits on failure."""
        errors: list[str] = []
        if not self.extractor.evm_default_chain:
            errors.append("EVM_DEFAULT_CHAIN must not be empty")
        if self.extractor.log_preview_chars <= 0:
            errors.append("LOG_PREVIEW_CHARS must be positive")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        if errors:
            for err in errors:
                logger.error("Config error: %s", err)
            raise SystemExit(
                "Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors)
            )
