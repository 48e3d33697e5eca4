"""
ChainWatch Backend Configuration

Uses pydantic-settings for type-safe environment variable loading.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

OUTPUT_FORMATS = ("json", "table", "detail", "all")

# Find .env file: check CWD first, then parent (project root)
_env_file = Path(".env")
if not _env_file.exists():
    _parent_env = Path(__file__).resolve().parent.parent.parent / ".env"
    if _parent_env.exists():
        _env_file = _parent_env


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "ChainWatch"
    app_version: str = "1.0.0"
    app_env: str = "local"
    debug: bool = False
    log_level: str = "INFO"

    # ── Delay mitigation rules ───────────────────────────────────────
    # Most units moved in a single inter-DC transfer.
    mitigation_transfer_cap_units: int = 100
    # Days of slack over remaining inventory that production can absorb.
    mitigation_production_slack_days: int = 3

    # Demo CLI
    demo_output_format: str = "all"

    model_config = {
        "env_file": str(_env_file),
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    settings = Settings()
    _enforce_rule_guardrails(settings)
    return settings


def _enforce_rule_guardrails(settings: Settings) -> None:
    if settings.mitigation_transfer_cap_units <= 0:
        raise ValueError("mitigation_transfer_cap_units must be positive")
    if settings.mitigation_production_slack_days < 0:
        raise ValueError("mitigation_production_slack_days must not be negative")
    if settings.demo_output_format not in OUTPUT_FORMATS:
        raise ValueError(f"demo_output_format must be one of {', '.join(OUTPUT_FORMATS)}")
