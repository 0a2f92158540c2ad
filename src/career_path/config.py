"""
config.py — Central settings for the Career Path Generator
===========================================================
All configuration is loaded from environment variables / .env file.
Copy .env.example → .env and fill in your values.

Live mode activates automatically when OPENAI_API_KEY contains a real
(non-placeholder) value.  Without it the app serves the canned mock path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from rich.logging import RichHandler

# Load .env into os.environ (no-op if already set, safe to call multiple times)
load_dotenv(override=False)


# ─── Helpers ────────────────────────────────────────────────────────────────

def _is_placeholder(value: str) -> bool:
    """Return True if the value looks like an unfilled template placeholder."""
    return not value or "<" in value or value.startswith("your-") or value == "PLACEHOLDER"


# ─── Generation service ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class GenAIConfig:
    api_key:     str
    base_url:    str
    model:       str
    temperature: float

    @property
    def is_configured(self) -> bool:
        """True when the API key is a real (non-placeholder) value."""
        return bool(self.api_key) and not _is_placeholder(self.api_key)


# ─── App-level settings ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class AppConfig:
    force_mock_mode:    bool
    require_live_mode:  bool
    mock_delay_seconds: float
    log_level:          str


# ─── Master settings object ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    genai: GenAIConfig
    app:   AppConfig

    @property
    def live_mode(self) -> bool:
        """True when the API key is real and FORCE_MOCK_MODE is false."""
        return self.genai.is_configured and not self.app.force_mock_mode

    def status_summary(self) -> dict[str, str]:
        """Return a dict of service → status badge for the UI."""
        if self.live_mode:
            genai_badge = f"🟢 Live ({self.genai.model})"
        elif self.genai.is_configured:
            genai_badge = "🧪 Mock (forced)"
        else:
            genai_badge = "⚪ Not configured — mock path"
        return {"Generation service": genai_badge}


def get_settings() -> Settings:
    """Load all configuration from environment variables."""
    _str   = lambda k, d="": os.getenv(k, d).strip()
    _float = lambda k, d=0.0: float(os.getenv(k, str(d)) or d)
    _bool  = lambda k, d=False: os.getenv(k, str(d)).lower() in ("1", "true", "yes")

    return Settings(
        genai=GenAIConfig(
            api_key     = _str("OPENAI_API_KEY"),
            base_url    = _str("OPENAI_BASE_URL").rstrip("/"),
            model       = _str("LEARNPATH_MODEL", "gpt-4o-mini"),
            temperature = _float("LEARNPATH_TEMPERATURE", 0.7),
        ),
        app=AppConfig(
            force_mock_mode    = _bool("FORCE_MOCK_MODE", False),
            require_live_mode  = _bool("REQUIRE_LIVE_MODE", False),
            mock_delay_seconds = _float("MOCK_DELAY_SECONDS", 1.5),
            log_level          = _str("LOG_LEVEL", "INFO").upper(),
        ),
    )


# ─── Logging ─────────────────────────────────────────────────────────────────

def configure_logging(level: str | None = None) -> None:
    """Install a single RichHandler on the root logger (idempotent)."""
    root = logging.getLogger()
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return
    logging.basicConfig(
        level=level or get_settings().app.log_level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
