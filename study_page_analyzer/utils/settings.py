"""Runtime settings read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Tunable parameters of the analysis pipeline"""
    summary_sentence_count: int = 3
    log_level: str = "INFO"
    pdf_dpi: int = 300
    max_workers: int = 4
    nltk_auto_download: bool = True

    def __post_init__(self):
        if self.summary_sentence_count < 1:
            raise ValueError("summary_sentence_count must be at least 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """Build settings from STUDY_* environment variables."""
        load_dotenv(dotenv_path)
        return cls(
            summary_sentence_count=_env_int("STUDY_SUMMARY_SENTENCE_COUNT", cls.summary_sentence_count),
            log_level=os.getenv("STUDY_LOG_LEVEL", cls.log_level),
            pdf_dpi=_env_int("STUDY_PDF_DPI", cls.pdf_dpi),
            max_workers=_env_int("STUDY_MAX_WORKERS", cls.max_workers),
            nltk_auto_download=_env_bool("STUDY_NLTK_AUTO_DOWNLOAD", cls.nltk_auto_download),
        )
