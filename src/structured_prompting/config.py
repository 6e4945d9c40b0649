"""Configuration management for structured prompting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    data_file: Path = Path(os.getenv("DATA_FILE", "data/complex_data.json")).resolve()

    # OpenAI API settings
    openai_api_key: Optional[str] = os.getenv("OPENAI_API_KEY")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    log_level: str = os.getenv("LOG_LEVEL", "WARNING")


def get_settings() -> Settings:
    return Settings()
