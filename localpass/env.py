import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[Path] = None


def load_env() -> None:
    """Load .env from the working directory if present."""
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path)


def get_settings() -> Settings:
    """Read LOCALPASS_LOG_LEVEL and LOCALPASS_LOG_DIR from the environment."""
    level = os.getenv("LOCALPASS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL
    log_dir = os.getenv("LOCALPASS_LOG_DIR", "").strip()
    return Settings(log_level=level, log_dir=Path(log_dir) if log_dir else None)
