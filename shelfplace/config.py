import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str, default: str) -> Optional[int]:
    raw = os.getenv(name, default).strip()
    return int(raw) if raw else None


class Settings:
    strategy: str = os.getenv("SHELFPLACE_STRATEGY", "row_major")

    # Filter cutoffs, empty string disables the filter
    max_span: Optional[int] = _optional_int("SHELFPLACE_MAX_SPAN", "3")
    min_flexibility: Optional[int] = _optional_int("SHELFPLACE_MIN_FLEXIBILITY", "2")

    seed_demo: bool = os.getenv("SHELFPLACE_SEED_DEMO", "False").lower() == "true"

    log_dir: str = os.getenv("SHELFPLACE_LOG_DIR", "logs")
    log_level: str = os.getenv("SHELFPLACE_LOG_LEVEL", "INFO").upper()


settings = Settings()
