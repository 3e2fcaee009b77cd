"""
Environment-driven settings
"""

import os
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the OCR engine and the web server"""

    tesseract_cmd: Optional[str] = None
    ocr_lang: str = "eng"
    ocr_psm: int = 3
    ocr_oem: int = 3
    ocr_preprocess: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def tesseract_config(self) -> str:
        return f"--psm {self.ocr_psm} --oem {self.ocr_oem}"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            tesseract_cmd=os.getenv("TESSERACT_CMD") or None,
            ocr_lang=os.getenv("OCR_LANG", "eng"),
            ocr_psm=_env_int("OCR_PSM", 3),
            ocr_oem=_env_int("OCR_OEM", 3),
            ocr_preprocess=_env_bool("OCR_PREPROCESS", False),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "127.0.0.1"),
            port=_env_int("PORT", 8000),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings read once from the environment"""
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Install a basic root handler; repeated calls only adjust the level"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
