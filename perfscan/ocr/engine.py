"""
Text recognition adapter around tesseract
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, asdict
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pytesseract
from pytesseract import Output

from ..helpers.config import Settings, get_settings
from ..image_processing.preprocessing import decode_image, preprocess_for_ocr
from .exceptions import ExtractionError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


@dataclass
class RecognitionResult:
    """Raw OCR output for one image"""
    text: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def assemble_text(data: Dict[str, List[Any]]) -> Tuple[str, float]:
    """
    Rebuild newline-delimited text from an ``image_to_data`` dict.
    Words are grouped on (block, paragraph, line); confidence is the mean
    word confidence, skipping the -1 entries tesseract emits for layout rows.
    """
    lines: Dict[Tuple[int, int, int], List[str]] = {}
    confs: List[float] = []

    for i, word in enumerate(data.get("text", [])):
        word = (word or "").strip()
        if not word:
            continue
        key = (
            int(data["block_num"][i]),
            int(data["par_num"][i]),
            int(data["line_num"][i]),
        )
        lines.setdefault(key, []).append(word)
        try:
            conf = float(str(data["conf"][i]))
        except (KeyError, IndexError, ValueError):
            continue
        if conf >= 0:
            confs.append(conf)

    text = "\n".join(" ".join(words) for words in lines.values())
    confidence = sum(confs) / len(confs) if confs else 0.0
    return text, confidence


class TesseractEngine:
    """
    A configured tesseract instance.
    Construction is the expensive part: it locates and probes the binary.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        if settings.tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = settings.tesseract_cmd

        self.version = pytesseract.get_tesseract_version()
        self.lang = settings.ocr_lang
        self.config = settings.tesseract_config
        logger.info(f"🔧 Tesseract {self.version} ready (lang={self.lang}, config='{self.config}')")

    def recognize(self, image: np.ndarray) -> RecognitionResult:
        data = pytesseract.image_to_data(
            image, lang=self.lang, config=self.config, output_type=Output.DICT
        )
        text, confidence = assemble_text(data)
        return RecognitionResult(text=text, confidence=confidence)

    def terminate(self) -> None:
        """pytesseract spawns a process per call, so there is nothing resident to stop."""
        logger.debug("Tesseract engine released")


def _notify(on_progress: Optional[ProgressCallback], percent: float) -> None:
    if on_progress is not None:
        on_progress(percent)


class TextRecognizer:
    """
    Owns a single recognition engine for the life of the process.

    The engine is built on first use (or by ``open()``) and reused by every
    later call until ``close()``. Calls are serialized with a lock since one
    engine cannot run overlapping recognitions.
    """

    def __init__(
        self,
        engine_factory: Optional[Callable[[], Any]] = None,
        settings: Optional[Settings] = None,
        preprocess: Optional[bool] = None,
    ):
        self._settings = settings or get_settings()
        self._engine_factory = engine_factory or (lambda: TesseractEngine(self._settings))
        self._preprocess = self._settings.ocr_preprocess if preprocess is None else preprocess
        self._engine: Any = None
        self._lock = threading.RLock()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def _ensure_engine(self) -> Any:
        if self._engine is None:
            logger.info("Initializing OCR engine")
            try:
                self._engine = self._engine_factory()
            except Exception as e:
                logger.error(f"❌ OCR engine failed to initialize: {type(e).__name__}: {e}")
                raise ExtractionError("Failed to initialize OCR engine") from e
        return self._engine

    def open(self) -> "TextRecognizer":
        with self._lock:
            self._ensure_engine()
        return self

    def close(self) -> None:
        """Release the engine; a later call starts a fresh one. No-op when closed."""
        with self._lock:
            engine, self._engine = self._engine, None
            if engine is None:
                return
            terminate = getattr(engine, "terminate", None)
            if callable(terminate):
                terminate()
            logger.info("OCR engine shut down")

    shutdown = close

    def __enter__(self) -> "TextRecognizer":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    def extract_text(
        self,
        image_bytes: bytes,
        on_progress: Optional[ProgressCallback] = None,
    ) -> RecognitionResult:
        """
        Run OCR over an encoded image.

        ``on_progress`` receives percentages (0-100) at fixed checkpoints on
        the calling thread. Any engine, decode or recognition failure is
        raised as ExtractionError.
        """
        with self._lock:
            _notify(on_progress, 0)
            engine = self._ensure_engine()
            _notify(on_progress, 10)

            try:
                image = decode_image(image_bytes)
                if self._preprocess:
                    image = preprocess_for_ocr(image)
            except Exception as e:
                logger.error(f"❌ Could not prepare image: {type(e).__name__}: {e}")
                raise ExtractionError("Failed to extract text from image") from e
            _notify(on_progress, 30)

            try:
                result = engine.recognize(image)
            except Exception as e:
                logger.error(f"❌ OCR extraction error: {type(e).__name__}: {e}", exc_info=True)
                raise ExtractionError("Failed to extract text from image") from e

            logger.debug(f"OCR confidence {result.confidence:.1f}, {len(result.text)} chars")
            _notify(on_progress, 100)
            return result
