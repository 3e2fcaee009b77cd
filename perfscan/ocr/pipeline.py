"""
Screenshot -> performance records
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..models import PerformanceRecord
from .engine import ProgressCallback, TextRecognizer
from .parser import parse_performance_data

logger = logging.getLogger(__name__)


class PerformancePipeline:
    """Runs OCR on a screenshot and parses the text into records"""

    def __init__(
        self,
        recognizer: TextRecognizer,
        parser: Callable[[str], List[PerformanceRecord]] = parse_performance_data,
    ):
        self.recognizer = recognizer
        self.parser = parser

    def process_screenshot(
        self,
        image_bytes: bytes,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[PerformanceRecord]:
        """
        Extract performance rows from an encoded image.
        ExtractionError from the recognizer propagates as-is; an image with
        nothing parseable gives an empty list.
        """
        logger.info(f"📥 Processing screenshot ({len(image_bytes)} bytes)")
        ocr_result = self.recognizer.extract_text(image_bytes, on_progress)

        logger.debug(f"OCR text: {ocr_result.text!r}")
        records = self.parser(ocr_result.text)

        if records:
            logger.info(f"✅ Parsed {len(records)} performance records "
                        f"(confidence {ocr_result.confidence:.1f})")
        else:
            logger.warning(f"⚠️  No performance records found in OCR text "
                           f"(confidence {ocr_result.confidence:.1f})")
        return records
