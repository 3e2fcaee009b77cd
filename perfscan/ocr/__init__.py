"""
OCR pipeline for reading performance rows from screenshots
"""

from .exceptions import PerfScanError, ExtractionError
from .engine import RecognitionResult, TesseractEngine, TextRecognizer
from .parser import (
    parse_full_line,
    parse_name_then_stats,
    parse_positional_fallback,
    parse_performance_data
)
from .pipeline import PerformancePipeline

__all__ = [
    'PerfScanError',
    'ExtractionError',
    'RecognitionResult',
    'TesseractEngine',
    'TextRecognizer',
    'parse_full_line',
    'parse_name_then_stats',
    'parse_positional_fallback',
    'parse_performance_data',
    'PerformancePipeline'
]
