"""
Image processing for screenshot OCR
"""

from .preprocessing import decode_image, preprocess_for_ocr

__all__ = [
    'decode_image',
    'preprocess_for_ocr',
]
