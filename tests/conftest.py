"""Shared fixtures: a fake OCR engine and encoded test images."""

from __future__ import annotations

import cv2
import numpy as np
import pytest

from perfscan.helpers.config import Settings
from perfscan.ocr.engine import RecognitionResult, TextRecognizer


class FakeEngine:
    """Stands in for tesseract; returns canned text."""

    def __init__(self, text: str = "", confidence: float = 90.0, error: Exception | None = None):
        self.text = text
        self.confidence = confidence
        self.error = error
        self.calls = 0
        self.terminated = False

    def recognize(self, image):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return RecognitionResult(text=self.text, confidence=self.confidence)

    def terminate(self):
        self.terminated = True


class CountingFactory:
    """Engine factory that records how many engines it built."""

    def __init__(self, **engine_kwargs):
        self.engine_kwargs = engine_kwargs
        self.created: list[FakeEngine] = []

    def __call__(self) -> FakeEngine:
        engine = FakeEngine(**self.engine_kwargs)
        self.created.append(engine)
        return engine

    @property
    def count(self) -> int:
        return len(self.created)


def encode_png(width: int = 32, height: int = 16) -> bytes:
    image = np.full((height, width, 3), 255, dtype=np.uint8)
    ok, buffer = cv2.imencode(".png", image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def png_bytes() -> bytes:
    return encode_png()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def make_recognizer(settings):
    """Build a TextRecognizer around a CountingFactory."""

    def _make(text: str = "", confidence: float = 90.0, error: Exception | None = None):
        factory = CountingFactory(text=text, confidence=confidence, error=error)
        recognizer = TextRecognizer(engine_factory=factory, settings=settings)
        return recognizer, factory

    return _make
