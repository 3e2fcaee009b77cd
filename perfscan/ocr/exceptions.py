"""
Exceptions raised by the OCR pipeline
"""


class PerfScanError(Exception):
    """Base class for perfscan errors"""


class ExtractionError(PerfScanError):
    """The recognition engine could not produce text for an image.

    The underlying failure is kept as ``__cause__``.
    """

    def __init__(self, message: str = "Failed to extract text from image"):
        super().__init__(message)
