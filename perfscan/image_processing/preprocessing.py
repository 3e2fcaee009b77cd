"""
Image decoding and preprocessing for OCR
"""

import cv2
import numpy as np


def decode_image(image_bytes: bytes) -> np.ndarray:
    """Decode raw upload bytes into a BGR image"""
    if not image_bytes:
        raise ValueError("Empty image payload")
    nparr = np.frombuffer(image_bytes, np.uint8)
    image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)
    if image is None:
        raise ValueError("Could not decode image")
    return image


def preprocess_for_ocr(image: np.ndarray) -> np.ndarray:
    """
    Clean up a results screen for tesseract.
    Scoreboards are usually light text on a dark background, so dark
    images are inverted before thresholding.
    """
    # Upscale small screenshots (2x)
    h, w = image.shape[:2]
    if h < 1000:
        scale = 2.0
        image = cv2.resize(image, (int(w * scale), int(h * scale)),
                           interpolation=cv2.INTER_CUBIC)

    if len(image.shape) == 3:
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    else:
        gray = image

    # Dark bg -> light bg
    if float(gray.mean()) < 127:
        gray = cv2.bitwise_not(gray)

    denoised = cv2.fastNlMeansDenoising(gray, h=10)

    clahe = cv2.createCLAHE(clipLimit=3.0, tileGridSize=(8, 8))
    enhanced = clahe.apply(denoised)

    _, binary = cv2.threshold(enhanced, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary
