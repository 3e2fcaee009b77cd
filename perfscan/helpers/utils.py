"""
Utility functions used across the application
"""

from fastapi import HTTPException, UploadFile

ALLOWED_IMAGE_TYPES = ["image/png", "image/jpeg", "image/jpg", "image/webp", "image/bmp", "image/tiff"]


def validate_image_file(file: UploadFile) -> None:
    """Validate uploaded image file"""
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(status_code=400, detail="Invalid file type")
