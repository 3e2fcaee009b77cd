"""
Performance OCR service
Entry point for the screenshot extraction API
"""

if __name__ == "__main__":
    import uvicorn
    from perfscan.helpers.config import get_settings

    settings = get_settings()
    uvicorn.run("perfscan.main:app", host=settings.host, port=settings.port, reload=True)
