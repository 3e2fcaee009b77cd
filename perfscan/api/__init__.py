"""
HTTP API for the performance extraction service
"""

from .routes import router

__all__ = ['router']
