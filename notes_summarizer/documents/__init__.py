"""
Documents Module

Plain-text extraction from uploaded transcript files.
"""

from .extractor import SUPPORTED_EXTENSIONS, extract_text

__all__ = ["SUPPORTED_EXTENSIONS", "extract_text"]
