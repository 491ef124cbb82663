"""Utility modules for page analysis."""

from .pdf_utils import PDFUtils
from .image_utils import ImageUtils
from .logging_config import get_logger, set_package_level
from .settings import Settings

__all__ = ["PDFUtils", "ImageUtils", "get_logger", "set_package_level", "Settings"]
