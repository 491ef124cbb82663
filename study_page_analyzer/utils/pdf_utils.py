"""PDF page rendering utilities."""

import io
from typing import List, Optional, Tuple
from PIL import Image
import pymupdf as fitz

from .logging_config import get_logger

logger = get_logger(__name__)


class PDFUtils:
    """PDF page rendering utilities"""
    
    @staticmethod
    def render_pages(pdf_path: str, page_numbers: Optional[List[int]] = None,
                     dpi: int = 300) -> List[Tuple[int, Image.Image]]:
        """Render PDF pages (0-indexed) to (page number, PIL Image) pairs."""
        pages = []
        with fitz.open(pdf_path) as doc:
            page_numbers = page_numbers if page_numbers is not None else list(range(len(doc)))
            
            for page_num in page_numbers:
                if page_num < 0 or page_num >= len(doc):
                    logger.warning("Page %d does not exist in %s, skipping", page_num + 1, pdf_path)
                    continue
                    
                page = doc.load_page(page_num)
                mat = fitz.Matrix(dpi/72, dpi/72)
                pix = page.get_pixmap(matrix=mat)
                img_data = pix.tobytes("ppm")
                
                pages.append((page_num, Image.open(io.BytesIO(img_data))))
        
        return pages
    
    @staticmethod
    def pdf_to_images(pdf_path: str, page_numbers: Optional[List[int]] = None, dpi: int = 300) -> List[Image.Image]:
        """Render PDF pages (0-indexed) to PIL Images."""
        return [image for _, image in PDFUtils.render_pages(pdf_path, page_numbers, dpi)]
