"""Image loading utilities."""

import os
from PIL import Image

IMAGE_EXTENSIONS = {'.png', '.jpg', '.jpeg', '.tif', '.tiff', '.bmp', '.gif', '.webp'}


class ImageUtils:
    """Image loading utilities"""
    
    @staticmethod
    def is_image_path(path: str) -> bool:
        return os.path.splitext(path)[1].lower() in IMAGE_EXTENSIONS
    
    @staticmethod
    def load_image(path: str) -> Image.Image:
        """Open an image file as RGB, fully loaded so the file handle is released."""
        with Image.open(path) as image:
            image.load()
            return image.convert('RGB') if image.mode != 'RGB' else image.copy()
