"""Text recognition services that turn a page image into text."""

from ..exceptions import UpstreamServiceError
from ..utils.logging_config import get_logger

logger = get_logger(__name__)


class TextRecognizer:
    """Contract for OCR backends: ``recognize(image) -> str``"""
    
    def recognize(self, image) -> str:
        raise NotImplementedError


class SuryaTextRecognizer(TextRecognizer):
    """OCR with Surya's detection and recognition predictors.

    Recognized lines are joined with newlines in the order Surya returns them.
    """
    
    def __init__(self, recognition_predictor=None, detection_predictor=None):
        if recognition_predictor is None or detection_predictor is None:
            logger.info("Initializing Surya predictors...")
            try:
                from surya.recognition import RecognitionPredictor
                from surya.detection import DetectionPredictor
            except ImportError as e:
                logger.error("Error importing Surya: %s. Please install Surya: pip install surya-ocr", e)
                raise
            recognition_predictor = recognition_predictor or RecognitionPredictor()
            detection_predictor = detection_predictor or DetectionPredictor()
        
        self.recognition_predictor = recognition_predictor
        self.detection_predictor = detection_predictor
    
    def recognize(self, image) -> str:
        predictions = self.recognition_predictor([image], det_predictor=self.detection_predictor)
        if not predictions or not predictions[0]:
            raise UpstreamServiceError("no text recognized")
        
        lines = [getattr(line, 'text', '') for line in getattr(predictions[0], 'text_lines', [])]
        return '\n'.join(line for line in lines if line)
