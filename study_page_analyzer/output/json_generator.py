"""JSON output generation utilities."""

import datetime
import hashlib
import json
import os
from typing import Any, Dict, Optional

from ..models.data_structures import AnalysisResult


class JSONGenerator:
    """JSON output generation utilities"""
    
    @staticmethod
    def result_to_dict(result: AnalysisResult) -> Dict[str, Any]:
        """Flatten an analysis result into JSON-friendly values."""
        outcome = result.math_outcome
        summary = result.summary
        return {
            'full_text': result.full_text,
            'page_type': result.page_type,
            'math': {
                'kind': outcome.kind.value,
                'expression': outcome.expression,
                'display_expression': outcome.display_expression,
                'result': outcome.result,
            },
            'summary': None if summary is None else {
                'text': summary.text,
                'sentences': [{'text': s.text, 'start': s.start} for s in summary.sentences],
            },
        }
    
    @staticmethod
    def create_page_metadata(source_path: str, page_num: Optional[int], dpi: Optional[int] = None) -> Dict:
        """Create page-level metadata block."""
        source_id = hashlib.md5(source_path.encode()).hexdigest()[:16]
        
        return {
            'source_id': source_id,
            'source_name': os.path.basename(source_path),
            'source_path': source_path,
            'page_number': page_num,
            'processing_timestamp': datetime.datetime.now().isoformat(),
            'dpi': dpi,
        }
    
    @staticmethod
    def write_results(results: Dict[str, Any], output_path: str) -> str:
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        return output_path
