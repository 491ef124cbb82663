"""Batch statistics over analyzed pages."""

from typing import Dict, Iterable

from ..models.data_structures import AnalysisResult
from ..models.enums import MathOutcomeKind


class SummaryGenerator:
    """Aggregate statistics for a batch of analyzed pages"""
    
    @staticmethod
    def create_batch_summary(results: Iterable[AnalysisResult]) -> Dict:
        """Count page types, math outcomes and summarized pages."""
        summary = {
            'total_pages': 0,
            'page_types': {},
            'math_outcomes': {kind.value: 0 for kind in MathOutcomeKind},
            'summarized_pages': 0,
            'average_summary_length': 0.0,
        }
        
        total_summary_length = 0
        
        for result in results:
            summary['total_pages'] += 1
            summary['page_types'][result.page_type] = summary['page_types'].get(result.page_type, 0) + 1
            summary['math_outcomes'][result.math_outcome.kind.value] += 1
            
            if result.summary is not None and not result.summary.is_empty:
                summary['summarized_pages'] += 1
                total_summary_length += len(result.summary.text)
        
        if summary['summarized_pages'] > 0:
            summary['average_summary_length'] = total_summary_length / summary['summarized_pages']
        
        return summary
