"""Plain-text rendering of an analysis result."""

from typing import List

from ..models.data_structures import AnalysisResult


class ReportGenerator:
    """Renders results in reading order: page type, math, summary, full text"""
    
    @staticmethod
    def render(result: AnalysisResult, include_full_text: bool = True) -> str:
        lines: List[str] = ["Page Type", f"  {result.page_type}"]
        
        outcome = result.math_outcome
        if outcome.found:
            lines += ["", "Math Solution", f"  {outcome.display_expression}", f"  = {outcome.result}"]
        
        if result.summary_text:
            lines += ["", "Summary", f"  {result.summary_text}"]
        
        if include_full_text:
            lines += ["", "Full Text"]
            lines += [f"  {line}" for line in result.full_text.splitlines()]
        
        return "\n".join(lines)
