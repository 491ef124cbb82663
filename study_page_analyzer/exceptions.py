"""Exception types raised inside the analysis pipeline."""


class StudyPageAnalyzerError(Exception):
    """Base class for errors raised by this package"""


class CandidateRejected(StudyPageAnalyzerError, ValueError):
    """Candidate has nothing left to evaluate after normalization"""


class EvaluationError(StudyPageAnalyzerError, ValueError):
    """Normalized expression could not be evaluated"""


class UpstreamServiceError(StudyPageAnalyzerError):
    """Text recognition or page classification did not produce a result"""
