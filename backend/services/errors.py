"""Error taxonomy for the skill analysis pipeline.

Each error carries the HTTP status the route answers with.
"""


class AnalysisError(Exception):
    status_code: int = 500


class ValidationError(AnalysisError):
    """Missing or malformed input. Client-fixable."""
    status_code = 400


class ExtractionError(AnalysisError):
    """The resume PDF could not be decoded or has no text layer."""
    status_code = 400


class CompletionError(AnalysisError):
    """The completion service failed, timed out or returned nothing."""
    status_code = 500


class ParseError(AnalysisError):
    """The completion output did not contain the expected JSON."""
    status_code = 500
