class AnalysisError(Exception):
    """Raised when the résumé analysis pipeline fails for a request."""
