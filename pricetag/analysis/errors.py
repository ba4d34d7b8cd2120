"""Error taxonomy for the analyze flow.

Every error terminates the request; none is retried. ``status_code`` and
``message`` are what the HTTP layer reports to the caller.
"""


class AnalysisError(Exception):
    """Base exception for analyze-flow failures."""

    status_code: int = 500
    default_message: str = "Failed to process request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(AnalysisError):
    """The model credential is missing."""

    default_message = "Gemini API key not found"


class ValidationError(AnalysisError):
    """A required input is missing or unreadable."""

    status_code = 400
    default_message = "Missing required parameters"


class UpstreamError(AnalysisError):
    """The model call raised."""

    default_message = "Failed to analyze image with Gemini"


class ExtractionError(AnalysisError):
    """No JSON object present in the model output."""

    default_message = "No valid JSON found in response"

    def __init__(self, message: str | None = None, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class ParseError(AnalysisError):
    """A JSON-looking span was found but is malformed."""

    default_message = "Failed to parse price information"

    def __init__(self, message: str | None = None, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text
