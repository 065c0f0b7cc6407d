class NewsArticleError(Exception):
    """Raised when a news article lacks a usable publish date."""

    def __init__(self, message: str, path=None) -> None:
        super().__init__(message)
        self.path = path


class FeedParseError(Exception):
    """Raised when a published feed cannot be parsed."""


class PipelineConfigurationError(Exception):
    """Raised when a pipeline configuration does not conform to its schema."""

    def __init__(self, message: str, errors=None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])
