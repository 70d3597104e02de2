class NewsPipelineError(Exception):
    """Base class for every error raised by the news pipeline."""


class ConfigurationError(NewsPipelineError):
    """A required API key or setting is missing. Fatal for the request."""


class ValidationError(NewsPipelineError):
    """The inbound payload is malformed or incomplete."""


class NewsFetchError(NewsPipelineError):
    """One query's upstream news call failed."""


class SummarizationError(NewsPipelineError):
    """One article's completion call failed or returned an unusable shape."""
