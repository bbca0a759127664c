class DecisionDeskError(Exception):
    """Base class for errors surfaced to the caller."""


class ConfigurationError(DecisionDeskError):
    """A required setting (the model credential) is missing."""


class GenerationError(DecisionDeskError):
    """The text-generation service failed or was unreachable."""


class ValidationError(DecisionDeskError):
    """The submission was rejected before any network call."""
