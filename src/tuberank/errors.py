class ValidationError(Exception):
    """User input rejected locally; no request was issued."""


class GenerationError(Exception):
    """A generation attempt failed after the request was issued."""


class ServiceError(GenerationError):
    """The external model call failed."""


class EmptyResponseError(ServiceError):
    """The model call succeeded but carried no text payload."""


class DecodeError(GenerationError):
    """The reply text could not be parsed into a GenerationResult."""
