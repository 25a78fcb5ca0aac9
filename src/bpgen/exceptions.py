"""Exceptions raised by the boilerplate generators."""

MISSING_NAME_MESSAGE = "Please provide a name for the component."


class BoilerplateError(Exception):
    """Base class for generator errors."""


class InvalidInputError(BoilerplateError, ValueError):
    """Raised when the component name is missing or empty."""

    def __init__(self, message: str = MISSING_NAME_MESSAGE) -> None:
        super().__init__(message)
