"""Domain exceptions."""


class PlanarError(Exception):
    """Base class for all errors raised by the planar package."""


class InvalidArgumentError(PlanarError, ValueError):
    """A required argument was missing or unusable."""

    def __init__(self, name: str, reason: str = "must not be None"):
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")
