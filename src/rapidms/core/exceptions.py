"""rapidms custom exceptions."""


class InvalidSpectrumData(ValueError):
    """Exception raised when spectrum data arrays are not consistent."""


class ParameterNotFound(ValueError):
    """Exception raised when a parameter is not defined by a parameter provider."""


class ProgressLoggerNotFound(ValueError):
    """Exception raised when trying to create a non-existing progress logger type."""
