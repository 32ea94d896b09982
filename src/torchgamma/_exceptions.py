"""Gamma distribution exceptions and warnings."""

__all__ = [
    "GammaDistributionError",
    "GammaWarning",
    "InvalidParameterError",
    "InvalidProbabilityError",
    "SerializationError",
]


class GammaDistributionError(ValueError):
    """Base exception for gamma distribution errors."""

    pass


class InvalidParameterError(GammaDistributionError):
    """Raised when a shape or scale parameter is not positive."""

    pass


class InvalidProbabilityError(GammaDistributionError):
    """Raised when a probability lies outside [0, 1]."""

    pass


class SerializationError(GammaDistributionError):
    """Raised when an encoded distribution cannot be decoded."""

    pass


class GammaWarning(UserWarning):
    """Warning for gamma distribution issues (e.g., lost gradients)."""

    pass
