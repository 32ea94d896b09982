"""torchgamma: the gamma distribution as PyTorch operators."""

from . import probability, sampling, special_functions
from ._exceptions import (
    GammaDistributionError,
    GammaWarning,
    InvalidParameterError,
    InvalidProbabilityError,
    SerializationError,
)
from .probability import (
    GammaDistribution,
    gamma_distribution,
    improper_gamma_distribution,
)

__all__ = [
    "GammaDistribution",
    "GammaDistributionError",
    "GammaWarning",
    "InvalidParameterError",
    "InvalidProbabilityError",
    "SerializationError",
    "gamma_distribution",
    "improper_gamma_distribution",
    "probability",
    "sampling",
    "special_functions",
]

__version__ = "0.1.0"
