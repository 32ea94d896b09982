"""Hypothesis strategies for gamma distribution testing."""

from ._gamma_distributions import gamma_distributions
from ._positive_real_numbers import positive_real_numbers
from ._probabilities import probabilities

__all__ = [
    "gamma_distributions",
    "positive_real_numbers",
    "probabilities",
]
