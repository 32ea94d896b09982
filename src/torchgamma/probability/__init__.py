"""Gamma distribution with CDF, PDF, PPF, SF, moments and sampling.

This module provides the :class:`GammaDistribution` value type together
with functional operators over tensors:

- density and log-density, numerically stable across the parameter range
- CDF and survival function via the regularized incomplete gamma functions
- PPF (quantile/inverse CDF)
- mean, variance, standard deviation and entropy
- random variates from a ``torch.Generator``

Example
-------
>>> import torch
>>> from torchgamma.probability import gamma_distribution
>>>
>>> d = gamma_distribution(2.0, 3.0)
>>> d.mean()
6.0
>>>
>>> # Compute quantiles
>>> probs = torch.tensor([0.025, 0.5, 0.975], dtype=torch.float64)
>>> quantiles = d.quantile(probs)
"""

from ._gamma import (
    GammaDistribution,
    gamma_cumulative_distribution,
    gamma_distribution,
    gamma_entropy,
    gamma_log_probability_density,
    gamma_mean,
    gamma_probability_density,
    gamma_quantile,
    gamma_sample,
    gamma_standard_deviation,
    gamma_survival,
    gamma_variance,
    improper_gamma_distribution,
)
from ._poisson import poisson_probability

__all__ = [
    # Gamma distribution
    "GammaDistribution",
    "gamma_cumulative_distribution",
    "gamma_distribution",
    "gamma_entropy",
    "gamma_log_probability_density",
    "gamma_mean",
    "gamma_probability_density",
    "gamma_quantile",
    "gamma_sample",
    "gamma_standard_deviation",
    "gamma_survival",
    "gamma_variance",
    "improper_gamma_distribution",
    # Poisson distribution
    "poisson_probability",
]
