from ._gamma_cumulative_distribution import gamma_cumulative_distribution
from ._gamma_distribution import (
    GammaDistribution,
    gamma_distribution,
    improper_gamma_distribution,
)
from ._gamma_entropy import gamma_entropy
from ._gamma_log_probability_density import gamma_log_probability_density
from ._gamma_moments import (
    gamma_mean,
    gamma_standard_deviation,
    gamma_variance,
)
from ._gamma_probability_density import gamma_probability_density
from ._gamma_quantile import gamma_quantile
from ._gamma_sample import gamma_sample
from ._gamma_survival import gamma_survival

__all__ = [
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
]
