"""Gamma mean, variance and standard deviation."""

import math
from typing import Union

import torch
from torch import Tensor


def gamma_mean(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> Union[float, Tensor]:
    r"""Mean of the gamma distribution, :math:`k \theta`."""
    return shape * scale


def gamma_variance(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> Union[float, Tensor]:
    r"""Variance of the gamma distribution, :math:`k \theta^2`."""
    return shape * scale * scale


def gamma_standard_deviation(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> Union[float, Tensor]:
    r"""Standard deviation of the gamma distribution, :math:`\sqrt{k} \theta`.

    Returns a float for float arguments and a tensor otherwise. A negative
    variance (improper parameters) gives NaN.
    """
    variance = gamma_variance(shape, scale)

    if isinstance(variance, Tensor):
        return torch.sqrt(variance)

    return math.sqrt(variance) if variance >= 0 else math.nan
