"""Gamma cumulative distribution function."""

from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors
from torchgamma.special_functions import incomplete_gamma


def gamma_cumulative_distribution(
    x: Union[float, Tensor],
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
) -> Tensor:
    r"""Cumulative distribution function of the gamma distribution.

    .. math::
        F(x; k, \theta) = P(k, x/\theta)

    where :math:`P(a, x)` is the regularized lower incomplete gamma function.

    Parameters
    ----------
    x : float or Tensor
        Quantiles. Non-positive values give 0.
    shape : float or Tensor
        Shape parameter k (or alpha). Must be positive.
    scale : float or Tensor
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        CDF values.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_cumulative_distribution(x, 2.0, 1.0)
    tensor([0.2642, 0.5940, 0.8009])
    """
    x, shape, scale = as_tensors(x, shape, scale)
    x, shape, scale = torch.broadcast_tensors(x, shape, scale)

    # P(k, x) is NaN for x < 0, so those get a placeholder and are masked.
    outside = x <= 0

    result = incomplete_gamma(shape, torch.where(outside, 1.0, x) / scale)

    return torch.where(outside, torch.zeros_like(result), result)
