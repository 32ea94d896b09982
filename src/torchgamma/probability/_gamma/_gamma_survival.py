"""Gamma survival function."""

from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors
from torchgamma.special_functions import incomplete_gamma_complement


def gamma_survival(
    x: Union[float, Tensor],
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
) -> Tensor:
    r"""Survival function (1 - CDF) of the gamma distribution.

    .. math::
        S(x; k, \theta) = 1 - F(x) = Q(k, x/\theta)

    where Q is the regularized upper incomplete gamma function.

    More numerically stable than ``1 - gamma_cumulative_distribution(x)`` for large x.

    Parameters
    ----------
    x : float or Tensor
        Points at which to evaluate the survival function. Non-positive
        values give 1.
    shape : float or Tensor
        Shape parameter k. Must be positive.
    scale : float or Tensor
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        Survival function values.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_survival(x, 2.0, 1.0)
    tensor([0.7358, 0.4060, 0.1991])

    See Also
    --------
    gamma_cumulative_distribution : CDF = 1 - SF
    """
    x, shape, scale = as_tensors(x, shape, scale)
    x, shape, scale = torch.broadcast_tensors(x, shape, scale)

    outside = x <= 0

    result = incomplete_gamma_complement(
        shape, torch.where(outside, 1.0, x) / scale
    )

    return torch.where(outside, torch.ones_like(result), result)
