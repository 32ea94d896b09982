"""Gamma log probability density function."""

import math
from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors
from torchgamma.special_functions import log_gamma


def gamma_log_probability_density(
    x: Union[float, Tensor],
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
) -> Tensor:
    r"""Log probability density function of the gamma distribution.

    Computed directly for numerical stability (not as log(pdf)).

    .. math::
        \log f(x; k, \theta) = (k-1) \log x - \frac{x}{\theta} - \log\Gamma(k) - k \log\theta

    Parameters
    ----------
    x : float or Tensor
        Values. Non-positive values give ``-inf``.
    shape : float or Tensor
        Shape parameter k (or alpha). Must be positive.
    scale : float or Tensor
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        Log PDF values.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_log_probability_density(x, 2.0, 1.0)
    tensor([-1.0000, -1.3069, -1.9014])

    See Also
    --------
    gamma_probability_density : PDF
    """
    x, shape, scale = as_tensors(x, shape, scale)
    x, shape, scale = torch.broadcast_tensors(x, shape, scale)

    outside = x <= 0

    safe_x = torch.where(outside, 1.0, x)

    value = (
        torch.log(safe_x) * (shape - 1.0)
        - safe_x / scale
        - log_gamma(shape)
        - torch.log(scale) * shape
    )

    return torch.where(outside, torch.full_like(value, -math.inf), value)
