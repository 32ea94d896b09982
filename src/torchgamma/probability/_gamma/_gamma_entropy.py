"""Gamma differential entropy."""

import math
from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors
from torchgamma.special_functions import digamma, log_gamma


def gamma_entropy(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> Tensor:
    r"""Differential entropy of the gamma distribution in nats.

    .. math::
        H(k, \theta) = k + \log\theta + \log\Gamma(k) + (1 - k)\psi(k)

    where :math:`\psi` is the digamma function.

    Parameters
    ----------
    shape : float or Tensor
        Shape parameter k.
    scale : float or Tensor
        Scale parameter theta.

    Returns
    -------
    Tensor
        Entropy values. The entropy is undefined unless both parameters are
        positive; such elements are NaN.

    Examples
    --------
    >>> gamma_entropy(1.0, 1.0)
    tensor(1., dtype=torch.float64)
    """
    shape, scale = as_tensors(shape, scale)
    shape, scale = torch.broadcast_tensors(shape, scale)

    defined = (shape > 0) & (scale > 0)

    shape = torch.where(defined, shape, 1.0)
    scale = torch.where(defined, scale, 1.0)

    value = (
        shape
        + torch.log(scale)
        + log_gamma(shape)
        + (1.0 - shape) * digamma(shape)
    )

    return torch.where(defined, value, torch.full_like(value, math.nan))
