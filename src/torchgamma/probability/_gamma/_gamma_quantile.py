"""Gamma quantile function."""

import math
import warnings
from typing import Union

import torch
from torch import Tensor

from torchgamma._exceptions import GammaWarning, InvalidProbabilityError
from torchgamma._tensor import as_tensors
from torchgamma.special_functions import inverse_incomplete_gamma


def gamma_quantile(
    p: Union[float, Tensor],
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
) -> Tensor:
    r"""Quantile function (inverse CDF) of the gamma distribution.

    .. math::
        F^{-1}(p; k, \theta) = \theta \, P^{-1}(k, p)

    Parameters
    ----------
    p : float or Tensor
        Probabilities in [0, 1].
    shape : float or Tensor
        Shape parameter k (or alpha). Must be positive.
    scale : float or Tensor
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        Quantiles. ``p == 0`` maps to 0 and ``p == 1`` to +inf.

    Raises
    ------
    InvalidProbabilityError
        If any element of ``p`` is outside [0, 1] or NaN.

    Warns
    -----
    GammaWarning
        If ``p`` or ``shape`` requires grad. The inverse incomplete gamma
        function is evaluated by SciPy and is not differentiable; gradients
        still flow through ``scale``.

    Examples
    --------
    >>> p = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
    >>> gamma_quantile(p, 1.0, 2.0)
    tensor([0.0000, 1.3863,    inf], dtype=torch.float64)
    """
    p, shape, scale = as_tensors(p, shape, scale)

    invalid = ~((p >= 0) & (p <= 1))
    if bool(invalid.any()):
        offending = p[invalid].flatten()[0].item()
        raise InvalidProbabilityError(
            f"gamma_quantile: p must be in [0, 1] range. Got: {offending!r}"
        )

    if p.requires_grad or shape.requires_grad:
        warnings.warn(
            "gamma_quantile is not differentiable with respect to p or "
            "shape; only gradients with respect to scale are computed",
            GammaWarning,
            stacklevel=2,
        )

    p, shape, scale = torch.broadcast_tensors(p, shape, scale)

    result = scale * inverse_incomplete_gamma(shape, p)
    result = torch.where(p == 1, torch.full_like(result, math.inf), result)
    result = torch.where(p == 0, torch.zeros_like(result), result)

    return result
