"""Gamma probability density function."""

import math
from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors
from torchgamma.probability._poisson import poisson_probability


def gamma_probability_density(
    x: Union[float, Tensor],
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
) -> Tensor:
    r"""Probability density function of the gamma distribution.

    .. math::
        f(x; k, \theta) = \frac{x^{k-1} e^{-x/\theta}}{\theta^k \Gamma(k)}

    The density is not evaluated from this formula, which overflows or
    underflows for large :math:`k` or extreme :math:`x`. It is rewritten in
    terms of a Poisson probability at a real-valued count,

    .. math::
        f(x; k, \theta) = \frac{1}{\theta} P_{\text{Pois}}(k - 1; x/\theta)
        = \frac{k}{x} P_{\text{Pois}}(k; x/\theta),

    the second form being used for :math:`k \leq 1`. At :math:`k = 1` the
    two forms agree, but only the second depends on :math:`k` through the
    Poisson count, so it also carries the derivative with respect to
    ``shape``.

    Parameters
    ----------
    x : float or Tensor
        Values.
    shape : float or Tensor
        Shape parameter k. Must be non-negative.
    scale : float or Tensor
        Scale parameter theta. Must be positive.

    Returns
    -------
    Tensor
        PDF values, broadcast over all arguments.

    Notes
    -----
    Edge cases, first match wins:

    - ``shape < 0`` or ``scale <= 0``: NaN.
    - ``x < 0``: 0.
    - ``shape == 0`` (point mass at the origin): +inf at ``x == 0``, else 0.
    - ``x == 0``: +inf for ``shape < 1``, ``1 / scale`` for ``shape == 1``
      and 0 for ``shape > 1``.

    The value at ``x == 0`` is the limit from the right, so for
    ``shape <= 1`` it is not 0 even though the support starts there.

    The result is differentiable with respect to all three arguments where
    ``x``, ``shape`` and ``scale`` are positive. Elements settled by an edge
    case pass placeholder arguments to the Poisson probability, so they
    contribute zero, not NaN, to the gradient.

    Examples
    --------
    >>> x = torch.tensor([1.0, 2.0, 3.0])
    >>> gamma_probability_density(x, 2.0, 1.0)
    tensor([0.3679, 0.2707, 0.1494])
    """
    x, shape, scale = as_tensors(x, shape, scale)
    x, shape, scale = torch.broadcast_tensors(x, shape, scale)

    zero = torch.zeros_like(x)
    inf = torch.full_like(x, math.inf)

    # NaN arguments are not settled and propagate.
    settled = (x <= 0) | (shape <= 0) | (scale <= 0)

    safe_x = torch.where(settled, 1.0, x)
    safe_shape = torch.where(settled, 1.0, shape)
    safe_scale = torch.where(settled, 1.0, scale)

    rate = safe_x / safe_scale

    lower = safe_shape <= 1

    result = torch.where(
        lower,
        poisson_probability(rate, torch.where(lower, safe_shape, 0.5))
        * safe_shape
        / safe_x,
        poisson_probability(rate, torch.where(lower, 1.0, safe_shape - 1.0))
        / safe_scale,
    )

    at_origin = torch.where(
        shape < 1, inf, torch.where(shape > 1, zero, 1.0 / scale)
    )
    result = torch.where(x == 0, at_origin, result)
    result = torch.where(shape == 0, torch.where(x == 0, inf, zero), result)
    result = torch.where(x < 0, zero, result)
    result = torch.where(
        (shape < 0) | (scale <= 0), torch.full_like(x, math.nan), result
    )

    return result
