"""Regularized incomplete gamma functions."""

from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors


def incomplete_gamma(shape: Union[float, Tensor], x: Union[float, Tensor]) -> Tensor:
    r"""Regularized lower incomplete gamma function.

    .. math::
        P(a, x) = \frac{1}{\Gamma(a)} \int_0^x t^{a-1} e^{-t} \, dt

    Parameters
    ----------
    shape : float or Tensor
        Shape parameter :math:`a`. Must be non-negative.
    x : float or Tensor
        Upper limit of integration. Must be non-negative.

    Returns
    -------
    Tensor
        :math:`P(a, x)`, broadcast over ``shape`` and ``x``.

    Examples
    --------
    >>> incomplete_gamma(1.0, torch.tensor([0.0, 1.0]))
    tensor([0.0000, 0.6321], dtype=torch.float64)
    """
    shape, x = as_tensors(shape, x)

    return torch.special.gammainc(shape, x)


def incomplete_gamma_complement(
    shape: Union[float, Tensor], x: Union[float, Tensor]
) -> Tensor:
    r"""Regularized upper incomplete gamma function.

    .. math::
        Q(a, x) = 1 - P(a, x)

    Evaluated directly, so it keeps full relative precision where
    :math:`P(a, x)` is close to one.
    """
    shape, x = as_tensors(shape, x)

    return torch.special.gammaincc(shape, x)


__all__ = ["incomplete_gamma", "incomplete_gamma_complement"]
