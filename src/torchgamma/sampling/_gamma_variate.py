"""Gamma variates from torch's native sampler."""

import math
from typing import Sequence, Union

import torch
from torch import Generator, Tensor


def gamma_variate(
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
    size: Sequence[int] | None = None,
    *,
    generator: Generator | None = None,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Tensor:
    r"""
    Draw gamma distributed variates.

    Standard gamma variates of shape :math:`k` are drawn by
    ``torch._standard_gamma`` (the sampler behind
    :class:`torch.distributions.Gamma`) and multiplied by the scale
    :math:`\theta`.

    Parameters
    ----------
    shape : float or Tensor
        Shape parameter :math:`k`. Must be non-negative; ``k == 0`` yields
        zeros.
    scale : float or Tensor
        Scale parameter :math:`\theta`. Must be positive.
    size : Sequence[int], optional
        Shape of the output. ``shape`` and ``scale`` are broadcast to it.
        Default: the broadcast shape of ``shape`` and ``scale``.
    generator : torch.Generator, optional
        A pseudorandom number generator for sampling. If None, uses the
        default generator.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Default:
        ``torch.float64``.
    device : torch.device, optional
        The desired device of the returned tensor. Default: CPU.

    Returns
    -------
    Tensor
        A tensor of shape ``size`` of independent variates.

    Notes
    -----
    The parameters are not validated here. Negative or NaN shapes give NaN.
    The native sampler clamps its output to the smallest normal number, so
    ``k == 0`` is set to exact zeros afterwards.
    """
    if dtype is None:
        dtype = torch.float64

    shape = torch.as_tensor(shape, dtype=dtype, device=device)
    scale = torch.as_tensor(scale, dtype=dtype, device=device)

    if size is None:
        size = torch.broadcast_shapes(shape.shape, scale.shape)
    size = torch.Size(size)

    shape = shape.expand(size)
    scale = scale.expand(size)

    positive = shape > 0

    standard = torch._standard_gamma(
        torch.where(positive, shape, 1.0).contiguous(), generator=generator
    )

    result = torch.where(
        positive,
        standard,
        torch.where(
            shape == 0,
            torch.zeros_like(standard),
            torch.full_like(standard, math.nan),
        ),
    )

    return result * scale


__all__ = ["gamma_variate"]
