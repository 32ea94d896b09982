"""Gamma random variate generation."""

from typing import Sequence, Union

import torch
from torch import Generator, Tensor

from torchgamma._exceptions import InvalidParameterError
from torchgamma.sampling import gamma_variate


def gamma_sample(
    shape: Union[float, Tensor],
    scale: Union[float, Tensor],
    size: Sequence[int] | None = None,
    *,
    generator: Generator | None = None,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Tensor:
    r"""Draw samples from the gamma distribution.

    Parameters
    ----------
    shape : float or Tensor
        Shape parameter k. Must be non-negative; ``shape == 0`` is the point
        mass at the origin and yields zeros.
    scale : float or Tensor
        Scale parameter theta. Must be positive.
    size : Sequence[int], optional
        Shape of the output. Default: the broadcast shape of ``shape`` and
        ``scale``.
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
        Samples of shape ``size``.

    Raises
    ------
    InvalidParameterError
        If ``shape`` is negative or NaN, or ``scale`` is not positive.

    Examples
    --------
    >>> generator = torch.Generator().manual_seed(0)
    >>> gamma_sample(2.0, 3.0, [4], generator=generator).shape
    torch.Size([4])
    """
    shape_t = torch.as_tensor(shape)
    scale_t = torch.as_tensor(scale)

    if not bool((shape_t >= 0).all()):
        raise InvalidParameterError(
            f"gamma_sample: shape must be non-negative. Got {shape_t.min().item()!r}"
        )

    if not bool((scale_t > 0).all()):
        raise InvalidParameterError(
            f"gamma_sample: scale must be positive. Got {scale_t.min().item()!r}"
        )

    return gamma_variate(
        shape,
        scale,
        size,
        generator=generator,
        dtype=dtype,
        device=device,
    )
