from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors


def digamma(x: Union[float, Tensor]) -> Tensor:
    r"""Logarithmic derivative of the gamma function.

    .. math::
        \psi(x) = \frac{d}{dx} \log \Gamma(x)
    """
    (x,) = as_tensors(x)

    return torch.special.digamma(x)


__all__ = ["digamma"]
