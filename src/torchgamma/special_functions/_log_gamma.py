from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors


def log_gamma(x: Union[float, Tensor]) -> Tensor:
    r"""Natural logarithm of the absolute value of the gamma function.

    .. math::
        \log |\Gamma(x)|
    """
    (x,) = as_tensors(x)

    return torch.special.gammaln(x)


__all__ = ["log_gamma"]
