from typing import Tuple, Union

import torch
from torch import Tensor


def as_tensors(*values: Union[float, Tensor]) -> Tuple[Tensor, ...]:
    """Convert scalars and tensors to tensors of a common floating dtype.

    Python scalars become ``torch.float64``. Tensors keep their floating
    dtype (integer tensors are promoted to ``torch.float64``) and the result
    dtype follows ``torch.result_type`` across all tensor inputs.
    """
    tensors = [v for v in values if isinstance(v, Tensor)]

    if tensors:
        dtype = tensors[0].dtype
        for t in tensors[1:]:
            dtype = torch.promote_types(dtype, t.dtype)
        if not dtype.is_floating_point:
            dtype = torch.float64
        device = tensors[0].device
    else:
        dtype = torch.float64
        device = None

    return tuple(
        v.to(dtype)
        if isinstance(v, Tensor)
        else torch.as_tensor(v, dtype=dtype, device=device)
        for v in values
    )
