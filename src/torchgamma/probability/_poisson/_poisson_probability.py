"""Poisson probability at a real-valued count."""

import math
from typing import Union

import torch
from torch import Tensor

from torchgamma._tensor import as_tensors

_LN_SQRT_2_PI = 0.5 * math.log(2.0 * math.pi)

_SQRT_2_PI = math.sqrt(2.0 * math.pi)

# Asymptotic expansion of the Stirling error: 1/(12n) - 1/(360n^3) + ...
_S0 = 1.0 / 12.0
_S1 = 1.0 / 360.0
_S2 = 1.0 / 1260.0
_S3 = 1.0 / 1680.0
_S4 = 1.0 / 1188.0

_MAX_SERIES_TERMS = 1000


def _stirling_error(n: Tensor) -> Tensor:
    r"""Error of Stirling's approximation to :math:`n!`.

    .. math::
        \delta(n) = \log \Gamma(n + 1) - (n + \tfrac{1}{2}) \log n + n
                    - \log \sqrt{2 \pi}

    Small arguments are evaluated from the definition, larger ones from a
    truncated asymptotic series whose length shrinks as ``n`` grows.
    """
    exact = (
        torch.special.gammaln(n + 1.0)
        - (n + 0.5) * torch.log(n)
        + n
        - _LN_SQRT_2_PI
    )

    r = 1.0 / n
    rr = r * r

    series_500 = (_S0 - _S1 * rr) * r
    series_80 = (_S0 - (_S1 - _S2 * rr) * rr) * r
    series_35 = (_S0 - (_S1 - (_S2 - _S3 * rr) * rr) * rr) * r
    series_15 = (_S0 - (_S1 - (_S2 - (_S3 - _S4 * rr) * rr) * rr) * rr) * r

    return torch.where(
        n <= 15.0,
        exact,
        torch.where(
            n > 500.0,
            series_500,
            torch.where(
                n > 80.0,
                series_80,
                torch.where(n > 35.0, series_35, series_15),
            ),
        ),
    )


def _deviance(x: Tensor, mean: Tensor) -> Tensor:
    r"""Deviance term :math:`x \log(x / \mu) + \mu - x`.

    When ``x`` and ``mean`` are close the direct formula cancels
    catastrophically, so the series in :math:`v = (x - \mu) / (x + \mu)`
    is summed until it stops changing.
    """
    undefined = torch.isinf(x) | torch.isinf(mean) | (mean == 0)

    x = torch.where(undefined, 1.0, x)
    mean = torch.where(undefined, 1.0, mean)

    difference = x - mean
    direct = x * torch.log(x / mean) - difference

    near = difference.abs() < 0.1 * (x + mean)

    v = difference / (x + mean)
    vv = v * v
    series = difference * v
    term = 2.0 * x * v

    active = near.clone()
    j = 1
    while bool(active.any()) and j < _MAX_SERIES_TERMS:
        term = term * vv
        update = series + term / (2 * j + 1)
        active = active & (update != series)
        series = torch.where(active, update, series)
        j += 1

    result = torch.where(near, series, direct)

    return torch.where(undefined, torch.full_like(result, math.nan), result)


def poisson_probability(
    rate: Union[float, Tensor], k: Union[float, Tensor]
) -> Tensor:
    r"""Probability mass of the Poisson distribution at a real-valued count.

    .. math::
        P(X = k) = \frac{\lambda^k e^{-\lambda}}{\Gamma(k + 1)}

    Evaluated with Loader's saddle-point expansion

    .. math::
        P(X = k) = \frac{e^{-\delta(k) - D(k, \lambda)}}{\sqrt{2 \pi k}}

    where :math:`\delta` is the Stirling error and :math:`D` the deviance
    term. Neither :math:`\lambda^k` nor :math:`\Gamma(k + 1)` is formed, so
    the result neither overflows nor loses precision for large ``k`` or
    ``rate``.

    Parameters
    ----------
    rate : float or Tensor
        Rate parameter :math:`\lambda`. Must be non-negative.
    k : float or Tensor
        Count. Need not be integral.

    Returns
    -------
    Tensor
        Probability, broadcast over ``rate`` and ``k``.

    Notes
    -----
    - For ``rate == 0`` the mass is 1 at ``k == 0`` and 0 at ``k == 1``.
    - For infinite ``rate`` or ``k < 0``, returns 0.
    - For ``k`` negligible relative to ``rate``, returns :math:`e^{-\lambda}`.

    Examples
    --------
    >>> poisson_probability(5.0, torch.tensor([0.0, 5.0]))
    tensor([0.0067, 0.1755], dtype=torch.float64)

    References
    ----------
    C. Loader, "Fast and Accurate Computation of Binomial Probabilities,"
    2000.
    """
    rate, k = as_tensors(rate, k)
    rate, k = torch.broadcast_tensors(rate, k)

    tiny = torch.finfo(rate.dtype).tiny

    zero = torch.zeros_like(rate)
    one = torch.ones_like(rate)

    settled = (k < 0) | torch.isinf(rate) | ((rate == 0) & (k >= 0))
    negligible_count = ~settled & (k <= rate * tiny)
    negligible_rate = ~settled & ~negligible_count & (rate < k * tiny)
    saddle_point = ~(settled | negligible_count | negligible_rate)

    # Each branch sees placeholder arguments where another branch is
    # selected, so masked elements give zero gradients instead of NaN.
    saddle_k = torch.where(saddle_point, k, 1.0)
    saddle_rate = torch.where(saddle_point, rate, 1.0)

    result = torch.exp(
        -_stirling_error(saddle_k) - _deviance(saddle_k, saddle_rate)
    ) / (_SQRT_2_PI * torch.sqrt(saddle_k))

    small_k = torch.where(negligible_rate, k, 1.0)
    small_rate = torch.where(negligible_rate, rate, 1.0)

    result = torch.where(
        negligible_rate,
        torch.exp(
            -small_rate
            + small_k * torch.log(small_rate)
            - torch.special.gammaln(small_k + 1.0)
        ),
        result,
    )
    result = torch.where(negligible_count, torch.exp(-rate), result)
    result = torch.where(k < 0, zero, result)
    result = torch.where(torch.isinf(rate), zero, result)
    result = torch.where((rate == 0) & (k > 0), zero, result)
    result = torch.where((rate == 0) & (k == 0), one, result)

    return result
