"""Gamma distribution value type."""

import json
import struct
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from torch import Generator, Tensor

from torchgamma._exceptions import InvalidParameterError, SerializationError

from ._gamma_cumulative_distribution import gamma_cumulative_distribution
from ._gamma_entropy import gamma_entropy
from ._gamma_log_probability_density import gamma_log_probability_density
from ._gamma_moments import (
    gamma_mean,
    gamma_standard_deviation,
    gamma_variance,
)
from ._gamma_probability_density import gamma_probability_density
from ._gamma_quantile import gamma_quantile
from ._gamma_sample import gamma_sample
from ._gamma_survival import gamma_survival

# Two big-endian IEEE 754 binary64 values: shape, then scale.
_BINARY_FORMAT = struct.Struct(">dd")


@dataclass(frozen=True, order=True)
class GammaDistribution:
    r"""The gamma distribution with shape :math:`k` and scale :math:`\theta`.

    A continuous distribution on :math:`[0, \infty)`. For integral
    :math:`k` it is the distribution of a sum of :math:`k` independent
    exponential variables, each with mean :math:`\theta`.

    Instances are immutable and compare structurally on ``(shape, scale)``.
    Use :func:`gamma_distribution` to construct a validated instance and
    :func:`improper_gamma_distribution` to skip validation. ``shape == 0``
    is the degenerate point mass at the origin.

    Attributes
    ----------
    shape : float
        Shape parameter k.
    scale : float
        Scale parameter theta.

    Examples
    --------
    >>> d = gamma_distribution(2.0, 3.0)
    >>> d.mean(), d.variance()
    (6.0, 18.0)
    >>> d.cumulative(torch.tensor([0.0, 6.0], dtype=torch.float64))
    tensor([0.0000, 0.5940], dtype=torch.float64)
    """

    shape: float
    scale: float

    def density(self, x: Union[float, Tensor]) -> Tensor:
        """Probability density at ``x``."""
        return gamma_probability_density(x, self.shape, self.scale)

    def log_density(self, x: Union[float, Tensor]) -> Tensor:
        """Natural logarithm of the density at ``x``."""
        return gamma_log_probability_density(x, self.shape, self.scale)

    def cumulative(self, x: Union[float, Tensor]) -> Tensor:
        """Probability that a variate is at most ``x``."""
        return gamma_cumulative_distribution(x, self.shape, self.scale)

    def survival(self, x: Union[float, Tensor]) -> Tensor:
        """Probability that a variate exceeds ``x``."""
        return gamma_survival(x, self.shape, self.scale)

    def quantile(self, p: Union[float, Tensor]) -> Tensor:
        """Inverse of :meth:`cumulative`.

        Raises
        ------
        InvalidProbabilityError
            If ``p`` is outside [0, 1].
        """
        return gamma_quantile(p, self.shape, self.scale)

    def mean(self) -> float:
        return gamma_mean(self.shape, self.scale)

    def variance(self) -> float:
        return gamma_variance(self.shape, self.scale)

    def std_dev(self) -> float:
        return gamma_standard_deviation(self.shape, self.scale)

    def maybe_mean(self) -> Optional[float]:
        """Mean; always defined for the gamma distribution."""
        return self.mean()

    def maybe_variance(self) -> Optional[float]:
        """Variance; always defined for the gamma distribution."""
        return self.variance()

    def maybe_std_dev(self) -> Optional[float]:
        """Standard deviation; always defined for the gamma distribution."""
        return self.std_dev()

    def entropy(self) -> Optional[float]:
        """Differential entropy in nats.

        Returns ``None`` unless both parameters are positive.
        """
        if not (self.shape > 0 and self.scale > 0):
            return None

        return gamma_entropy(self.shape, self.scale).item()

    def sample(
        self,
        size: Sequence[int] = (),
        *,
        generator: Generator | None = None,
    ) -> Tensor:
        """Draw variates using ``generator`` (or the global generator)."""
        return gamma_sample(
            self.shape, self.scale, size, generator=generator
        )

    def to_bytes(self) -> bytes:
        """Encode as 16 bytes: shape then scale, big-endian binary64."""
        return _BINARY_FORMAT.pack(self.shape, self.scale)

    @classmethod
    def from_bytes(cls, data: bytes) -> "GammaDistribution":
        """Decode the output of :meth:`to_bytes`. Parameters are not validated."""
        try:
            shape, scale = _BINARY_FORMAT.unpack(data)
        except struct.error as error:
            raise SerializationError(
                f"GammaDistribution.from_bytes: expected "
                f"{_BINARY_FORMAT.size} bytes. Got {len(data)}"
            ) from error

        return cls(shape, scale)

    def to_dict(self) -> dict[str, float]:
        return {"shape": self.shape, "scale": self.scale}

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> "GammaDistribution":
        """Decode the output of :meth:`to_dict`. Parameters are not validated."""
        try:
            shape = obj["shape"]
            scale = obj["scale"]
        except (KeyError, TypeError) as error:
            raise SerializationError(
                f"GammaDistribution.from_dict: expected an object with "
                f"'shape' and 'scale'. Got {obj!r}"
            ) from error

        for name, value in (("shape", shape), ("scale", scale)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise SerializationError(
                    f"GammaDistribution.from_dict: {name} must be a number. "
                    f"Got {value!r}"
                )

        return cls(float(shape), float(scale))

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "GammaDistribution":
        try:
            obj = json.loads(text)
        except json.JSONDecodeError as error:
            raise SerializationError(
                f"GammaDistribution.from_json: invalid JSON: {error}"
            ) from error

        return cls.from_dict(obj)


def gamma_distribution(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> GammaDistribution:
    r"""Create a gamma distribution.

    Parameters
    ----------
    shape : float
        Shape parameter k. Must be positive.
    scale : float
        Scale parameter theta. Must be positive.

    Returns
    -------
    GammaDistribution

    Raises
    ------
    InvalidParameterError
        If ``shape`` or ``scale`` is not positive (NaN included). The shape
        is checked first.

    Examples
    --------
    >>> gamma_distribution(2.0, 3.0)
    GammaDistribution(shape=2.0, scale=3.0)
    """
    shape = float(shape)
    scale = float(scale)

    if not shape > 0:
        raise InvalidParameterError(
            f"gamma_distribution: shape must be positive. Got {shape!r}"
        )

    if not scale > 0:
        raise InvalidParameterError(
            f"gamma_distribution: scale must be positive. Got {scale!r}"
        )

    return improper_gamma_distribution(shape, scale)


def improper_gamma_distribution(
    shape: Union[float, Tensor], scale: Union[float, Tensor]
) -> GammaDistribution:
    """Create a gamma distribution without checking the parameters.

    Useful when the parameters are already known to be valid, or to explore
    the degenerate (``shape == 0``) and out-of-domain behaviour of the
    operators.
    """
    return GammaDistribution(float(shape), float(scale))
