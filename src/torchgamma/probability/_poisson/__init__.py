from ._poisson_probability import poisson_probability

__all__ = [
    "poisson_probability",
]
