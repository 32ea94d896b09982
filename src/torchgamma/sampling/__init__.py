from ._gamma_variate import gamma_variate

__all__ = [
    "gamma_variate",
]
