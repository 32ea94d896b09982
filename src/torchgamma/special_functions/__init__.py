from ._digamma import digamma
from ._incomplete_gamma import incomplete_gamma, incomplete_gamma_complement
from ._inverse_incomplete_gamma import inverse_incomplete_gamma
from ._log_gamma import log_gamma

__all__ = [
    "digamma",
    "incomplete_gamma",
    "incomplete_gamma_complement",
    "inverse_incomplete_gamma",
    "log_gamma",
]
