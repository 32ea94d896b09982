"""Testing utilities for torchgamma.

The strategies are built on hypothesis, which is installed with the
``test`` extra (``pip install torchgamma[test]``).
"""

from . import strategies

__all__ = ["strategies"]
