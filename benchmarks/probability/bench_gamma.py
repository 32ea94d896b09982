"""Benchmarks for gamma distribution operators.

This module times torchgamma's density, CDF, quantile and sampling against
their scipy.stats.gamma counterparts.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.stats
import torch

from torchgamma.probability import (
    gamma_cumulative_distribution,
    gamma_probability_density,
    gamma_quantile,
    gamma_sample,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Timing statistics in seconds: 'mean', 'std', 'min' and 'max'.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(name: str, times: dict[str, dict[str, float]]) -> None:
    """Print benchmark comparison results for multiple implementations."""
    print(f"\n{name}")
    print("-" * len(name))

    fastest_time = min(t["mean"] for t in times.values())

    for method_name, ts_time in times.items():
        slowdown = ts_time["mean"] / fastest_time
        if slowdown > 1.01:
            suffix = f" ({slowdown:.2f}x slower)"
        else:
            suffix = " (fastest)"
        print(
            f"  {method_name}: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}{suffix}"
        )


class BenchGamma:
    """Benchmarks for gamma distribution operators."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_density(
        self, n: int = 100_000, shape: float = 2.5, scale: float = 1.5
    ) -> None:
        x = torch.linspace(0.01, 50.0, n, dtype=torch.float64)
        x_np = x.numpy()

        print_comparison(
            f"Density (n={n}, shape={shape})",
            {
                "torchgamma": self._bench(
                    gamma_probability_density, x, shape, scale
                ),
                "scipy": self._bench(
                    scipy.stats.gamma.pdf, x_np, a=shape, scale=scale
                ),
            },
        )

    def bench_cumulative(
        self, n: int = 100_000, shape: float = 2.5, scale: float = 1.5
    ) -> None:
        x = torch.linspace(0.01, 50.0, n, dtype=torch.float64)
        x_np = x.numpy()

        print_comparison(
            f"CDF (n={n}, shape={shape})",
            {
                "torchgamma": self._bench(
                    gamma_cumulative_distribution, x, shape, scale
                ),
                "scipy": self._bench(
                    scipy.stats.gamma.cdf, x_np, a=shape, scale=scale
                ),
            },
        )

    def bench_quantile(
        self, n: int = 100_000, shape: float = 2.5, scale: float = 1.5
    ) -> None:
        p = torch.linspace(0.001, 0.999, n, dtype=torch.float64)
        p_np = p.numpy()

        print_comparison(
            f"Quantile (n={n}, shape={shape})",
            {
                "torchgamma": self._bench(gamma_quantile, p, shape, scale),
                "scipy": self._bench(
                    scipy.stats.gamma.ppf, p_np, a=shape, scale=scale
                ),
            },
        )

    def bench_sample(
        self, n: int = 100_000, shape: float = 2.5, scale: float = 1.5
    ) -> None:
        generator = torch.Generator().manual_seed(0)
        rng = np.random.default_rng(0)

        print_comparison(
            f"Sampling (n={n}, shape={shape})",
            {
                "torchgamma": self._bench(
                    gamma_sample, shape, scale, [n], generator=generator
                ),
                "numpy": self._bench(rng.gamma, shape, scale, n),
            },
        )

    def run_all(self) -> None:
        """Run all gamma benchmarks."""
        print("=" * 60)
        print("GAMMA DISTRIBUTION BENCHMARKS")
        print("=" * 60)

        self.bench_density()
        self.bench_cumulative()
        self.bench_quantile()
        self.bench_sample()

    def run_scaling(self) -> None:
        """Run density benchmarks across shape regimes."""
        print("=" * 60)
        print("SHAPE SCALING")
        print("=" * 60)

        for shape in [0.5, 1.0, 10.0, 1000.0]:
            self.bench_density(shape=shape)


if __name__ == "__main__":
    bench = BenchGamma(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
