"""Plotting helpers for generator diagnostics."""

from __future__ import annotations

from pathlib import Path

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402


def plot_histogram(
    values: np.ndarray,
    out_path: Path,
    *,
    bins: int = 50,
    title: str | None = None,
) -> bool:
    """Plot a histogram of draws against the flat uniform expectation.

    Args:
        values: Draws in [0, 1).
        out_path: Output PNG path.
        bins: Number of equal-width bins over [0, 1).
        title: Optional plot title.

    Returns:
        True if a file was written, False if values was empty.

    Raises:
        ValueError: If bins < 1.
    """
    if bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins}")
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return False

    out_path.parent.mkdir(parents=True, exist_ok=True)

    plt.figure(figsize=(8, 4.5))
    plt.hist(values, bins=bins, range=(0.0, 1.0), alpha=0.8, label="draws")
    plt.axhline(values.size / bins, color="black", linestyle="--", label="uniform")
    plt.xlabel("value")
    plt.ylabel("count")
    if title:
        plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()
    return True
