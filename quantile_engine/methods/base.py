"""
Plotting-position conventions for empirical quantiles.

A plotting position assigns each order statistic of a sorted batch an
empirical fraction (f-value). All conventions supported here belong to the
continuous family described by Hyndman & Fan (1996):

    f_i = (i - alpha) / (n + 1 - alpha - beta),   i = 1..n

so a convention is fully described by its two constants.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class PlottingPositionProtocol(Protocol):
    """Protocol for objects that map ranks to empirical fractions.

    Implementations must provide:
    - A canonical name
    - The empirical fractions for a batch of a given size
    """

    @property
    def name(self) -> str:
        """Return the canonical method name (e.g., 'cleveland', 'linear')."""
        ...

    def fractions(self, n: int) -> np.ndarray:
        """Return the empirical fractions for ranks 1..n, ascending."""
        ...


@dataclass(frozen=True)
class PlottingPosition:
    """A plotting-position convention from the Hyndman & Fan family.

    Attributes:
        name: Canonical method name
        alpha: Rank offset in the numerator
        beta: Size offset, combined with alpha in the denominator
        aliases: Alternative selectors resolving to this method
        description: Human readable formula
    """

    name: str
    alpha: float
    beta: float
    aliases: tuple[str, ...] = field(default=())
    description: str = ""

    def __post_init__(self) -> None:
        if not (0.0 <= self.alpha <= 1.0 and 0.0 <= self.beta <= 1.0):
            raise ValueError("alpha and beta must lie in [0, 1]")

    def fractions(self, n: int) -> np.ndarray:
        """Compute the empirical fractions for a sorted batch of size n.

        Args:
            n: Batch size (>= 1)

        Returns:
            np.ndarray of shape (n,) with strictly increasing fractions.
            A single-element batch always gets the fraction 0.5.
        """
        if n < 1:
            raise ValueError("n must be >= 1")
        if n == 1:
            return np.array([0.5])
        ranks = np.arange(1, n + 1, dtype=float)
        return (ranks - self.alpha) / (n + 1 - self.alpha - self.beta)

    @property
    def selectors(self) -> tuple[str, ...]:
        """All names this method can be looked up by."""
        return (self.name, *self.aliases)


CLEVELAND = PlottingPosition(
    name="cleveland",
    alpha=0.5,
    beta=0.5,
    aliases=("hazen", "type5"),
    description="(i - 0.5) / n",
)

LINEAR = PlottingPosition(
    name="linear",
    alpha=1.0,
    beta=1.0,
    aliases=("type7", "excel"),
    description="(i - 1) / (n - 1)",
)

WEIBULL = PlottingPosition(
    name="weibull",
    alpha=0.0,
    beta=0.0,
    aliases=("type6",),
    description="i / (n + 1)",
)

MEDIAN_UNBIASED = PlottingPosition(
    name="median_unbiased",
    alpha=1.0 / 3.0,
    beta=1.0 / 3.0,
    aliases=("tukey", "type8"),
    description="(i - 1/3) / (n + 1/3)",
)

NORMAL_UNBIASED = PlottingPosition(
    name="normal_unbiased",
    alpha=3.0 / 8.0,
    beta=3.0 / 8.0,
    aliases=("blom", "type9"),
    description="(i - 3/8) / (n + 1/4)",
)

BUILTIN_METHODS = (CLEVELAND, LINEAR, WEIBULL, MEDIAN_UNBIASED, NORMAL_UNBIASED)
