"""
Utility functions

Scale and extent helpers used by the chart geometry.
"""

from __future__ import annotations
from typing import List, Sequence, Union
import numpy as np
import pandas as pd

from .types import DomainTuple, RangeTuple


def defined_mask(values: Union[pd.Series, Sequence]) -> np.ndarray:
    """
    Mark values that can be placed on a numeric axis

    Non-numeric, missing and infinite values are undefined.

    Args:
        values: Raw values (numbers, numeric strings or anything else)

    Returns:
        Boolean array, True where the value is a finite number
    """
    numeric = pd.to_numeric(pd.Series(values, dtype=object), errors='coerce').astype(float)
    return np.isfinite(numeric.to_numpy())


def extent(values: Union[np.ndarray, Sequence[float]]) -> DomainTuple:
    """
    Minimum and maximum of finite values

    Raises:
        ValueError: If there are no finite values
    """
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    if arr.size == 0:
        raise ValueError("Cannot compute extent of an empty sequence")
    return float(arr.min()), float(arr.max())


def linear_scale(
    values: Union[np.ndarray, Sequence[float]],
    domain: DomainTuple,
    range_: RangeTuple
) -> np.ndarray:
    """
    Map values linearly from domain onto range

    Values outside the domain are extrapolated. A degenerate domain maps
    every value to the middle of the range.
    """
    arr = np.asarray(values, dtype=float)
    d0, d1 = domain
    r0, r1 = range_
    if d1 == d0:
        return np.full(arr.shape, (r0 + r1) / 2)
    return r0 + (arr - d0) * (r1 - r0) / (d1 - d0)


def tick_values(domain: DomainTuple, step: float = 1) -> List[float]:
    """
    Tick positions from the start of the domain to its end, inclusive

    Args:
        domain: (start, end) of the axis
        step: Distance between ticks
    """
    start, stop = domain
    if step <= 0:
        raise ValueError(f"Tick step must be positive, got {step}")
    if stop < start:
        return []
    return [float(v) for v in np.arange(start, stop + step, step) if v <= stop]
