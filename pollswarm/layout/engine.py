"""
Layout Engine for pollswarm
Dodge (beeswarm) circle packing along one axis

Circles keep their position along the packing axis and are pushed off the
centerline just far enough to avoid overlapping circles placed before them:
- Circles are placed in ascending x order (stable on ties)
- A sliding window (active set) holds placed circles that can still collide
- Each circle takes the smallest-|y| tangent position that collides with
  nothing in the window, or y = 0 when the centerline is free
"""
from __future__ import annotations
from typing import Sequence, List, Optional, Union
from collections import deque
import math
import numpy as np
import logging

from ..config import DEFAULT_EPSILON, DodgeConfig
from ..types import EvictionMode
from .types import DodgeLayout

logger = logging.getLogger(__name__)

EVICTION_MODES = ('squared', 'linear')


def dodge(
    x: Union[Sequence[float], np.ndarray],
    separation: float,
    epsilon: float = DEFAULT_EPSILON,
    eviction: EvictionMode = 'squared'
) -> np.ndarray:
    """
    Compute perpendicular offsets so that no two circles overlap

    Positions must be finite; filter out missing values before calling.
    The eviction window is separation**2 in 'squared' mode, which matches
    the historical charts but lets circles overlap when separation < 1.

    Args:
        x: Positions along the packing axis, in any order
        separation: Minimum center-to-center distance (diameter + padding)
        epsilon: Tolerance so that tangent circles do not count as intersecting
        eviction: 'squared' or 'linear' eviction window

    Returns:
        Offsets aligned with x

    Raises:
        ValueError: On non-finite positions, non-positive separation,
            negative epsilon or unknown eviction mode
    """
    positions = np.asarray(x, dtype=float)
    if positions.ndim != 1:
        raise ValueError(f"Positions must be one-dimensional, got shape {positions.shape}")
    if not math.isfinite(separation) or separation <= 0:
        raise ValueError(f"Separation must be a positive finite number, got {separation}")
    if not epsilon >= 0:
        raise ValueError(f"Epsilon must be non-negative, got {epsilon}")
    if eviction not in EVICTION_MODES:
        raise ValueError(f"Invalid eviction mode: {eviction}. Use 'squared' or 'linear'")

    invalid = ~np.isfinite(positions)
    if invalid.any():
        raise ValueError(
            f"{int(invalid.sum())} non-finite positions (first at index "
            f"{int(np.argmax(invalid))}); filter them out before layout"
        )

    xs: List[float] = positions.tolist()
    ys: List[float] = [0.0] * len(xs)
    radius2 = separation ** 2
    window = radius2 if eviction == 'squared' else separation
    active: deque = deque()

    def intersects(xb: float, yb: float) -> bool:
        for ai in active:
            if radius2 - epsilon > (xs[ai] - xb) ** 2 + (ys[ai] - yb) ** 2:
                return True
        return False

    for bi in sorted(range(len(xs)), key=xs.__getitem__):
        xb = xs[bi]

        # Drop circles that are too far behind to reach b
        while active and xs[active[0]] < xb - window:
            active.popleft()

        if intersects(xb, 0.0):
            best = math.inf
            for ai in active:
                reach2 = radius2 - (xs[ai] - xb) ** 2
                if reach2 < 0:
                    continue
                reach = math.sqrt(reach2)
                for candidate in (ys[ai] + reach, ys[ai] - reach):
                    if abs(candidate) < abs(best) and not intersects(xb, candidate):
                        best = candidate
            ys[bi] = best

        active.append(bi)

    return np.array(ys, dtype=float)


class DodgeLayoutEngine:
    """
    Config-driven dodge layout

    Example:
        >>> engine = DodgeLayoutEngine(DodgeConfig(radius=3, padding=1.5))
        >>> layout = engine.calculate_layout([10.0, 11.0, 40.0])
        >>> layout.y
    """

    def __init__(self, config: Optional[DodgeConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Circle packing configuration, defaults if None
        """
        self.config = config or DodgeConfig()
        logger.debug(f"DodgeLayoutEngine initialized (separation={self.separation}, "
                     f"eviction={self.config.eviction})")

    @property
    def separation(self) -> float:
        """Minimum center-to-center distance (px)"""
        return self.config.separation

    def calculate_layout(self, positions: Union[Sequence[float], np.ndarray]) -> DodgeLayout:
        """
        Pack circles at the given positions

        Args:
            positions: Positions along the packing axis (px)

        Returns:
            DodgeLayout with offsets aligned to positions
        """
        x = np.array(positions, dtype=float)
        separation = self.separation
        eviction = self.config.eviction

        if eviction == 'squared' and separation < 1:
            logger.warning(f"Separation {separation:.3g} < 1 with squared eviction: "
                           f"window {separation ** 2:.3g} is narrower than the separation, "
                           f"circles may overlap")

        logger.info(f"Calculating dodge layout for {len(x)} circles "
                    f"(separation={separation:.2f}, eviction={eviction})")

        y = dodge(x, separation, epsilon=self.config.epsilon, eviction=eviction)

        layout = DodgeLayout(
            x=x,
            y=y,
            separation=separation,
            epsilon=self.config.epsilon,
            eviction=eviction,
        )
        layout.layout_stats.update({
            'n_points': layout.n_points,
            'n_displaced': layout.n_displaced,
            'max_offset': layout.max_offset,
        })

        logger.info(f"Dodge layout complete: {layout.n_displaced}/{layout.n_points} displaced, "
                    f"max offset {layout.max_offset:.2f} px")
        return layout
