"""
Layout types for pollswarm
Data structures for layout engine results
"""
from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Optional, Any
import numpy as np
import pandas as pd

from ..types import EvictionMode, DomainTuple, RangeTuple


@dataclass(frozen=True)
class CirclePlacement:
    """
    Placement of a single circle

    Attributes:
        index: Position of the circle in the input sequence
        x: Position along the packing axis (input)
        y: Perpendicular offset from the centerline (computed)
    """
    index: int
    x: float
    y: float

    @property
    def on_centerline(self) -> bool:
        """Whether the circle kept its ideal position"""
        return self.y == 0


@dataclass
class DodgeLayout:
    """
    Result of one dodge layout run

    x and y are aligned with the input order, not the processing order.

    Attributes:
        x: Input positions along the packing axis
        y: Computed perpendicular offsets
        separation: Minimum center-to-center distance used
        epsilon: Tolerance used in the intersection test
        eviction: Active set eviction mode used
        layout_stats: Statistics about the layout
    """
    x: np.ndarray
    y: np.ndarray
    separation: float
    epsilon: float
    eviction: EvictionMode
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_points(self) -> int:
        """Number of placed circles"""
        return len(self.x)

    @property
    def max_offset(self) -> float:
        """Largest absolute offset from the centerline (0 when empty)"""
        if self.n_points == 0:
            return 0.0
        return float(np.max(np.abs(self.y)))

    @property
    def n_displaced(self) -> int:
        """Number of circles moved off the centerline"""
        return int(np.count_nonzero(self.y))

    @property
    def placements(self) -> List[CirclePlacement]:
        """Placements in input order"""
        return [
            CirclePlacement(index=i, x=float(xi), y=float(yi))
            for i, (xi, yi) in enumerate(zip(self.x, self.y))
        ]

    def to_frame(self) -> pd.DataFrame:
        """Layout as a DataFrame with index, x and y columns"""
        return pd.DataFrame({
            'index': np.arange(self.n_points),
            'x': self.x,
            'y': self.y,
        })

    def overlapping_pairs(self) -> List[Tuple[int, int]]:
        """
        Find pairs of circles closer than the separation allows

        Uses the same tolerance as the layout itself, so a correct layout
        returns an empty list.
        """
        if self.n_points < 2:
            return []
        dx = self.x[:, None] - self.x[None, :]
        dy = self.y[:, None] - self.y[None, :]
        too_close = dx ** 2 + dy ** 2 < self.separation ** 2 - self.epsilon
        i_idx, j_idx = np.nonzero(np.triu(too_close, k=1))
        return [(int(i), int(j)) for i, j in zip(i_idx, j_idx)]


@dataclass
class BeeswarmLayout:
    """
    Complete beeswarm chart geometry

    This is the output of BeeswarmPlotter.compute and the input to rendering.

    Attributes:
        circles: DataFrame with one row per drawn circle
            (index, value, title, cx, cy, r)
        width: Outer width (px)
        height: Outer height (px)
        x_range: Pixel range of the x axis (left, right)
        domain: Value domain mapped onto x_range
        tick_values: Values at which x axis ticks are drawn
        n_dropped: Records dropped because their value was not numeric
        axis_y: Vertical pixel position of the x axis
        dodge: Underlying dodge layout of the kept records
        x_label: Label drawn at the right end of the x axis
    """
    circles: pd.DataFrame
    width: float
    height: float
    x_range: RangeTuple
    domain: DomainTuple
    tick_values: List[float]
    n_dropped: int
    axis_y: float
    dodge: DodgeLayout
    x_label: Optional[str] = None

    @property
    def n_circles(self) -> int:
        """Number of circles drawn"""
        return len(self.circles)
