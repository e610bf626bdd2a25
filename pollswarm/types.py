"""
Type definitions for pollswarm

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from enum import Enum
from typing import TypedDict, Literal, List, Optional, Union, Tuple, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    import pandas as pd

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

EvictionMode = Literal['squared', 'linear']
"""
How far behind the current point placed circles stay in the active set

'squared' compares x distances against separation**2 (historical behaviour),
'linear' compares them against the separation itself.
"""

OutputFormat = Literal['svg', 'png']
"""File format for rendered charts"""

DomainTuple = Tuple[float, float]
"""Value domain as (min, max) tuple"""

RangeTuple = Tuple[float, float]
"""Pixel range as (left, right) tuple"""

PollReadResult = Tuple['pd.DataFrame', int, Optional[DomainTuple], Optional[str]]
"""Result from reading a poll result document: (records_df, vote_count, domain, graph_type)"""


# Structured data types

class PollRecord(TypedDict):
    """One response row of a poll result"""
    label: str
    value: Union[int, float, str, None]


class PollResultDocument(TypedDict, total=False):
    """
    Poll result document as served by the results endpoint

    Only 'data' is required; 'domain' is present for scale-based charts.
    """
    vote_count: int
    domain: List[float]
    data: List[PollRecord]
    graph_type: str


class ChartKind(Enum):
    """
    Chart kinds a poll question can be displayed as

    Values are the labels used by the poll pages. Only BEESWARM is
    rendered by this package.
    """
    PIE = 'Pie chart'
    BAR = 'Bar graph'
    HORIZONTAL_BAR = 'Horizontal bar graph'
    TABLE = 'Table'
    BEESWARM = 'Yes no beeswarm graph'
    YES_NO_BAR = 'Yes no bar graph'

    @classmethod
    def from_label(cls, label: str) -> 'ChartKind':
        """
        Look up a chart kind by its page label

        Raises:
            ValueError: If the label names no known chart kind
        """
        for kind in cls:
            if kind.value == label:
                return kind
        known = ', '.join(repr(k.value) for k in cls)
        raise ValueError(f"Unknown chart kind: {label!r}. Known kinds: {known}")

    @property
    def is_supported(self) -> bool:
        """Whether this package can render the chart kind"""
        return self is ChartKind.BEESWARM
