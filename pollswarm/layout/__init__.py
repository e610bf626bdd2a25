"""
Layout Module for pollswarm
Dodge layout engine for beeswarm charts

Public API:
    - dodge: Pure offset computation
    - DodgeLayoutEngine: Config-driven layout calculation
    - DodgeLayout: Offsets with layout metadata
    - CirclePlacement: Single placed circle
    - BeeswarmLayout: Complete chart geometry
"""

from .engine import dodge, DodgeLayoutEngine, DEFAULT_EPSILON
from .types import (
    DodgeLayout,
    CirclePlacement,
    BeeswarmLayout,
)

__all__ = [
    'dodge',
    'DodgeLayoutEngine',
    'DEFAULT_EPSILON',
    'DodgeLayout',
    'CirclePlacement',
    'BeeswarmLayout',
]
