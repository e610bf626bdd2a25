"""pollswarm: Beeswarm layout and charts for poll results"""

from .config import DodgeConfig, BeeswarmConfig, PlotConfig
from .layout import dodge, DodgeLayoutEngine, DodgeLayout, BeeswarmLayout
from .types import ChartKind
from . import utils
from .visualizer import BeeswarmPlotter

__version__ = "0.1.0"
__all__ = ["DodgeConfig", "BeeswarmConfig", "PlotConfig", "dodge", "DodgeLayoutEngine",
           "DodgeLayout", "BeeswarmLayout", "ChartKind", "utils", "BeeswarmPlotter"]
