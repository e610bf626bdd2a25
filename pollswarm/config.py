"""
pollswarm Configuration
Layout and chart parameters with the defaults used by the poll pages
"""
from dataclasses import dataclass, field
from typing import Optional

from .types import EvictionMode, OutputFormat

DEFAULT_EPSILON = 1e-3
"""Tolerance subtracted from separation**2 in the intersection test"""


@dataclass
class DodgeConfig:
    """
    Circle packing parameters for the dodge layout

    Separation between circle centers is 2 * radius + padding.
    """

    radius: float = 3.0
    """(Fixed) radius of the circles (px)"""

    padding: float = 1.5
    """(Fixed) padding between the circles (px)"""

    epsilon: float = DEFAULT_EPSILON
    """Tolerance subtracted from separation**2 so tangent circles are accepted"""

    eviction: EvictionMode = 'squared'
    """Active set eviction window: 'squared' (separation**2) or 'linear' (separation)"""

    @property
    def separation(self) -> float:
        """Minimum center-to-center distance between circles (px)"""
        return self.radius * 2 + self.padding


@dataclass
class BeeswarmConfig:
    """
    Beeswarm chart geometry

    Height is derived from the packed offsets when left as None.
    """

    # ============================================================
    # SIZE
    # ============================================================
    width: float = 640
    """Outer width (px)"""

    height: Optional[float] = None
    """Outer height (px), None to fit the swarm"""

    # ============================================================
    # MARGINS
    # ============================================================
    margin_top: float = 10
    """Top margin (px)"""

    margin_right: float = 20
    """Right margin (px)"""

    margin_bottom: float = 30
    """Bottom margin (px), holds the x axis"""

    margin_left: float = 20
    """Left margin (px)"""

    # ============================================================
    # AXIS AND MARKS
    # ============================================================
    x_label: Optional[str] = None
    """Label drawn at the right end of the x axis"""

    fill: str = 'black'
    """Circle fill color"""

    axis_fontsize: float = 10
    """Font size for tick labels and axis label"""

    tick_size: float = 6
    """Length of tick marks (px)"""


@dataclass
class PlotConfig:
    """
    Complete plot configuration
    """

    # ============================================================
    # SUB-CONFIGURATIONS
    # ============================================================
    dodge: DodgeConfig = field(default_factory=DodgeConfig)
    """Circle packing configuration"""

    beeswarm: BeeswarmConfig = field(default_factory=BeeswarmConfig)
    """Chart geometry configuration"""

    # ============================================================
    # OUTPUT
    # ============================================================
    dpi: int = 100
    """DPI for raster output (one chart pixel per point at 72)"""

    output_format: OutputFormat = 'svg'
    """Default output format"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Compact settings for polls with many responses

        - Smaller circles and padding
        - Narrower margins

        Example:
            >>> config = PlotConfig.compact()
            >>> plotter = BeeswarmPlotter(config)
        """
        config = cls()
        config.dodge.radius = 2.0
        config.dodge.padding = 1.0
        config.beeswarm.margin_top = 5
        config.beeswarm.margin_bottom = 24
        config.beeswarm.axis_fontsize = 8
        return config

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings optimized for presentations

        - Wider chart with larger circles
        - Larger fonts
        - PNG output at 150 DPI

        Example:
            >>> config = PlotConfig.presentation()
            >>> plotter = BeeswarmPlotter(config)
        """
        config = cls()
        config.dodge.radius = 5.0
        config.dodge.padding = 2.0
        config.beeswarm.width = 960
        config.beeswarm.margin_bottom = 40
        config.beeswarm.axis_fontsize = 14
        config.dpi = 150
        config.output_format = 'png'
        return config

    @classmethod
    def debug(cls) -> 'PlotConfig':
        """
        Settings for debugging layout issues

        - Linear eviction window (no overlaps for any separation)
        - Larger padding for clarity

        Example:
            >>> config = PlotConfig.debug()
            >>> plotter = BeeswarmPlotter(config)
        """
        config = cls()
        config.dodge.eviction = 'linear'
        config.dodge.padding = 4.0
        config.beeswarm.fill = 'steelblue'
        return config

    @classmethod
    def from_preset(cls, name: str) -> 'PlotConfig':
        """
        Build a configuration from a preset name

        Args:
            name: 'default', 'compact', 'presentation' or 'debug'
        """
        if name == 'default':
            return cls()
        presets = {
            'compact': cls.compact,
            'presentation': cls.presentation,
            'debug': cls.debug,
        }
        if name not in presets:
            raise ValueError(f"Unknown preset: {name}. Use one of: default, {', '.join(presets)}")
        return presets[name]()
