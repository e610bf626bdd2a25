"""
Beeswarm visualizer

Creates beeswarm charts of poll responses: every response is a circle on a
horizontal value axis, dodged vertically so that circles do not overlap.
Drawing is delegated to matplotlib; this module only computes geometry.
"""

from __future__ import annotations
from typing import Optional
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure
from pathlib import Path
import logging

from .config import PlotConfig
from .layout import DodgeLayoutEngine, BeeswarmLayout
from .types import ChartKind, DomainTuple, PathLike
from .utils import defined_mask, extent, linear_scale, tick_values

logger = logging.getLogger(__name__)

POINTS_PER_INCH = 72


class BeeswarmPlotter:
    """
    Creates beeswarm charts from poll records

    Example:
        >>> plotter = BeeswarmPlotter()
        >>> plotter = BeeswarmPlotter(PlotConfig.compact())
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize BeeswarmPlotter

        Args:
            config: Plot configuration. If None, uses default settings.
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_engine = DodgeLayoutEngine(self.config.dodge)

    def compute(
        self,
        records: pd.DataFrame,
        domain: Optional[DomainTuple] = None,
        value_column: str = 'value',
        title_column: str = 'label',
        x_label: Optional[str] = None
    ) -> BeeswarmLayout:
        """
        Compute chart geometry

        Records whose value is not a finite number are dropped before
        layout. Circle offsets stay aligned with the kept records.

        Args:
            records: DataFrame with one row per response
            domain: (min, max) of the value axis, extent of the values if None
            value_column: Column holding the value to place on the axis
            title_column: Column holding the circle title (optional)
            x_label: Axis label, falls back to the configured label

        Returns:
            BeeswarmLayout with circle centers and axis geometry
        """
        if value_column not in records.columns:
            raise ValueError(f"Column '{value_column}' not found in records")

        chart = self.config.beeswarm
        dodge_config = self.config.dodge

        mask = defined_mask(records[value_column])
        n_dropped = int((~mask).sum())
        if n_dropped:
            logger.warning(f"Dropped {n_dropped} records with non-numeric '{value_column}'")

        kept = records.loc[mask]
        values = pd.to_numeric(kept[value_column], errors='coerce').to_numpy(dtype=float)

        if domain is None:
            if len(values):
                domain = extent(values)
            else:
                domain = (0.0, 1.0)
                logger.warning("No numeric values, using default domain (0, 1)")

        x_range = (float(chart.margin_left), float(chart.width - chart.margin_right))
        cx = linear_scale(values, domain, x_range)

        dodge_layout = self.layout_engine.calculate_layout(cx)

        height = chart.height
        if height is None:
            height = ((dodge_layout.max_offset + dodge_config.radius + dodge_config.padding) * 2
                      + chart.margin_top + chart.margin_bottom)
        centerline = (chart.margin_top + height - chart.margin_bottom) / 2

        titles = kept[title_column].to_numpy() if title_column in kept.columns else np.full(len(kept), None)
        circles = pd.DataFrame({
            'index': kept.index.to_numpy(),
            'value': values,
            'title': titles,
            'cx': cx,
            'cy': centerline + dodge_layout.y,
            'r': np.full(len(values), float(dodge_config.radius)),
        })

        logger.info(f"Beeswarm geometry: {len(circles)} circles, {chart.width:g}x{height:.1f} px, "
                    f"domain {domain[0]:g}..{domain[1]:g}")

        return BeeswarmLayout(
            circles=circles,
            width=float(chart.width),
            height=float(height),
            x_range=x_range,
            domain=(float(domain[0]), float(domain[1])),
            tick_values=tick_values(domain),
            n_dropped=n_dropped,
            axis_y=float(height - chart.margin_bottom),
            dodge=dodge_layout,
            x_label=x_label if x_label is not None else chart.x_label,
        )

    def render(self, layout: BeeswarmLayout) -> Figure:
        """
        Draw a computed layout with matplotlib

        The axes span the whole figure with pixel coordinates, y pointing
        down as in the page the chart is embedded in.

        Args:
            layout: Geometry from compute()

        Returns:
            matplotlib Figure object
        """
        chart = self.config.beeswarm

        fig = plt.figure(figsize=(layout.width / POINTS_PER_INCH, layout.height / POINTS_PER_INCH))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, layout.width)
        ax.set_ylim(layout.height, 0)
        ax.set_axis_off()

        # Axis line without outer ticks
        axis_y = layout.axis_y
        ax.plot(layout.x_range, [axis_y, axis_y], color='black', linewidth=1)

        tick_px = linear_scale(layout.tick_values, layout.domain, layout.x_range)
        for value, px in zip(layout.tick_values, tick_px):
            ax.plot([px, px], [axis_y, axis_y + chart.tick_size], color='black', linewidth=1)
            ax.text(px, axis_y + chart.tick_size + 3, f"{value:g}",
                    fontsize=chart.axis_fontsize, ha='center', va='top', family='sans-serif')

        if layout.x_label:
            ax.text(layout.width, layout.height - 4, layout.x_label,
                    fontsize=chart.axis_fontsize, ha='right', va='baseline', family='sans-serif')

        for row in layout.circles.itertuples(index=False):
            circle = patches.Circle((row.cx, row.cy), row.r, facecolor=chart.fill, edgecolor='none')
            if row.title is not None:
                circle.set_gid(str(row.title))
            ax.add_patch(circle)

        return fig

    def plot(
        self,
        records: pd.DataFrame,
        output_file: PathLike = 'beeswarm.svg',
        domain: Optional[DomainTuple] = None,
        x_label: Optional[str] = None,
        value_column: str = 'value',
        title_column: str = 'label',
        show: bool = False
    ) -> Figure:
        """
        Generate a beeswarm chart file

        Args:
            records: DataFrame with one row per response
            output_file: Path to save figure; format from the extension
                ('.svg' or '.png'), configured format otherwise
            domain: (min, max) of the value axis
            x_label: Axis label
            value_column: Column holding the value to place on the axis
            title_column: Column holding the circle title
            show: Whether to display the plot

        Returns:
            matplotlib Figure object

        Example:
            >>> records, vote_count, domain, graph_type = read_poll_result('poll.json')
            >>> fig = plotter.plot(records, 'poll.svg', domain=domain, x_label='position')
        """
        layout = self.compute(records, domain=domain, value_column=value_column,
                              title_column=title_column, x_label=x_label)
        fig = self.render(layout)

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        suffix = output_path.suffix.lower().lstrip('.')
        fmt = suffix if suffix in ('svg', 'png') else self.config.output_format

        fig.savefig(output_path, format=fmt, dpi=self.config.dpi, facecolor='white', edgecolor='none')
        logger.info(f"Plot saved to {output_path}")

        if show:
            plt.show()
        else:
            plt.close(fig)

        return fig

    def plot_kind(self, kind: ChartKind, records: pd.DataFrame, output_file: PathLike, **kwargs) -> Figure:
        """
        Generate a chart of the given kind

        Raises:
            ValueError: If the chart kind is not rendered by this package
        """
        if not kind.is_supported:
            raise ValueError(f"Chart not supported: {kind.value}")
        return self.plot(records, output_file, **kwargs)
