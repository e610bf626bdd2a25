"""Plot subcommand - visualization"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import pandas as pd

# Runtime imports
from ..config import PlotConfig
from ..visualizer import BeeswarmPlotter
from ..io import read_poll_result
from ..data import DEFAULT_EXAMPLE_POLL
from ..types import ChartKind

# Type checking imports
if TYPE_CHECKING:
    from matplotlib.figure import Figure
    from ..types import DomainTuple

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add plot subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for plot subcommand
    """
    parser = subparsers.add_parser(
        'plot',
        help='Create beeswarm chart of a poll result'
    )

    # Sample identification
    parser.add_argument('--prefix', required=True,
                       help='Prefix for output files')
    parser.add_argument('-i', '--input', metavar='JSON_FILE',
                       help='Poll result JSON (default: built-in example poll)')
    parser.add_argument('--output-dir', default='.',
                       help='Output directory (default: current directory)')

    # Chart
    parser.add_argument('--graph-type', choices=[k.value for k in ChartKind],
                       help="Chart kind (default: the document's graph_type, "
                            "else 'Yes no beeswarm graph')")
    parser.add_argument('--preset', choices=['default', 'compact', 'presentation', 'debug'],
                       default='default',
                       help='Configuration preset (default: default)')
    parser.add_argument('--width', type=float,
                       help='Chart width in px (default: from preset, 640)')
    parser.add_argument('--height', type=float, default=300,
                       help='Chart height in px, 0 to fit the swarm (default: 300)')
    parser.add_argument('--label', default='position',
                       help='X axis label (default: position)')
    parser.add_argument('--format', choices=['svg', 'png'],
                       help='Output format (default: from preset, svg)')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> Optional[Figure]:
    """
    Execute plot subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        The rendered Figure, or None when the poll has no responses
    """
    # Configure logging as early as possible for this subcommand
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # Setup configuration
    config = PlotConfig.from_preset(args.preset)
    if args.width is not None:
        config.beeswarm.width = args.width
    config.beeswarm.height = args.height if args.height > 0 else None
    config.beeswarm.x_label = args.label
    if args.format is not None:
        config.output_format = args.format

    # Setup directories
    input_file = Path(args.input) if args.input else Path(DEFAULT_EXAMPLE_POLL)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_file = output_dir / f"{args.prefix}.pollswarm.{config.output_format}"

    logger.info(f"Input: {input_file}")
    logger.info(f"Output: {plot_file}")
    logger.info(f"Preset: {args.preset}")

    # Check input exists
    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    # Load poll result
    records: pd.DataFrame
    vote_count: int
    domain: Optional[DomainTuple]
    document_graph_type: Optional[str]
    records, vote_count, domain, document_graph_type = read_poll_result(input_file)
    logger.info(f"Loaded {len(records)} records ({vote_count} votes)")

    if vote_count == 0:
        logger.warning("No responses")
        return None

    if args.graph_type is not None:
        graph_type = args.graph_type
    else:
        graph_type = document_graph_type or ChartKind.BEESWARM.value
    kind = ChartKind.from_label(graph_type)
    logger.info(f"Chart kind: {kind.value}")

    logger.info("Generating plot...")
    plotter = BeeswarmPlotter(config)
    fig = plotter.plot_kind(kind, records, plot_file, domain=domain, x_label=args.label)

    logger.info(f"Plot saved: {plot_file}")
    return fig
