"""Dodge subcommand - circle packing of raw axis positions"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..config import DodgeConfig
from ..layout import DodgeLayoutEngine
from ..io import read_positions, write_layout

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add dodge subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for dodge subcommand
    """
    parser = subparsers.add_parser(
        'dodge',
        help='Compute beeswarm offsets for axis positions'
    )

    # Input / output
    parser.add_argument('-i', '--input', required=True,
                       help='Tab-separated file with a header row holding the positions')
    parser.add_argument('--column', default='x',
                       help='Column holding the positions (default: x)')
    parser.add_argument('--prefix', required=True,
                       help='Prefix for output files')
    parser.add_argument('--output-dir', default='.',
                       help='Output directory (default: current directory)')

    # Packing parameters
    parser.add_argument('--radius', type=float, default=3.0,
                       help='Circle radius in px (default: 3)')
    parser.add_argument('--padding', type=float, default=1.5,
                       help='Padding between circles in px (default: 1.5)')
    parser.add_argument('--eviction', choices=['squared', 'linear'], default='squared',
                       help='Active set eviction window: squared separation (historical) '
                            'or linear separation (default: squared)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute dodge subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    logger.info("=== pollswarm: Dodge Layout ===")

    input_file = Path(args.input)
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    layout_file = output_dir / f"{args.prefix}.pollswarm_dodge.tsv"

    logger.info(f"Input: {input_file} (column '{args.column}')")
    logger.info(f"Output: {layout_file}")

    if not input_file.exists():
        raise FileNotFoundError(f"Input file not found: {input_file}")

    positions = read_positions(input_file, args.column)
    logger.info(f"Loaded {len(positions)} positions")

    config = DodgeConfig(radius=args.radius, padding=args.padding, eviction=args.eviction)
    engine = DodgeLayoutEngine(config)
    layout = engine.calculate_layout(positions)

    overlaps = layout.overlapping_pairs()
    if overlaps:
        logger.warning(f"{len(overlaps)} overlapping circle pairs "
                       f"(try --eviction linear); first: {overlaps[0]}")

    write_layout(layout, layout_file)
    logger.info(f"Layout: {layout_file}")
