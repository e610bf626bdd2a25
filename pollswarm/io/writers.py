"""
I/O Writers

Handles writing of layout results.
"""

from pathlib import Path
import logging

from ..layout.types import DodgeLayout

logger = logging.getLogger(__name__)


class LayoutWriter:
    """Writes dodge layouts in TSV format with metadata"""

    def write(self, layout, output_file):
        """
        Write layout to TSV file

        Metadata lines (separation, epsilon, eviction) are written as
        '# key=value' comments before the table.

        Args:
            layout: DodgeLayout to write
            output_file: Path to output TSV file
        """
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w') as f:
            f.write(f"# separation={layout.separation}\n")
            f.write(f"# epsilon={layout.epsilon}\n")
            f.write(f"# eviction={layout.eviction}\n")
            layout.to_frame().to_csv(f, sep='\t', index=False)

        logger.debug(f"Wrote {layout.n_points} positions to {output_file}")


def write_layout(layout: DodgeLayout, output_file):
    """Convenience function to write a dodge layout"""
    writer = LayoutWriter()
    writer.write(layout, output_file)
