"""I/O utilities for pollswarm"""

from .readers import PollResultReader, read_poll_result, PositionReader, read_positions
from .writers import LayoutWriter, write_layout

__all__ = [
    'PollResultReader', 'read_poll_result',
    'PositionReader', 'read_positions',
    'LayoutWriter', 'write_layout']
