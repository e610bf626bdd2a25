"""
I/O Readers

Handles reading of poll result documents and position files.
"""

from __future__ import annotations
from typing import List, Optional
import json
import numpy as np
import pandas as pd
import logging

from ..types import DomainTuple, PathLike, PollReadResult, PollResultDocument

logger = logging.getLogger(__name__)


class PollResultReader:
    """Reads poll result JSON documents"""

    @staticmethod
    def read(filepath: PathLike) -> PollReadResult:
        """
        Read a poll result document

        Expected format:
            {"vote_count": 3,
             "domain": [-2, 2],
             "data": [{"label": "Alice", "value": 1}, ...]}

        Args:
            filepath: Path to JSON file

        Returns:
            Tuple of (records_df with label/value columns, vote_count,
            domain or None, graph_type or None)
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            document: PollResultDocument = json.load(f)

        if not isinstance(document, dict):
            raise ValueError(f"Poll result in {filepath} must be a JSON object")
        if 'data' not in document:
            raise ValueError(f"No 'data' found in {filepath}")

        records = PollResultReader._parse_records(document['data'], filepath)
        vote_count = PollResultReader._parse_vote_count(
            document.get('vote_count', len(records)), filepath)
        domain = PollResultReader._parse_domain(document.get('domain'), filepath)
        graph_type = document.get('graph_type') or None

        logger.debug(f"Read {len(records)} records (vote_count={vote_count}) from {filepath}")
        return records, vote_count, domain, graph_type

    @staticmethod
    def _parse_records(data, filepath: PathLike) -> pd.DataFrame:
        """Convert the 'data' list to a DataFrame with label and value columns"""
        if not isinstance(data, list):
            raise ValueError(f"'data' in {filepath} must be a list")

        rows = []
        for item in data:
            if isinstance(item, dict):
                rows.append({'label': item.get('label'), 'value': item.get('value')})
            else:
                # Table questions carry bare responses
                rows.append({'label': item, 'value': None})
        return pd.DataFrame(rows, columns=['label', 'value'])

    @staticmethod
    def _parse_vote_count(vote_count, filepath: PathLike) -> int:
        """Validate the vote count as a non-negative integer"""
        if isinstance(vote_count, bool):
            raise ValueError(f"'vote_count' in {filepath} must be an integer, got {vote_count!r}")
        try:
            count = int(vote_count)
        except (TypeError, ValueError) as e:
            raise ValueError(f"'vote_count' in {filepath} must be an integer, got {vote_count!r}") from e
        if count < 0:
            raise ValueError(f"'vote_count' in {filepath} must not be negative, got {count}")
        return count

    @staticmethod
    def _parse_domain(domain, filepath: PathLike) -> Optional[DomainTuple]:
        """Validate an optional [min, max] domain"""
        if domain is None or domain == '':
            return None
        if not isinstance(domain, (list, tuple)) or len(domain) != 2:
            raise ValueError(f"'domain' in {filepath} must be a [min, max] pair, got {domain!r}")
        try:
            lo, hi = float(domain[0]), float(domain[1])
        except (TypeError, ValueError) as e:
            raise ValueError(f"'domain' in {filepath} must be numeric, got {domain!r}") from e
        return lo, hi


def read_poll_result(filepath: PathLike) -> PollReadResult:
    """
    Convenience function to read a poll result document

    Args:
        filepath: Path to JSON file

    Returns:
        Tuple of (records_df, vote_count, domain, graph_type)
    """
    return PollResultReader.read(filepath)


class PositionReader:
    """Reads axis positions from tab-separated files"""

    @staticmethod
    def read(filepath: PathLike, column: str = 'x') -> np.ndarray:
        """
        Read one numeric column of positions

        Lines starting with '#' are treated as comments.

        Args:
            filepath: Path to TSV file with a header row
            column: Column holding the positions

        Returns:
            Positions as float array
        """
        table: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')

        if column not in table.columns:
            available: List[str] = [str(c) for c in table.columns]
            raise ValueError(f"Column '{column}' not found in {filepath}. "
                             f"Available columns: {', '.join(available)}")

        positions = pd.to_numeric(table[column], errors='coerce')
        n_missing = int(positions.isna().sum())
        if n_missing:
            raise ValueError(f"{n_missing} non-numeric values in column '{column}' of {filepath}")

        return positions.to_numpy(dtype=float)


def read_positions(filepath: PathLike, column: str = 'x') -> np.ndarray:
    """
    Convenience function to read positions

    Args:
        filepath: Path to TSV file
        column: Column holding the positions

    Returns:
        Positions as float array
    """
    return PositionReader.read(filepath, column)
