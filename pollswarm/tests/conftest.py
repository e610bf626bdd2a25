"""
Shared pytest fixtures for pollswarm tests

Supports both development mode (python -m pollswarm) and installed mode (pip install -e .)
"""
import pytest
import json
from pathlib import Path
from argparse import Namespace
import sys

import matplotlib

matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def setup_pollswarm_path():
    """
    Add repository root to Python path for development mode

    Structure:
      pollswarm/                   <- repo root (need to add this to sys.path)
      └── pollswarm/               <- package
          ├── __init__.py
          ├── layout/
          └── tests/
              └── conftest.py      <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent

    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture
def poll_document():
    """Small yes/no poll result with one unanswered response"""
    return {
        "vote_count": 5,
        "graph_type": "Yes no beeswarm graph",
        "domain": [-2, 2],
        "data": [
            {"label": "Ann", "value": -2},
            {"label": "Ben", "value": 0},
            {"label": "Cat", "value": 0},
            {"label": "Dan", "value": 0},
            {"label": "Eve", "value": None},
        ],
    }


@pytest.fixture
def poll_result_file(tmp_path, poll_document):
    """Poll result document written to disk"""
    path = tmp_path / "poll.json"
    path.write_text(json.dumps(poll_document), encoding="utf-8")
    return path


@pytest.fixture
def empty_poll_file(tmp_path):
    """Poll result document without responses"""
    path = tmp_path / "empty_poll.json"
    path.write_text(json.dumps({"vote_count": 0, "domain": [-2, 2], "data": []}), encoding="utf-8")
    return path


@pytest.fixture
def positions_file(tmp_path):
    """Tab-separated positions with a comment line"""
    path = tmp_path / "positions.tsv"
    path.write_text(
        "# projected answers\n"
        "label\tx\n"
        "a\t100\n"
        "b\t100\n"
        "c\t102\n"
        "d\t300\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def plot_args(tmp_path):
    """Namespace matching what argparse creates for the plot subcommand"""
    return Namespace(
        prefix='poll',
        input=None,
        output_dir=str(tmp_path / "out"),
        graph_type=None,
        preset='default',
        width=None,
        height=300,
        label='position',
        format=None,
        debug=False,
    )


@pytest.fixture
def dodge_args(tmp_path, positions_file):
    """Namespace matching what argparse creates for the dodge subcommand"""
    return Namespace(
        input=str(positions_file),
        column='x',
        prefix='sample',
        output_dir=str(tmp_path / "out"),
        radius=3.0,
        padding=1.5,
        eviction='squared',
        debug=False,
    )


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running full pollswarm commands"
    )
    config.addinivalue_line(
        "markers", "layout: Tests validating circle packing (no-overlap, ordering)"
    )
