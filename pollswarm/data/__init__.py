"""
Default data files for pollswarm
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Example yes/no poll result (position of each respondent on a -2..2 scale)
DEFAULT_EXAMPLE_POLL = os.path.join(DATA_DIR, 'example_yes_no_poll.json')
