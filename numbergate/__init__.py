# numbergate/__init__.py
"""
NumberGate - Time-Based Number Backend API

A small HTTP API that exposes a number derived from the server clock,
checks client predictions against it and records access events.
"""

import os

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(os.path.dirname(__file__)), "VERSION")
try:
    with open(_version_file) as f:
        __version__ = f.read().strip()
except (FileNotFoundError, IOError):
    __version__ = "1.0.0"

__license__ = "MIT"
