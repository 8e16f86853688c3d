"""
depends command line interface.

The `depends` console script is registered to `depends.cli.main:main`.
"""

from .main import main

__all__ = ["main"]
