"""
CLI layer for enumshift.

Terminal transport only: argument parsing, coloured output and tables. All
behaviour lives in ``enumshift.core``.

Entry point::

    enumshift --help
"""

from enumshift.cli.app import app

__all__ = ["app"]
