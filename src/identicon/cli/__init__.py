"""Command-line interface for identicon generation.

This package contains the execution logic, making scripts/ optional and deletable.
"""

from identicon.cli.run_identicon import run_identicon, main

__all__ = ['run_identicon', 'main']
