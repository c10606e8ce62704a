#!/usr/bin/env python3
"""Identicon generator runner.

Usage:
    python scripts/make_identicon.py apple
    python scripts/make_identicon.py apple ball -c scripts/user_config.py
    python scripts/make_identicon.py apple --output-dir /tmp/icons -v

Same as the installed ``identicon`` command.
"""

import sys

from identicon.cli.run_identicon import main


if __name__ == "__main__":
    sys.exit(main())
