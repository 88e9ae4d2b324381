"""
__main__.py - Module Entry

Runs the command line interface with `python -m unf`
"""

import sys

from .cli import main

sys.exit(main())
