"""
cli - Command Line Interface for unf
"""

from .cli_entry import main
from .cli_interactive import ask, input_bool

__all__ = ["main", "ask", "input_bool"]
