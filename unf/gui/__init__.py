"""
gui - PySide6 Front End for unf
"""

from .gui_entry import main

__all__ = ["main"]
