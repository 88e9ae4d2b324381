"""
unf - Unixize Filenames

Renames files and directories so their names only contain letters,
digits, dot, underscore and hyphen.
"""

__version__ = "1.0.0"
