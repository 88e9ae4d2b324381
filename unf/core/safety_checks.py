"""
safety_checks.py - Safety Check Module

Preconditions checked before a name is transformed
"""


class InvalidFilenameError(ValueError):
    """Filename cannot be processed (e.g., not valid UTF-8)"""


def check_utf8_name(name: str) -> None:
    """
    Check that a filename decoded cleanly from the filesystem encoding

    Undecodable bytes reach Python as lone surrogates (surrogateescape),
    which cannot be encoded as UTF-8.

    Args:
        name: Filename

    Raises:
        InvalidFilenameError: name is not valid UTF-8
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidFilenameError(
            f"filename is not valid UTF-8: {name.encode('utf-8', 'surrogateescape')!r}"
        ) from e
