"""
text_match.py - Text Transliteration Tools

Maps arbitrary filenames to a unix-friendly form made of letters, digits,
dot, underscore and hyphen
"""

import re

import emoji
from unidecode import unidecode


# Everything outside the unix-friendly character set
_UNFRIENDLY_RUN = re.compile(r"[^A-Za-z0-9._-]+")
_UNDERSCORE_RUN = re.compile(r"_+")
_UNDERSCORE_BEFORE_DOT = re.compile(r"_\.")

# Aliases picked over the first listed one for emoji that have several
_PREFERRED_ALIASES = {"laughing"}


def emoji_word(chars: str, data: dict) -> str:
    """
    Short word for an emoji, surrounded by spaces

    Args:
        chars: The emoji as matched in the text
        data: Its emoji.EMOJI_DATA entry

    Returns:
        " word " (e.g., " wink ")
    """
    aliases = [alias.strip(":") for alias in data.get("alias", [])]
    preferred = [alias for alias in aliases if alias in _PREFERRED_ALIASES]
    if preferred:
        word = preferred[0]
    elif aliases:
        word = aliases[0]
    else:
        word = data.get("en", "").strip(":")
    return f" {word} "


def to_ascii(text: str) -> str:
    """
    Transcribe text to ASCII

    Emoji become their short alias word ("wink"), surrounded by spaces so
    they stay separate words. Everything else non-ASCII is folded by
    unidecode (diacritics to base letters, unknown symbols dropped).

    Args:
        text: Original text

    Returns:
        ASCII text
    """
    text = emoji.replace_emoji(text, replace=emoji_word)
    return unidecode(text)


def transliterate(name: str) -> str:
    """
    Convert filename to its unix-friendly form

    Args:
        name: Original filename (no directory part)

    Returns:
        Unix-friendly filename, possibly empty
    """
    name = to_ascii(name)
    name = _UNFRIENDLY_RUN.sub("_", name)
    name = _UNDERSCORE_RUN.sub("_", name)
    name = _UNDERSCORE_BEFORE_DOT.sub(".", name)
    return name.strip("_-")


def is_unix_friendly(name: str) -> bool:
    """Check if filename is already in unix-friendly form"""
    return transliterate(name) == name
