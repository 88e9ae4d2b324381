"""
cli_interactive.py - Interactive Prompts

Yes/no questions asked on the controlling terminal
"""

from typing import Callable, Optional


def input_bool(prompt: str, default: bool = False, read: Optional[Callable[[str], str]] = None) -> bool:
    """
    Input boolean value

    Blocks until the user answers. Empty input or end of input selects the
    default.

    Args:
        prompt: Question
        default: Answer on empty input or EOF
        read: Line reader (defaults to input)

    Returns:
        Answer
    """
    read = read or input
    default_str = "Y/n" if default else "y/N"
    try:
        value = read(f"{prompt} ({default_str}): ").strip().lower()
    except EOFError:
        # Keep the next output on its own line
        print()
        return default
    if not value:
        return default
    return value in ("y", "yes")


def ask(prompt: str) -> bool:
    """Yes/no question defaulting to no"""
    return input_bool(prompt, default=False)
