"""Repeating strings."""

REPEAT_COUNT = 5


def repeat(character: str) -> str:
    """Return ``character`` repeated five times."""
    return character * REPEAT_COUNT