"""Integer arithmetic."""


def add(x: int, y: int) -> int:
    """Return the sum of two integers.

    >>> add(1, 5)
    6
    """
    return x + y