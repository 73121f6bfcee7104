"""Next/previous player selection with wraparound."""


def cycle(count: int, current: int, step: int) -> int:
    """Return ``(current + step) mod count``, always in ``[0, count)``."""
    if count <= 0:
        raise ValueError("cannot cycle through an empty player list")
    # Python's % already floors, so -1 % n == n - 1
    return (current + step) % count
