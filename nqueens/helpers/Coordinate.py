from typing import NamedTuple


class Coordinate(NamedTuple):
    """
    A (row, col) position on the board.

    Compared and hashed by value, so it can be used as a dict key or set member.

    Examples:
        >>> Coordinate(2, 3) == Coordinate(2, 3)
        True
        >>> row, col = Coordinate(1, 0)
        >>> row, col
        (1, 0)
    """

    row: int
    col: int
