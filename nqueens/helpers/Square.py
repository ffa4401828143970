from enum import Enum


class Square(Enum):
    """
    Status of a single square on the board.

    The value of each member is the glyph used when rendering the board.

    Examples:
        >>> str(Square.QUEEN)
        'Q'
        >>> Square("X") is Square.SCOPED
        True
    """

    EMPTY = " "
    QUEEN = "Q"
    SCOPED = "X"

    def __str__(self) -> str:
        return self.value
