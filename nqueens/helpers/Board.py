from .Coordinate import Coordinate
from .Square import Square

# The four diagonal rays a queen attacks along, as (row step, col step).
DIAGONALS = [(1, 1), (-1, -1), (1, -1), (-1, 1)]


class Board:
    """
    Square chess board for the n-Queens problem.

    Every square is EMPTY, holds a QUEEN, or is SCOPED (attacked by a queen).
    Queens are kept in a placement history, most recent last. Each entry pairs
    the queen's coordinate with the squares that queen turned from EMPTY into
    SCOPED when it was placed. A square already attacked by an earlier queen
    is never claimed again, so removing the most recent queen frees exactly
    the squares no other queen on the board still attacks.

    Examples:
        >>> board = Board(4)
        >>> board.fill_with_n_queens()
        True
        >>> print(board, end="")
        [X][Q][X][X]
        [X][X][X][Q]
        [Q][X][X][X]
        [X][X][Q][X]
        >>> board.clear_board()
        >>> board.get_num_combinations()
        2
    """

    def __init__(self, size: int = 8):
        """
        Initialize an empty board.

        Args:
            size (int): Board dimension (size x size), classic 8 by default.

        Raises:
            ValueError: If size is not a positive integer.
        """
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f'"size" must be a positive integer, got {size!r}')
        self.__size = size
        self.__grid = []
        self.__history = []  # [(Coordinate, set[Coordinate])], placement order
        self.clear_board()

    @property
    def size(self) -> int:
        """Dimension of the board."""
        return self.__size

    @property
    def num_queens(self) -> int:
        """Number of queens currently on the board."""
        return len(self.__history)

    @property
    def grid(self) -> tuple:
        """
        Snapshot of every square, row by row.

        Returns:
            tuple[tuple[Square, ...], ...]: grid[row][col] status.
        """
        return tuple(tuple(row) for row in self.__grid)

    @property
    def queens(self) -> tuple:
        """
        Coordinates of the queens on the board, oldest first.

        Returns:
            tuple[Coordinate, ...]: The placement stack, top last.
        """
        return tuple(coords for coords, _ in self.__history)

    @property
    def scope_ownership(self) -> dict:
        """
        Squares each queen claimed when it was placed.

        Returns:
            dict[Coordinate, frozenset[Coordinate]]: queen -> squares it owns.
        """
        return {coords: frozenset(owned) for coords, owned in self.__history}

    def square(self, row: int, col: int) -> Square:
        """Return the status of the square at (row, col)."""
        self._check_position(row, col)
        return self.__grid[row][col]

    def clear_board(self):
        """Remove every queen and mark every square EMPTY. The size is kept."""
        self.__grid = [[Square.EMPTY] * self.__size for _ in range(self.__size)]
        self.__history = []

    def _check_position(self, row: int, col: int):
        if not (0 <= row < self.__size and 0 <= col < self.__size):
            raise IndexError(f"Board position ({row},{col}) does not exist")

    def _claim(self, row: int, col: int, owned: set):
        if self.__grid[row][col] is Square.EMPTY:
            self.__grid[row][col] = Square.SCOPED
            owned.add(Coordinate(row, col))

    def place_queen(self, row: int, col: int) -> bool:
        """
        Try to put a queen on (row, col).

        Every EMPTY square along the queen's row, column and four diagonals is
        marked SCOPED and recorded as owned by this queen. Squares that are
        already SCOPED belong to an earlier queen and are left alone.

        Args:
            row (int): Row of the new queen.
            col (int): Column of the new queen.

        Returns:
            bool: True if the queen was placed, False if the square is
            occupied or attacked (the board is then unchanged).

        Raises:
            IndexError: If (row, col) is not on the board.

        Examples:
            >>> board = Board(3)
            >>> board.place_queen(0, 0)
            True
            >>> board.place_queen(1, 1)
            False
            >>> sorted(board.scope_ownership[Coordinate(0, 0)])
            [Coordinate(row=0, col=1), Coordinate(row=0, col=2), Coordinate(row=1, col=0), Coordinate(row=1, col=1), Coordinate(row=2, col=0), Coordinate(row=2, col=2)]
        """
        self._check_position(row, col)
        if self.__grid[row][col] is not Square.EMPTY:
            return False

        coords = Coordinate(row, col)
        owned = set()
        self.__history.append((coords, owned))

        # row and column, skipping the queen's own square
        for index in range(self.__size):
            if index != col:
                self._claim(row, index, owned)
            if index != row:
                self._claim(index, col, owned)

        for dr, dc in DIAGONALS:
            r, c = row + dr, col + dc
            while 0 <= r < self.__size and 0 <= c < self.__size:
                self._claim(r, c, owned)
                r, c = r + dr, c + dc

        self.__grid[row][col] = Square.QUEEN
        return True

    def remove_queen(self):
        """
        Take back the most recently placed queen.

        The queen's square and every square it owns become EMPTY again.

        Raises:
            IndexError: If there is no queen on the board.
        """
        if not self.__history:
            raise IndexError("no queen to remove")
        coords, owned = self.__history.pop()
        for r, c in owned:
            self.__grid[r][c] = Square.EMPTY
        self.__grid[coords.row][coords.col] = Square.EMPTY

    def empty_squares(self, row: int = None) -> list:
        """
        List the EMPTY squares in row-major order.

        Args:
            row (int | None): Restrict the scan to this row.

        Returns:
            list[Coordinate]: Coordinates of the empty squares.
        """
        rows = range(self.__size) if row is None else [row]
        return [
            Coordinate(r, c)
            for r in rows
            for c in range(self.__size)
            if self.__grid[r][c] is Square.EMPTY
        ]

    def fill_with_n_queens(self) -> bool:
        """
        Place `size` non-attacking queens by backtracking from the current board.

        Every empty square is a candidate, tried in row-major order. Runtime
        grows quickly past size 10.

        Returns:
            bool: True with the first solution found left on the board, or
            False with the board exactly as it was before the call.
        """
        choices = self.empty_squares()

        if not choices and self.num_queens < self.__size:
            return False
        if self.num_queens == self.__size:
            return True

        for row, col in choices:
            self.place_queen(row, col)
            if self.fill_with_n_queens():
                return True
            self.remove_queen()
        return False

    def get_num_combinations(self) -> int:
        """
        Count the solutions reachable from the current board, one row at a time.

        Returns:
            int: Number of complete placements of `size` queens.

        Examples:
            >>> [Board(n).get_num_combinations() for n in range(1, 7)]
            [1, 0, 0, 2, 10, 4]
        """
        return self._count_from_row(0)

    def _count_from_row(self, row: int) -> int:
        if self.num_queens == self.__size:
            return 1
        if row >= self.__size:
            return 0

        count = 0
        for r, c in self.empty_squares(row):
            self.place_queen(r, c)
            count += self._count_from_row(row + 1)
            self.remove_queen()
        return count

    def is_valid(self) -> bool:
        """
        Check that no two queens share a row, column or diagonal.

        Worked out from the queen coordinates alone, not from the square tags.

        Returns:
            bool: True if the queens are mutually non-attacking.
        """
        seen_rows, seen_cols, seen_diag1, seen_diag2 = set(), set(), set(), set()
        for row, col in self.queens:
            if (
                row in seen_rows or
                col in seen_cols or
                (row - col) in seen_diag1 or
                (row + col) in seen_diag2
            ):
                return False
            seen_rows.add(row)
            seen_cols.add(col)
            seen_diag1.add(row - col)
            seen_diag2.add(row + col)
        return True

    def __str__(self) -> str:
        """
        Return the board as rows of bracketed glyphs, one row per line.

        Returns:
            str: e.g. "[Q][X]\\n[X][X]\\n" for a 2x2 board with one queen.
        """
        return "".join(
            "".join(f"[{square}]" for square in row) + "\n"
            for row in self.__grid
        )
