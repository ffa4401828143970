import sys

from nqueens.helpers.Board import Board


def read_dimension(stream) -> int:
    """
    Read the board dimension from the first token of a text stream.

    Args:
        stream: Readable text stream (stdin by default in `main`).

    Returns:
        int: The dimension as typed. Range is checked by the Board.

    Raises:
        ValueError: If the stream holds no integer.

    Examples:
        >>> import io
        >>> read_dimension(io.StringIO("\\n  6 \\n"))
        6
    """
    for line in stream:
        tokens = line.split()
        if tokens:
            return int(tokens[0])
    raise ValueError("no board dimension given")


def main(stdin=None, stdout=None):
    """
    Solve the n-Queens puzzle for a dimension read from stdin.

    Prints the first solution found, then the total number of solutions.
    A non-positive dimension raises the Board's ValueError.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print("Enter the dimensions of the chess board you'd like to solve:", file=stdout)
    dim = read_dimension(stdin)
    board = Board(dim)

    if board.fill_with_n_queens():
        print(f"Below is the first found solution to place {dim} queens on a {dim}x{dim} chess board:", file=stdout)
    else:
        print(f"There is no way to place {dim} queens on a {dim}x{dim} chess board:", file=stdout)
    print(board, file=stdout)

    board.clear_board()
    print(f"There are {board.get_num_combinations()} possible solutions on a {dim}x{dim} chess board.", file=stdout)


if __name__ == "__main__":
    main()
