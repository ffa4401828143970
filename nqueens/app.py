from flask import Flask, jsonify
import os

from nqueens.helpers.Board import Board

# ----- Config -----
MAX_SIZE = int(os.environ.get("QUEENS_MAX_SIZE", "10"))
DEBUG = os.environ.get("QUEENS_DEBUG", "").lower() in ("1", "true", "yes")

TITLE = "N-Queens"

app = Flask(__name__)


# ---------------- Helpers ---------------- #

def build_board(size):
    """Build a Board, refusing sizes the service will not search."""
    if size > MAX_SIZE:
        raise ValueError(f"size must be at most {MAX_SIZE}, got {size}")
    return Board(size)


def run_board(size, action):
    """Run `action` on a fresh board and turn engine errors into JSON responses."""
    try:
        return jsonify(action(build_board(size)))

    except ValueError as e:
        app.logger.warning("Rejected size %d: %s", size, e)
        return jsonify({"error": str(e)}), 400

    except Exception:
        app.logger.exception("Error while handling size %d", size)
        return jsonify({"error": "Server error."}), 500


def solve_board(board):
    solved = board.fill_with_n_queens()
    app.logger.info("solve size=%d solved=%s", board.size, solved)
    return {
        "size": board.size,
        "solved": solved,
        "queens": [[row, col] for row, col in board.queens],
        "board": str(board).splitlines(),
    }


def count_board(board):
    total = board.get_num_combinations()
    app.logger.info("count size=%d count=%d", board.size, total)
    return {"size": board.size, "count": total}


# ---------------- Routes ---------------- #

@app.route("/")
def index():
    return jsonify({"title": TITLE, "max_size": MAX_SIZE})


@app.route("/solve/<int:size>")
def solve(size):
    return run_board(size, solve_board)


@app.route("/count/<int:size>")
def count(size):
    return run_board(size, count_board)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(debug=DEBUG, port=port)
