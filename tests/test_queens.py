import io
import unittest

from nqueens.queens import main, read_dimension


def run(text):
    out = io.StringIO()
    main(io.StringIO(text), out)
    return out.getvalue()


class DriverTests(unittest.TestCase):
    def test_prints_solution_and_count(self) -> None:
        output = run("4\n")
        self.assertIn("Enter the dimensions", output)
        self.assertIn("first found solution to place 4 queens on a 4x4", output)
        self.assertIn(
            "[X][Q][X][X]\n[X][X][X][Q]\n[Q][X][X][X]\n[X][X][Q][X]\n", output
        )
        self.assertTrue(output.rstrip().endswith(
            "There are 2 possible solutions on a 4x4 chess board."
        ))

    def test_unsolvable_dimension(self) -> None:
        output = run("3")
        self.assertIn("no way to place 3 queens", output)
        self.assertIn("[ ][ ][ ]\n" * 3, output)
        self.assertIn("There are 0 possible solutions on a 3x3 chess board.", output)

    def test_non_positive_dimension_propagates(self) -> None:
        for text in ("0\n", "-2\n"):
            with self.assertRaises(ValueError):
                run(text)

    def test_garbage_dimension_raises(self) -> None:
        with self.assertRaises(ValueError):
            run("eight\n")

    def test_missing_dimension_raises(self) -> None:
        with self.assertRaises(ValueError):
            read_dimension(io.StringIO("\n   \n"))

    def test_reads_first_token(self) -> None:
        self.assertEqual(read_dimension(io.StringIO("\n 5 7\n")), 5)


if __name__ == "__main__":
    unittest.main()
