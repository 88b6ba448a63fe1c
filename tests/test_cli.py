import io

import pytest

from matrixcalc.cli import TokenReader, main, run
from matrixcalc.matrix import Matrix, MatrixError


def run_text(text):
    out = io.StringIO()
    run(text, out)
    return out.getvalue()


def test_next_op_skips_whitespace_and_ends_with_none():
    reader = TokenReader("  +\n\t d ")
    assert reader.next_op() == "+"
    assert reader.next_op() == "d"
    assert reader.next_op() is None


def test_numbers():
    reader = TokenReader(" -3 2.5e1 .5")
    assert reader.next_int() == -3
    assert reader.next_float() == float("2.5e1")
    assert reader.next_float() == float(".5")


def test_bad_number_raises():
    with pytest.raises(ValueError):
        TokenReader("abc").next_float()
    with pytest.raises(ValueError):
        TokenReader("   ").next_int()


def test_read_matrix():
    reader = TokenReader("2 2\n1 2\n3 4\n")
    assert reader.read_matrix() == Matrix.from_rows([[1, 2], [3, 4]])


def test_read_matrix_bad_dimensions():
    with pytest.raises(MatrixError):
        TokenReader("-1 2").read_matrix()


def test_run_add():
    expected = (Matrix.from_rows([[1, 2]]) + Matrix.from_rows([[3, 4]])).format()
    assert run_text("+ 1 2 1 2 1 2 3 4 q") == expected


def test_run_sub_and_mul():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[0, 1], [1, 0]])
    text = "- 2 2 1 2 3 4 2 2 0 1 1 0\n* 2 2 1 2 3 4 2 2 0 1 1 0\nq"
    assert run_text(text) == (a - b).format() + (a @ b).format()


def test_run_shape_errors():
    assert run_text("+ 1 1 5 1 2 5 6 q") == (
        "Error: Matrix a and b must have the same rows and cols.\n"
    )
    assert run_text("* 1 2 1 1 1 1 1 q") == (
        "Error: The number of cols of matrix a must be equal to "
        "the number of rows of matrix b.\n"
    )


def test_run_scale_transpose_inverse():
    a = Matrix.from_rows([[2, 1], [1, 1]])
    text = ". 2 2 2 1 1 1 t 2 2 2 1 1 1 i 2 2 2 1 1 1 q"
    assert run_text(text) == (
        a.scale(2.0).format() + a.transpose().format() + a.inverse().format()
    )


def test_run_scalar_results():
    a = Matrix.from_rows([[2, 1], [1, 1]])
    out = run_text("d 2 2 2 1 1 1 j 2 2 2 1 1 1 r 2 2 2 1 1 1")
    assert out.splitlines() == [
        f"{a.determinant():.2f}",
        f"{a.trace():.2f}",
        str(a.rank()),
    ]


def test_run_determinant_not_square():
    assert run_text("d 1 2 1 2 q") == "Error: The matrix must be a square matrix.\n0.00\n"


def test_run_inverse_singular():
    assert run_text("i 2 2 1 2 2 4") == "Error: The matrix is singular.\n"


def test_run_quit_stops_processing():
    assert run_text("q + 1 1 1 1 1 1") == ""


def test_run_ignores_unknown_characters():
    assert run_text("x ? j 1 1 4 q") == run_text("j 1 1 4 q")


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run_text("+ 2 2 1 2")


def test_main_success(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("t 1 2 1 2\nq\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == Matrix.from_rows([[1], [2]]).format()


def test_main_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("d 2 2 1 x"))
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error: ")