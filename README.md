# matrixcalc

A small library of dense real matrices, and a command-line calculator that
reads matrix operations from standard input.

## Installation

    pip install .

## Library use

    from matrixcalc.matrix import Matrix, MatrixError

    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])

    a + b              # element-wise sum
    a - b              # element-wise difference
    a @ b              # matrix product
    a.scale(2.0)       # every element multiplied by 2
    a.transpose()
    a.determinant()    # -2.0
    a.trace()          # 5.0
    a.inverse()        # Gauss-Jordan elimination with partial pivoting
    a.rank()           # 2
    print(a.format())  # each element left-aligned in 8 columns, 2 decimals

A `Matrix` is an immutable dataclass with the fields `rows`, `cols` and
`data` (a tuple of row tuples of floats). It can also be built directly as
`Matrix(rows, cols, data)`; the data must match the stated dimensions, and
both dimensions must lie between 0 and 100 (`MAX_MATRIX_SIZE`), otherwise
`MatrixError` is raised.

- `Matrix.zeros(rows, cols)` makes a zero matrix.
- `shape` gives `(rows, cols)`.
- `a[i, j]` reads one element; `a[i]` returns row `i` as a tuple.
- `minor(row, col)` returns the matrix with that row and column removed, and
  raises `IndexError` if either index is out of range.
- `determinant()` expands along the first row; an empty 0 x 0 matrix gives
  `0.0`.
- `str(a)` is the same as `a.format()`.

`MatrixError` is a subclass of `ValueError`. It is raised when:

- adding or subtracting matrices of different shapes;
- multiplying when the columns of the left operand do not match the rows of
  the right one;
- asking for the determinant, trace or inverse of a matrix that is not square;
- asking for the inverse of a singular matrix.

`rank()` works on matrices of any shape and never raises.

## Calculator

    matrixcalc

The calculator reads all of standard input and then carries out the commands
in it, in order. Each command is one operator character followed by one or two
matrices. A matrix is written as its row and column counts and then its
elements in row order, separated by any whitespace:

| op  | operands | output                         |
|-----|----------|--------------------------------|
| `+` | A B      | A + B                          |
| `-` | A B      | A - B                          |
| `*` | A B      | A × B                          |
| `.` | A        | A scaled by 2                  |
| `t` | A        | transpose of A                 |
| `d` | A        | determinant (2 decimals)       |
| `i` | A        | inverse of A                   |
| `r` | A        | rank (integer)                 |
| `j` | A        | trace (2 decimals)             |
| `q` |          | quit                           |

Processing stops at `q` or at the end of input. Any other character is
ignored.

When an operation does not fit its operands, the calculator writes a line
such as `Error: The matrix must be a square matrix.` to standard output and
goes on with the next command; for `d` and `j` it then also prints `0.00`.
If the input cannot be read (a missing or malformed number, or a dimension
outside 0 to 100), the calculator prints the error to standard error and exits
with status 1.

Example:

    $ printf '+ 2 2 1 2 3 4 2 2 5 6 7 8\nq\n' | matrixcalc
    6.00    8.00    
    10.00   12.00   

## Tests

    pip install .[test]
    pytest