"""Gram-Schmidt QR exercises: decomposition checks, solving, inversion and timing."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import numpy as np
from numpy.typing import ArrayLike

from numlab.gramschmidt import format_matrix, gs_decomp, gs_inverse, gs_solve
from numlab.timing import CLOCKS_PER_SEC, diff_clock

__all__ = ["random_number", "set_data_tall", "format_vector", "main"]

RAND_MAX = 2**31 - 1
EXERCISE_SIZE = 10
TIMING_SIZES = range(120, 250, 5)
TIMING_BASE_SIZE = 120
TIMING_ENTRY_SCALE = 40.0


def random_number(rng: np.random.Generator | None = None) -> float:
    """Return a pseudo-random number in ``[0, 1)``."""
    generator = np.random.default_rng() if rng is None else rng
    return float(generator.random())


def set_data_tall(
    rows: int, cols: int, rng: np.random.Generator | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """Return a random ``rows`` x ``cols`` matrix and a random right-hand side.

    Numbers are drawn row by row: the row's entries first, then the
    right-hand side entry of that row.
    """
    if rows < cols:
        raise ValueError("a tall matrix needs at least as many rows as columns")
    generator = np.random.default_rng() if rng is None else rng
    matrix = np.empty((rows, cols))
    rhs = np.empty(rows)
    for row in range(rows):
        matrix[row] = [random_number(generator) for _ in range(cols)]
        rhs[row] = random_number(generator)
    return matrix, rhs


def format_vector(v: ArrayLike) -> str:
    """Render the entries of a vector as ``%10g`` each, followed by a space."""
    return "".join("%10g " % value for value in np.asarray(v, dtype=float).ravel())


def _integer_entries(shape, rng: np.random.Generator) -> np.ndarray:
    draws = rng.integers(0, RAND_MAX, size=shape, endpoint=True)
    return (draws // 100).astype(float)


def _ticks() -> int:
    return int(time.process_time() * CLOCKS_PER_SEC)


def _exercise_a(path: Path, rng: np.random.Generator) -> None:
    n = m = EXERCISE_SIZE
    a = _integer_entries((n, m), rng)
    q, r = gs_decomp(a)
    with open(path, "w", encoding="utf-8") as out:
        out.write("Is R upper triangular? \n")
        out.write(format_matrix(r))
        out.write("\n Is Q^T*Q=1? \n")
        out.write(format_matrix(q.T @ q))
        out.write("\n Is QR = A? We compute Q*R-A and show it is equal to 0 \n")
        out.write(format_matrix(q @ r - a))

        a = _integer_entries((n, m), rng)
        b = _integer_entries(n, rng)
        q, r = gs_decomp(a)
        x = gs_solve(q, r, b)
        out.write("\n Is A*x = b? We compute A*x-b and show it is equal to zero \n")
        out.write(format_vector(a @ x - b))


def _exercise_b(path: Path, rng: np.random.Generator) -> None:
    a = _integer_entries((EXERCISE_SIZE, EXERCISE_SIZE), rng)
    q, r = gs_decomp(a)
    inverse = gs_inverse(q, r)
    with open(path, "w", encoding="utf-8") as out:
        out.write("Is A*B=I? \n")
        out.write(format_matrix(a @ inverse))
        out.write("\nIs B*A=I? \n")
        out.write(format_matrix(inverse @ a))


def _timing(path: Path, rng: np.random.Generator) -> None:
    base_time: float | None = None
    with open(path, "w", encoding="utf-8") as out:
        for size in TIMING_SIZES:
            matrix = rng.random((size, size)) * TIMING_ENTRY_SCALE

            begin = _ticks()
            gs_decomp(matrix)
            end = _ticks()
            own = diff_clock(end, begin)
            if base_time is None:
                base_time = own

            begin = _ticks()
            np.linalg.qr(matrix)
            end = _ticks()
            library = diff_clock(end, begin)

            cubic = (size / TIMING_BASE_SIZE) ** 3 * base_time
            out.write("%d\t%g\t%g\t%g\n" % (size, own, cubic, library))
            if size % 10 == 0:
                print("Done with %d dimension matrix" % size)


def main(argv: list[str] | None = None) -> int:
    """Run the QR exercises and write their results to text files."""
    parser = argparse.ArgumentParser(
        description="Gram-Schmidt QR decomposition exercises."
    )
    parser.add_argument(
        "--output-dir", type=Path, default=Path("."), help="directory for result files"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = np.random.default_rng(args.seed)
    args.output_dir.mkdir(parents=True, exist_ok=True)

    _exercise_a(args.output_dir / "out.exerciseA.txt", rng)
    _exercise_b(args.output_dir / "out.exerciseB.txt", rng)
    _timing(args.output_dir / "out.GS_timer.txt", rng)

    print("\nResults of exercise A can be seen in file out.exerciseA.txt\n")
    print("Results of exercise B can be seen in file out.exerciseB.txt\n")
    print("Results of exercise C can be seen in file compareplot.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())