# numlab

A collection of small numerical routines built on NumPy, together with
commands that exercise them on test problems.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `numlab.gramschmidt` | Modified Gram-Schmidt QR decomposition `gs_decomp(a)` returning `(q, r)`, `backsub(r, b)`, `gs_solve(q, r, b)`, `gs_inverse(q, r)` and `format_matrix(a)` (entries as `%0.3g`). |
| `numlab.minimization` | `numerical_gradient` (forward differences), `quasi_newton_method` with back-tracking line search and a symmetric rank-1 update of the inverse Hessian, returning a `QuasiNewtonResult` (`point`, `value`, `steps`, `scales`, `resets`, `reason`); the downhill simplex `downhill_simplex(function, simplex, size_goal)`, returning the final simplex and the step count, and its building blocks `simplex_reflection`, `simplex_expansion`, `simplex_contraction`, `simplex_reduction`, `simplex_distance`, `simplex_size`, `simplex_update`, `simplex_initiate`. |
| `numlab.montecarlo` | `plain_monte_carlo` (pseudo-random points, returns estimate and statistical error), `quasi_monte_carlo` (two interleaved Halton sequences; the error comes from the difference of their partial sums), `stratified_monte_carlo` (recursive stratified sampling), the sequence helpers `van_der_corput`, `halton_first`, `halton_second`, `halton_point_first`, `halton_point_second`, `random_point`, and `Lattice`, an additive-recurrence generator of points in the unit cube (iterable, or call `next()`). Random functions take an optional `numpy.random.Generator`. |
| `numlab.integration` | `adapt` (recursive adaptive open 4-point rule), `open_quad` (Clenshaw-Curtis variable transformation, for endpoint singularities) and `integrate` (either limit may be infinite). Each returns `(integral, error_estimate)`. |
| `numlab.rungekutta` | `rk_step12`, an embedded midpoint/Euler step returning the new value and an error estimate, and `rk_driver`, an adaptive-step driver that can write a table of its steps to an open text file. |
| `numlab.roots` | `newton_method(function, start, tolerance)`: Newton's method with a numerical Jacobian, a Gram-Schmidt QR solve and back-tracking line search; raises `RuntimeError` if it does not converge. |
| `numlab.neuralnetwork` | `NeuralNetwork(neurons, activation, derivative, antiderivative)`: a one-hidden-layer network with `response`, `response_derivative`, `response_integral` and `train(inputs, labels)`, which fits the parameters by least squares with the quasi-Newton minimiser. |
| `numlab.datafile` | `read_table(path, columns=3, limit=None)`: reads whitespace-separated numbers and returns one array per column; raises `ValueError` on bad or incomplete rows. |
| `numlab.utilities` | `random_number`, `format_vector`, `format_matrix` and `set_data_symmetric` (a random symmetric matrix). |
| `numlab.timing` | `diff_clock(start_time, end_time)`, which scales a difference of processor tick counts. |

Functions that take a target function accept any Python callable; vectors and
matrices are NumPy arrays.

## Commands

- `numlab-linear [--output-dir DIR] [--seed N]` — QR decomposition checks and a
  linear solve written to `out.exerciseA.txt`, an inverse check written to
  `out.exerciseB.txt`, and timings of `gs_decomp` against `numpy.linalg.qr`
  for sizes 120 to 245 written to `out.GS_timer.txt`.
- `numlab-minimization [--data FILE] [--output FILE]` — quasi-Newton
  minimisation of Rosenbrock's valley and Himmelblau's function, then a
  Breit-Wigner fit to up to 30 rows of energy, cross section and error read
  from `--data` (default `higgsData.txt`); the fitted curve goes to
  `--output` (default `higgsFit.txt`).
- `numlab-montecarlo [--points N] [--reps N] [--step N] [--output FILE] [--seed N]` —
  plain and quasi-random Monte Carlo estimates of the integral of √x on
  [0, 2] and of a three-dimensional integral over [0, π]³; the error
  estimates of both methods for growing point counts go to `--output`
  (default `errorScaling.txt`).
- `numlab-integration` — adaptive, Clenshaw-Curtis and infinite-limit
  integration of several test functions, printing error goals, actual
  errors, error estimates and function call counts.
- `numlab-roots [OUTPUT] [--convergence FILE] [--max-radius R]` — Newton's
  method on two test systems, then the hydrogen ground-state energy by
  shooting; the wave function is written to `OUTPUT` (default
  `hydrogenData.txt`) and the energy error against the outer radius to
  `--convergence` (default `convergenceData.txt`).
- `numlab-neural INPUT OUTPUT` — trains a five-neuron cosine network on up to
  20 rows of the two columns of `INPUT` and writes its response, derivative
  and integral next to the exact values to `OUTPUT`.

## What it does not do

The commands write plain-text tables only. Some of their messages name plot
files (such as `compareplot.png`), but no plots are drawn; use a plotting
tool of your choice on the tables. The downhill simplex is available as a
library function but no command runs it.