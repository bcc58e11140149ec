import re

import numpy as np
import pytest

from numlab.minimization_demo import (
    breit_wigner,
    deviation_function,
    himmelblau,
    main,
    rosenbrock_valley,
    simplex_test_function,
)


def test_rosenbrock_minimum_is_zero():
    assert rosenbrock_valley([1.0, 1.0]) == 0.0
    assert rosenbrock_valley([0.0, 0.0]) > 0.0


@pytest.mark.parametrize("point", [(3.0, 2.0), (0.0, 0.0), (-1.0, 4.0)])
def test_himmelblau_nonnegative_and_zero_at_3_2(point):
    assert himmelblau(point) >= 0.0
    assert himmelblau((3.0, 2.0)) == 0.0


def test_simplex_test_function_uses_first_coordinate_only():
    assert simplex_test_function([4.0, 100.0]) == simplex_test_function([4.0, -3.0])


def test_breit_wigner_symmetric_and_peaks_at_mass():
    peak = breit_wigner(125.0, 2.0, 10.0, 125.0)
    assert breit_wigner(125.0, 2.0, 10.0, 123.0) == pytest.approx(
        breit_wigner(125.0, 2.0, 10.0, 127.0)
    )
    assert peak > breit_wigner(125.0, 2.0, 10.0, 126.0)


def test_deviation_zero_for_exact_data():
    energies = np.linspace(110, 140, 7)
    cross = [breit_wigner(125.0, 2.0, 10.0, e) for e in energies]
    errors = np.ones(7)
    assert deviation_function((125.0, 2.0, 10.0), energies, cross, errors) == pytest.approx(0.0, abs=1e-20)


def test_deviation_scales_with_inverse_square_error():
    energies = np.linspace(110, 140, 7)
    cross = np.full(7, 0.5)
    params = (125.0, 2.0, 10.0)
    one = deviation_function(params, energies, cross, np.ones(7))
    two = deviation_function(params, energies, cross, np.full(7, 2.0))
    assert two == pytest.approx(one / 4)


@pytest.fixture
def higgs_run(tmp_path, capsys):
    energies = np.arange(101.0, 161.0, 2.0)
    data = tmp_path / "higgsData.txt"
    with open(data, "w") as handle:
        for e in energies:
            handle.write(f"{e!r}\t{breit_wigner(125.3, 2.0, 10.0, e)!r}\t0.1\n")
    output = tmp_path / "higgsFit.txt"
    status = main(["--data", str(data), "--output", str(output)])
    out = capsys.readouterr().out
    return status, energies, output, out


def _found_params(out):
    match = re.search(r"Found Minima \(m, Γ, A\): \(([^,]+), ([^,]+), ([^)]+)\)", out)
    return tuple(float(g) for g in match.groups())


def test_main_output_file_matches_data(higgs_run):
    status, energies, output, _ = higgs_run
    assert status == 0
    rows = [[float(f) for f in line.split()] for line in output.read_text().splitlines()]
    assert len(rows) == 30
    assert [r[0] for r in rows] == pytest.approx(list(energies))
    assert all(r[2] == pytest.approx(0.1) for r in rows)


def test_main_fit_column_is_breit_wigner(higgs_run):
    _, _, output, out = higgs_run
    mass, width, scale = _found_params(out)
    for line in output.read_text().splitlines():
        energy, _, _, fitted = (float(f) for f in line.split())
        assert fitted == pytest.approx(breit_wigner(mass, width, scale, energy), rel=1e-2, abs=1e-6)


def test_main_fit_improves_on_start(higgs_run):
    _, energies, _, out = higgs_run
    cross = [breit_wigner(125.3, 2.0, 10.0, e) for e in energies]
    errors = np.full(len(energies), 0.1)
    start = deviation_function((126.5, 2.8, 8.0), energies, cross, errors)
    found = deviation_function(_found_params(out), energies, cross, errors)
    assert found < start


def test_main_part_a_decreases_test_functions(higgs_run):
    _, _, _, out = higgs_run
    found = re.findall(r"Found minimum \(x,y\): \(([^,]+),([^)]+)\)", out)
    assert len(found) == 2
    rosen = tuple(float(v) for v in found[0])
    himmel = tuple(float(v) for v in found[1])
    assert rosenbrock_valley(rosen) < rosenbrock_valley((0.0, 0.0))
    assert himmelblau(himmel) < himmelblau((2.8, 1.8))