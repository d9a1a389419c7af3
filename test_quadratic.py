import pytest
import math
from quadratic import solve, solve_linear, Outcome, ErrorKind, Result


def test_two_roots():
    result = solve(1, 5, 6)
    assert result.outcome is Outcome.TWO_ROOTS
    assert result.roots == (-2.0, -3.0)
    assert result.n_roots == 2


def test_two_roots_order_follows_plus_branch():
    # x1 takes +sqrt(D), so with a < 0 it is the smaller root
    result = solve(-1, 0, 4)
    assert result.roots == (-2.0, 2.0)


def test_one_root():
    result = solve(1, 2, 1)
    assert result.outcome is Outcome.ONE_ROOT
    assert result.roots == (-1.0,)


def test_no_roots():
    result = solve(1, 2, 2)
    assert result.outcome is Outcome.NO_ROOTS
    assert result.roots == ()
    assert result.n_roots == 0


def test_infinite_roots():
    result = solve(0, 0, 0)
    assert result.outcome is Outcome.INFINITE_ROOTS
    assert result.n_roots == math.inf
    assert result.roots == ()


def test_degenerate_no_roots():
    assert solve(0, 0, 7).outcome is Outcome.NO_ROOTS


def test_degenerate_linear():
    result = solve(0, 3, 6)
    assert result.outcome is Outcome.ONE_ROOT
    assert result.roots == (-2.0,)


def test_degenerate_irrational():
    result = solve(0, 3, math.sqrt(2))
    assert result.roots[0] == pytest.approx(-math.sqrt(2) / 3)


@pytest.mark.parametrize("a, b, c", [
    (1, -3, 2),
    (2.5, 7.1, -3.3),
    (-4, 10, 1),
    (1e-6, 1, 1),
])
def test_roots_satisfy_equation(a, b, c):
    result = solve(a, b, c)
    assert result.outcome is Outcome.TWO_ROOTS
    for x in result.roots:
        scale = abs(a * x * x) + abs(b * x) + abs(c)
        assert a * x * x + b * x + c == pytest.approx(0.0, abs=1e-9 * scale)


@pytest.mark.parametrize("a, b, c, kind", [
    (math.nan, 1, 1, ErrorKind.A_INVALID),
    (math.inf, 1, 1, ErrorKind.A_INVALID),
    (1, -math.inf, 1, ErrorKind.B_INVALID),
    (1, 1, math.nan, ErrorKind.C_INVALID),
    (0, math.nan, 1, ErrorKind.B_INVALID),
    (0, 1, math.inf, ErrorKind.C_INVALID),
    (math.nan, math.nan, math.nan, ErrorKind.A_INVALID),
])
def test_invalid_coefficients(a, b, c, kind):
    result = solve(a, b, c)
    assert result.outcome is Outcome.ERROR
    assert result.error is kind
    assert result.roots == ()
    assert result.n_roots is None
    assert not result.ok


def test_discriminant_overflow():
    result = solve(1e200, 1e200, 1)
    assert result.error is ErrorKind.DISCRIMINANT_INVALID


def test_first_root_overflow():
    assert solve(1e-300, -1e10, 0).error is ErrorKind.ROOT_1_INVALID


def test_second_root_overflow():
    assert solve(1e-300, 1e10, 0).error is ErrorKind.ROOT_2_INVALID


def test_linear_root_overflow():
    assert solve(0, 1e-300, 1e300).error is ErrorKind.ROOT_1_INVALID


def test_solve_is_idempotent():
    assert solve(3, -7, 1) == solve(3, -7, 1)


def test_solve_linear_directly():
    assert solve_linear(2, -8) == Result.one(4.0)
    assert solve_linear(0, 0).outcome is Outcome.INFINITE_ROOTS
    assert solve_linear(0, 1).outcome is Outcome.NO_ROOTS
    assert solve_linear(math.inf, 1).error is ErrorKind.B_INVALID
    assert solve_linear(1, math.nan).error is ErrorKind.C_INVALID


def test_non_numbers_rejected():
    with pytest.raises(TypeError):
        solve(None, 1, 1)
    with pytest.raises(ValueError):
        solve("x", 1, 1)


def test_as_dict():
    assert solve(1, 5, 6).as_dict() == {
        "outcome": "two_roots", "roots": [-2.0, -3.0], "n_roots": 2,
        "error": None, "code": 0,
    }
    assert solve(0, 0, 0).as_dict()["n_roots"] == "inf"
    assert solve(1, 1, math.inf).as_dict()["code"] == 6


def test_exit_codes_are_stable():
    assert {k.name: k.exit_code for k in ErrorKind} == {
        "A_INVALID": 4, "B_INVALID": 5, "C_INVALID": 6,
        "ROOT_1_INVALID": 9, "ROOT_2_INVALID": 10, "DISCRIMINANT_INVALID": 11,
    }
