import math
from quadratic import Outcome
from selftest import CASES, run_self_test


def test_builtin_cases_pass():
    report = run_self_test()
    assert report.ok
    assert report.total == len(CASES)
    assert list(report.lines()) == [f"{len(CASES)}/{len(CASES)} tests passed"]


def test_wrong_expectation_is_reported():
    cases = [
        (1, 5, 6, Outcome.TWO_ROOTS, -3, -2),
        (1, 2, 2, Outcome.NO_ROOTS, math.nan, math.nan),
    ]
    report = run_self_test(cases)
    assert not report.ok
    assert len(report.passed) == 1
    lines = list(report.lines())
    assert lines[0].startswith("Wrong answer on test 1 * x^2 + 5 * x + 6 = 0.")
    assert "Current: two_roots, x1 = -2, x2 = -3" in lines[0]
    assert lines[-1] == "1/2 tests passed"


def test_wrong_outcome_fails():
    report = run_self_test([(0, 0, 0, Outcome.NO_ROOTS, math.nan, math.nan)])
    assert len(report.failed) == 1
