import math
from dataclasses import dataclass, field

from presenter import equation, fmt
from quadratic import Outcome, solve

NAN = math.nan

# (a, b, c, expected outcome, x1, x2); NAN marks an absent root
CASES = [
    (1, 5, 6, Outcome.TWO_ROOTS, -2, -3),
    (1, 2, 1, Outcome.ONE_ROOT, -1, NAN),
    (1, 2, 2, Outcome.NO_ROOTS, NAN, NAN),
    (0, 0, 0, Outcome.INFINITE_ROOTS, NAN, NAN),
    (0, 0, 5, Outcome.NO_ROOTS, NAN, NAN),
    (0, 3, 6, Outcome.ONE_ROOT, -2, NAN),
    (1, 0, -4, Outcome.TWO_ROOTS, 2, -2),
    (-1, 0, 4, Outcome.TWO_ROOTS, -2, 2),
]


@dataclass
class CaseResult:
    a: float
    b: float
    c: float
    expected: tuple
    actual: tuple

    @property
    def passed(self):
        if self.expected[0] is not self.actual[0]:
            return False
        return all(_same_root(e, x) for e, x in zip(self.expected[1:], self.actual[1:]))

    def explain(self):
        _, e1, e2 = self.expected
        outcome, x1, x2 = self.actual
        return (f"Wrong answer on test {equation(self.a, self.b, self.c)}.\n"
                f"Current: {outcome.value}, x1 = {fmt(x1)}, x2 = {fmt(x2)}\n"
                f"Right: {self.expected[0].value}, x1 = {fmt(e1)}, x2 = {fmt(e2)}")


@dataclass
class SelfTestReport:
    passed: list = field(default_factory=list)
    failed: list = field(default_factory=list)

    @property
    def ok(self):
        return not self.failed

    @property
    def total(self):
        return len(self.passed) + len(self.failed)

    def lines(self):
        for case in self.failed:
            yield case.explain()
        yield f"{len(self.passed)}/{self.total} tests passed"


def _same_root(expected, actual):
    if math.isnan(expected):
        return math.isnan(actual)
    return math.isclose(expected, actual, rel_tol=1e-12, abs_tol=1e-12)


def run_self_test(cases=CASES):
    report = SelfTestReport()
    for a, b, c, *expected in cases:
        result = solve(a, b, c)
        roots = list(result.roots) + [NAN] * (2 - len(result.roots))
        case = CaseResult(a, b, c, tuple(expected), (result.outcome, *roots))
        (report.passed if case.passed else report.failed).append(case)
    return report
