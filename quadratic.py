import math
from dataclasses import dataclass
from enum import Enum


class Outcome(Enum):
    NO_ROOTS = "no_roots"
    ONE_ROOT = "one_root"
    TWO_ROOTS = "two_roots"
    INFINITE_ROOTS = "infinite_roots"
    ERROR = "error"


class ErrorKind(Enum):
    """Why a solve failed. Values are the process exit codes."""

    A_INVALID = 4
    B_INVALID = 5
    C_INVALID = 6
    # 7 and 8 belonged to the null output slots, do not reuse them
    ROOT_1_INVALID = 9
    ROOT_2_INVALID = 10
    DISCRIMINANT_INVALID = 11

    @property
    def exit_code(self):
        return self.value

    @property
    def message(self):
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ErrorKind.A_INVALID: "a is not a finite number",
    ErrorKind.B_INVALID: "b is not a finite number",
    ErrorKind.C_INVALID: "c is not a finite number",
    ErrorKind.ROOT_1_INVALID: "x1 is not a finite number",
    ErrorKind.ROOT_2_INVALID: "x2 is not a finite number",
    ErrorKind.DISCRIMINANT_INVALID: "discriminant is not finite",
}


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    roots: tuple = ()
    error: ErrorKind = None

    @classmethod
    def none(cls):
        return cls(Outcome.NO_ROOTS)

    @classmethod
    def one(cls, x):
        return cls(Outcome.ONE_ROOT, (x,))

    @classmethod
    def two(cls, x1, x2):
        return cls(Outcome.TWO_ROOTS, (x1, x2))

    @classmethod
    def infinite(cls):
        return cls(Outcome.INFINITE_ROOTS)

    @classmethod
    def failure(cls, kind):
        return cls(Outcome.ERROR, error=kind)

    @property
    def ok(self):
        return self.outcome is not Outcome.ERROR

    @property
    def n_roots(self):
        """0, 1, 2, math.inf, or None for an error."""
        if self.outcome is Outcome.INFINITE_ROOTS:
            return math.inf
        if self.outcome is Outcome.ERROR:
            return None
        return len(self.roots)

    def as_dict(self):
        n = self.n_roots
        return {
            "outcome": self.outcome.value,
            "roots": list(self.roots),
            "n_roots": "inf" if n == math.inf else n,
            "error": self.error.name if self.error else None,
            "code": self.error.exit_code if self.error else 0,
        }


def _checked(*roots):
    for kind, x in zip((ErrorKind.ROOT_1_INVALID, ErrorKind.ROOT_2_INVALID), roots):
        if not math.isfinite(x):
            return Result.failure(kind)
    if len(roots) == 1:
        return Result.one(roots[0])
    return Result.two(*roots)


def solve_linear(b, c):
    """
    Solve b * x + c = 0.

    Returns NoRoots when b == 0 != c and InfiniteRoots when b == c == 0.
    """
    b, c = float(b), float(c)
    if not math.isfinite(b):
        return Result.failure(ErrorKind.B_INVALID)
    if not math.isfinite(c):
        return Result.failure(ErrorKind.C_INVALID)

    if b == 0.0:
        return Result.infinite() if c == 0.0 else Result.none()

    return _checked(-c / b)


def solve(a, b, c):
    """
    Solve a * x^2 + b * x + c = 0.

    The first reported root always takes the +sqrt(D) branch, so for two
    roots x1 > x2 only when a > 0.
    """
    a, b, c = float(a), float(b), float(c)
    for kind, value in ((ErrorKind.A_INVALID, a),
                        (ErrorKind.B_INVALID, b),
                        (ErrorKind.C_INVALID, c)):
        if not math.isfinite(value):
            return Result.failure(kind)

    if a == 0.0:
        return solve_linear(b, c)

    d = b * b - 4.0 * a * c
    if not math.isfinite(d):
        return Result.failure(ErrorKind.DISCRIMINANT_INVALID)

    if d < 0.0:
        return Result.none()
    if d == 0.0:
        return _checked(-b / (2.0 * a))

    sd = math.sqrt(d)
    return _checked((-b + sd) / (2.0 * a), (-b - sd) / (2.0 * a))
